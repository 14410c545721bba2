"""Domain layer: criteria, records, request context, and validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
