"""Infrastructure layer: database engine, schema, SQL composition, paging.

This layer depends on stdlib, pydantic, and SQLAlchemy.
It may import domain models but never services, commands, or output.
"""
