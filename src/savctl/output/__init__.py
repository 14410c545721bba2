"""Render ServiceResult as Rich text or JSON."""
