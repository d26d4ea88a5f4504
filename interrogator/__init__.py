"""Interrogator - survey groups with cascading soft delete."""

__version__ = "1.0.0"
