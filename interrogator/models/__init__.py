"""Database models initialization."""

# Base classes
from .base import BaseModel, TimestampMixin, AuditMixin, SoftDeleteMixin

# Survey models
from .section import Section
from .group import Group
from .question import Question

__all__ = [
    # Base classes
    "BaseModel",
    "TimestampMixin",
    "AuditMixin",
    "SoftDeleteMixin",
    
    # Survey models
    "Section",
    "Group",
    "Question",
]
