"""Base model and mixins shared by all tables."""

from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel


class TimestampMixin(SQLModel):
    """Creation and update timestamps."""
    
    created_at: datetime = Field(default_factory=datetime.utcnow, nullable=False)
    updated_at: Optional[datetime] = Field(default=None)


class AuditMixin(SQLModel):
    """User ids of whoever created or last updated the row."""
    
    created_by: Optional[int] = Field(default=None)
    updated_by: Optional[int] = Field(default=None)


class SoftDeleteMixin(SQLModel):
    """Reversible delete marker: a null ``deleted_at`` means active."""
    
    deleted_at: Optional[datetime] = Field(default=None, index=True)
    deleted_by: Optional[int] = Field(default=None)
    
    @property
    def is_deleted(self) -> bool:
        """Check if the row is soft deleted."""
        return self.deleted_at is not None
    
    def mark_deleted(self, at: Optional[datetime] = None, deleted_by: Optional[int] = None) -> datetime:
        """Set the delete marker and return the timestamp used."""
        self.deleted_at = at or datetime.utcnow()
        self.deleted_by = deleted_by
        self.updated_at = self.deleted_at
        return self.deleted_at
    
    def mark_restored(self) -> None:
        """Clear the delete marker."""
        self.deleted_at = None
        self.deleted_by = None
        self.updated_at = datetime.utcnow()


class BaseModel(TimestampMixin, AuditMixin, SoftDeleteMixin):
    """Base for table models: timestamps, audit columns and soft delete."""
    pass
