"""Group model for organizing questions within a section."""

from typing import Any, List, Optional, TYPE_CHECKING
from sqlmodel import Field, SQLModel, Column, JSON, Relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .section import Section
    from .question import Question

DEFAULT_ORDER = 1


class Group(BaseModel, SQLModel, table=True):
    """Soft-deletable group of questions with a free-form options map."""
    
    __tablename__ = "groups"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, nullable=False, index=True)
    slug: str = Field(max_length=255, unique=True, nullable=False, index=True)
    section_id: int = Field(foreign_key="sections.id", index=True)
    team_id: Optional[int] = Field(default=None, index=True)
    
    # Flat key/value settings, e.g. {"order": 2, "color": "red"}
    options: Optional[dict] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=True, comment="Group options: order, display settings, etc")
    )
    
    section: Optional["Section"] = Relationship(back_populates="groups")
    questions: List["Question"] = Relationship(back_populates="group")
    
    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name}, slug={self.slug})>"
    
    @property
    def order(self) -> Any:
        """Get display order from options, defaulting to 1."""
        return self.get_option("order", DEFAULT_ORDER)
    
    def get_option(self, key: str, default: Any = None) -> Any:
        """Get a single option; null storage reads as an empty map."""
        if self.options and isinstance(self.options, dict):
            value = self.options.get(key)
            if value is not None:
                return value
        return default
