"""Section model, the owner of groups."""

from typing import List, Optional, TYPE_CHECKING
from sqlmodel import Field, SQLModel, Relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .group import Group


class Section(BaseModel, SQLModel, table=True):
    """Survey section holding an ordered set of groups."""
    
    __tablename__ = "sections"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, nullable=False)
    slug: str = Field(max_length=255, unique=True, nullable=False, index=True)
    team_id: Optional[int] = Field(default=None, index=True)
    
    groups: List["Group"] = Relationship(back_populates="section")
    
    def __repr__(self) -> str:
        return f"<Section(id={self.id}, name={self.name}, slug={self.slug})>"
