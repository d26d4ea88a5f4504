"""Question model, the children of a group."""

from typing import Optional, TYPE_CHECKING
from sqlmodel import Field, SQLModel, Column, JSON, Relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .group import Group


class Question(BaseModel, SQLModel, table=True):
    """Survey question belonging to exactly one group."""
    
    __tablename__ = "questions"
    
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    slug: str = Field(max_length=255, nullable=False, index=True)
    type: str = Field(default="small_text", max_length=50, nullable=False)
    group_id: int = Field(foreign_key="groups.id", index=True)
    team_id: Optional[int] = Field(default=None, index=True)
    options: Optional[dict] = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=True)
    )
    
    group: Optional["Group"] = Relationship(back_populates="questions")
    
    def __repr__(self) -> str:
        return f"<Question(id={self.id}, slug={self.slug}, group_id={self.group_id})>"
    
    def belongs_to_group(self, group_id: int) -> bool:
        """Check if question belongs to the given group."""
        return self.group_id == group_id
