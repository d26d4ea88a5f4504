"""Question schemas for requests."""

from typing import Optional, Any, Dict
from pydantic import BaseModel, Field


class QuestionCreate(BaseModel):
    """Schema for creating a question."""
    name: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, max_length=255)
    type: str = Field("small_text", max_length=50)
    group_id: int
    team_id: Optional[int] = None
    options: Dict[str, Any] = Field(default_factory=dict)
