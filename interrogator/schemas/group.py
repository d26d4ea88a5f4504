"""Group schemas for request/response."""

import re
from typing import Optional, Any, Dict, Literal
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from interrogator.schemas.shared import BaseListResponse

SLUG_PATTERN = re.compile(r'^[a-z0-9_-]+$')


def _validate_slug(slug: str) -> str:
    slug = slug.lower().strip()
    if not SLUG_PATTERN.match(slug):
        raise ValueError("Slug must contain only lowercase letters, numbers, hyphens and underscores")
    if slug.isdigit():
        # Numeric input is always resolved as an ID
        raise ValueError("Slug must not be purely numeric")
    return slug


# ===== BASE SCHEMAS =====

class GroupBase(BaseModel):
    """Base group schema."""
    name: str = Field(..., min_length=1, max_length=255, description="Group display name")
    slug: str = Field(..., min_length=1, max_length=255, description="Unique human-readable key")
    section_id: int = Field(..., description="Owning section ID")
    team_id: Optional[int] = Field(None, description="Owning team ID")
    options: Dict[str, Any] = Field(default_factory=dict, description="Free-form group options")
    
    @field_validator('slug')
    @classmethod
    def validate_slug(cls, slug: str) -> str:
        """Validate slug format."""
        return _validate_slug(slug)
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, name: str) -> str:
        """Validate and clean name."""
        return name.strip()


# ===== REQUEST SCHEMAS =====

class GroupCreate(GroupBase):
    """Schema for creating a group."""
    pass


class GroupUpdate(BaseModel):
    """Schema for updating a group. Options are changed via the option schemas."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=255)
    section_id: Optional[int] = None
    team_id: Optional[int] = None
    
    @field_validator('slug')
    @classmethod
    def validate_slug(cls, slug: Optional[str]) -> Optional[str]:
        """Validate slug format if provided."""
        return _validate_slug(slug) if slug else slug
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, name: Optional[str]) -> Optional[str]:
        """Validate and clean name if provided."""
        return name.strip() if name else None


class GroupOptionSet(BaseModel):
    """Schema for setting a single option."""
    key: str = Field(..., min_length=1, max_length=255)
    value: Any = Field(None, description="Any JSON-serializable value")


class GroupOptionUnset(BaseModel):
    """Schema for removing a single option."""
    key: str = Field(..., min_length=1, max_length=255)


class GroupOptionsSync(BaseModel):
    """Schema for replacing the whole options map."""
    options: Dict[str, Any] = Field(default_factory=dict)


class GroupFilterParams(BaseModel):
    """Filter parameters for group listing."""
    section_id: Optional[int] = None
    team_id: Optional[int] = None
    search: Optional[str] = Field(None, description="Search in name and slug")
    include_deleted: bool = False
    only_deleted: bool = False
    page: int = Field(1, ge=1)
    size: int = Field(20, ge=1, le=100)
    sort_by: Literal["name", "slug", "created_at", "deleted_at"] = "created_at"
    sort_order: Literal["asc", "desc"] = "asc"


# ===== RESPONSE SCHEMAS =====

class GroupResponse(BaseModel):
    """Schema for group response."""
    id: int
    name: str
    slug: str
    section_id: int
    team_id: Optional[int] = None
    options: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
    
    # Computed fields
    order: Any = Field(..., description="Display order taken from options, 1 when unset")
    is_deleted: bool = Field(..., description="Whether group is soft deleted")
    
    @classmethod
    def from_group_model(cls, group) -> "GroupResponse":
        """Create GroupResponse from Group model."""
        return cls(
            id=group.id,
            name=group.name,
            slug=group.slug,
            section_id=group.section_id,
            team_id=group.team_id,
            options=dict(group.options or {}),
            created_at=group.created_at,
            updated_at=group.updated_at,
            deleted_at=group.deleted_at,
            order=group.order,
            is_deleted=group.is_deleted
        )


class GroupListResponse(BaseListResponse[GroupResponse]):
    """Paginated group list."""
    pass
