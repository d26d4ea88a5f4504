"""Shared schemas for service responses."""

from typing import List, Optional, TypeVar, Generic
from pydantic import BaseModel, Field

T = TypeVar('T')


class BaseListResponse(BaseModel, Generic[T]):
    """Base list response with pagination."""
    
    items: List[T] = Field(..., description="List of items")
    total: int = Field(..., description="Total number of items")
    page: int = Field(..., description="Current page number")
    size: int = Field(..., description="Items per page")
    pages: int = Field(..., description="Total number of pages")


class MessageResponse(BaseModel):
    """Standard message response."""
    
    message: str = Field(..., description="Response message")
    success: bool = Field(default=True, description="Operation success status")
    data: Optional[dict] = Field(default=None, description="Additional response data")
