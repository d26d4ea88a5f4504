"""Custom exceptions for the application."""

from typing import Any, Optional

from fastapi import HTTPException, status
from interrogator.utils.messages import get_message


class GroupNotFoundError(HTTPException):
    """Exception raised when a group cannot be resolved.

    ``lookup`` tells which key missed: ``"id"``, ``"slug"`` or ``None`` when
    no identifier was given at all.
    """
    
    def __init__(self, identifier: Any = None, lookup: Optional[str] = None, message: str = None):
        if message is None:
            if lookup == "id":
                message = get_message("group", "not_found_with_id")
            elif lookup == "slug":
                message = get_message("group", "not_found_with_slug")
            else:
                message = get_message("group", "not_found")
        
        self.identifier = identifier
        self.lookup = lookup
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=message
        )
    
    def __str__(self) -> str:
        return self.detail


class BusinessLogicError(HTTPException):
    """Exception for business logic violations."""
    
    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message
        )
