"""Group service for business logic."""

from typing import Any, List, Optional

from interrogator.core.exceptions import BusinessLogicError, GroupNotFoundError
from interrogator.models.group import Group
from interrogator.repositories.group import GroupRepository
from interrogator.schemas.group import (
    GroupCreate, GroupUpdate, GroupResponse, GroupListResponse,
    GroupFilterParams, GroupOptionSet, GroupOptionUnset, GroupOptionsSync
)
from interrogator.schemas.shared import MessageResponse
from interrogator.utils.messages import get_message


class GroupService:
    """Group service for business logic."""

    def __init__(self, group_repo: GroupRepository):
        self.group_repo = group_repo

    async def _require_group(self, identifier: Any, include_deleted: bool = False) -> Group:
        """Resolve an identifier, treating a missing one as not found."""
        group = await self.group_repo.resolve(identifier, include_deleted)
        if group is None:
            raise GroupNotFoundError(message=get_message("group", "identifier_required"))
        return group

    async def create_group(self, group_data: GroupCreate, created_by: Optional[int] = None) -> GroupResponse:
        """Create a new group."""
        # Validate slug uniqueness
        if await self.group_repo.slug_exists(group_data.slug):
            raise BusinessLogicError(get_message("group", "slug_exists"))

        group = await self.group_repo.create(group_data, created_by)

        return GroupResponse.from_group_model(group)

    async def get_group(self, identifier: Any, include_deleted: bool = False) -> GroupResponse:
        """Get group by ID, slug or instance."""
        group = await self._require_group(identifier, include_deleted)
        return GroupResponse.from_group_model(group)

    async def get_groups(self, filters: GroupFilterParams) -> GroupListResponse:
        """Get groups with filters and pagination."""
        groups, total = await self.group_repo.get_all_filtered(filters)

        return GroupListResponse(
            items=[GroupResponse.from_group_model(group) for group in groups],
            total=total,
            page=filters.page,
            size=filters.size,
            pages=(total + filters.size - 1) // filters.size
        )

    async def get_section_groups(self, section_id: int, include_deleted: bool = False) -> List[GroupResponse]:
        """Get the groups of a section in display order."""
        groups = await self.group_repo.get_by_section(section_id, include_deleted)
        return [GroupResponse.from_group_model(group) for group in groups]

    async def update_group(self, identifier: Any, group_data: GroupUpdate, updated_by: Optional[int] = None) -> GroupResponse:
        """Update group information."""
        group = await self._require_group(identifier)

        # Validate slug uniqueness if being updated
        if group_data.slug and await self.group_repo.slug_exists(group_data.slug, exclude_group_id=group.id):
            raise BusinessLogicError(get_message("group", "slug_exists"))

        updated_group = await self.group_repo.update(group, group_data, updated_by)
        return GroupResponse.from_group_model(updated_group)

    async def delete_group(self, identifier: Any, deleted_by: Optional[int] = None) -> MessageResponse:
        """Delete group and its questions (soft delete)."""
        group = await self._require_group(identifier, include_deleted=True)
        group = await self.group_repo.delete(group, deleted_by)

        return MessageResponse(
            message=get_message("group", "deleted"),
            data={"id": group.id, "deleted_at": group.deleted_at.isoformat()}
        )

    async def restore_group(self, identifier: Any) -> GroupResponse:
        """Restore group and the questions deleted with it."""
        group = await self._require_group(identifier, include_deleted=True)
        group = await self.group_repo.restore(group)
        return GroupResponse.from_group_model(group)

    async def set_option(self, identifier: Any, option: GroupOptionSet) -> GroupResponse:
        """Set a single group option."""
        group = await self._require_group(identifier)
        group = await self.group_repo.set_option(group, option.key, option.value)
        return GroupResponse.from_group_model(group)

    async def unset_option(self, identifier: Any, option: GroupOptionUnset) -> GroupResponse:
        """Remove a single group option."""
        group = await self._require_group(identifier)
        group = await self.group_repo.unset_option(group, option.key)
        return GroupResponse.from_group_model(group)

    async def sync_options(self, identifier: Any, sync_data: GroupOptionsSync) -> GroupResponse:
        """Replace all group options."""
        group = await self._require_group(identifier)
        group = await self.group_repo.sync_options(group, sync_data.options)
        return GroupResponse.from_group_model(group)
