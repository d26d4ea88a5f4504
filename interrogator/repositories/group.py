"""Group repository: CRUD, cascading soft delete/restore, options and resolver."""

import logging
from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime, timedelta
from sqlalchemy import select, and_, or_, func
from sqlalchemy.ext.asyncio import AsyncSession

from interrogator.core.config import settings
from interrogator.core.exceptions import GroupNotFoundError
from interrogator.models.group import Group, DEFAULT_ORDER
from interrogator.repositories.question import QuestionRepository
from interrogator.schemas.group import GroupCreate, GroupUpdate, GroupFilterParams
from interrogator.utils.identifiers import Absent, ByInstance, ById, BySlug, parse_group_identifier

logger = logging.getLogger(__name__)


def _order_key(group: Group) -> Tuple[int, int]:
    try:
        order = int(group.order)
    except (TypeError, ValueError):
        order = DEFAULT_ORDER
    return order, group.id or 0


class GroupRepository:
    """Group repository for CRUD, cascade and option operations."""

    def __init__(self, session: AsyncSession, restore_window_seconds: Optional[int] = None):
        self.session = session
        self.question_repo = QuestionRepository(session)
        if restore_window_seconds is None:
            restore_window_seconds = settings.RESTORE_WINDOW_SECONDS
        self.restore_window = timedelta(seconds=restore_window_seconds)

    # ===== BASIC CRUD OPERATIONS =====

    async def create(self, group_data: GroupCreate, created_by: Optional[int] = None) -> Group:
        """Create a new group."""
        group = Group(
            name=group_data.name,
            slug=group_data.slug,
            section_id=group_data.section_id,
            team_id=group_data.team_id,
            options=dict(group_data.options),
            created_by=created_by
        )

        self.session.add(group)
        await self.session.commit()
        await self.session.refresh(group)
        return group

    async def get_by_id(self, group_id: int, include_deleted: bool = False) -> Optional[Group]:
        """Get group by ID."""
        query = select(Group).where(Group.id == group_id)
        if not include_deleted:
            query = query.where(Group.deleted_at.is_(None))
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str, include_deleted: bool = False) -> Optional[Group]:
        """Get group by slug."""
        query = select(Group).where(Group.slug == slug)
        if not include_deleted:
            query = query.where(Group.deleted_at.is_(None))
        result = await self.session.execute(query)
        return result.scalars().first()

    async def update(self, group: Group, group_data: GroupUpdate, updated_by: Optional[int] = None) -> Group:
        """Update group attributes other than options."""
        update_data = group_data.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            if value is not None or key == "team_id":
                setattr(group, key, value)

        group.updated_at = datetime.utcnow()
        group.updated_by = updated_by

        self.session.add(group)
        await self.session.commit()
        await self.session.refresh(group)
        return group

    async def slug_exists(self, slug: str, exclude_group_id: Optional[int] = None) -> bool:
        """Check if slug is taken, soft deleted groups included."""
        query = select(Group.id).where(Group.slug == slug)

        if exclude_group_id:
            query = query.where(Group.id != exclude_group_id)

        result = await self.session.execute(query)
        return result.first() is not None

    # ===== FILTERING AND LISTING =====

    async def get_by_section(self, section_id: int, include_deleted: bool = False) -> List[Group]:
        """Get groups of a section sorted by their order option."""
        query = select(Group).where(Group.section_id == section_id)
        if not include_deleted:
            query = query.where(Group.deleted_at.is_(None))
        result = await self.session.execute(query)
        return sorted(result.scalars().all(), key=_order_key)

    async def get_all_filtered(self, filters: GroupFilterParams) -> Tuple[List[Group], int]:
        """Get groups with filters and pagination."""
        conditions = []

        if filters.only_deleted:
            conditions.append(Group.deleted_at.is_not(None))
        elif not filters.include_deleted:
            conditions.append(Group.deleted_at.is_(None))

        if filters.section_id is not None:
            conditions.append(Group.section_id == filters.section_id)

        if filters.team_id is not None:
            conditions.append(Group.team_id == filters.team_id)

        if filters.search:
            conditions.append(or_(
                Group.name.ilike(f"%{filters.search}%"),
                Group.slug.ilike(f"%{filters.search}%")
            ))

        query = select(Group)
        count_query = select(func.count(Group.id))
        if conditions:
            query = query.where(and_(*conditions))
            count_query = count_query.where(and_(*conditions))

        # Apply sorting
        sort_column = getattr(Group, filters.sort_by)
        if filters.sort_order == "desc":
            query = query.order_by(sort_column.desc(), Group.id.desc())
        else:
            query = query.order_by(sort_column.asc(), Group.id.asc())

        # Apply pagination
        offset = (filters.page - 1) * filters.size
        query = query.offset(offset).limit(filters.size)

        result = await self.session.execute(query)
        groups = result.scalars().all()

        count_result = await self.session.execute(count_query)
        total = count_result.scalar() or 0

        return list(groups), total

    # ===== CASCADING SOFT DELETE / RESTORE =====

    async def delete(self, group: Group, deleted_by: Optional[int] = None) -> Group:
        """Soft delete a group together with its active questions.

        Every question is stamped with the same instant as the group so that
        ``restore`` can find them again. Questions already deleted keep their
        own timestamp. Deleting a deleted group stamps it again.
        """
        deleted_at = datetime.utcnow()

        try:
            questions = await self.question_repo.get_by_group(group.id)
            for question in questions:
                await self.question_repo.soft_delete(question, deleted_at, deleted_by, commit=False)

            group.mark_deleted(deleted_at, deleted_by)
            self.session.add(group)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(group)
        logger.info(
            "Soft deleted group %s (%s) with %d question(s) at %s",
            group.id, group.slug, len(questions), deleted_at.isoformat()
        )
        return group

    async def restore(self, group: Group) -> Group:
        """Restore a group and the questions deleted along with it.

        Only questions whose ``deleted_at`` lies in
        ``[group.deleted_at, group.deleted_at + window]`` are restored; ones
        deleted on their own at another time stay deleted. A group that is
        not deleted is returned untouched.
        """
        deleted_at = group.deleted_at
        if deleted_at is None:
            logger.debug("Group %s is not deleted, nothing to restore", group.id)
            return group

        try:
            questions = await self.question_repo.get_deleted_between(
                group.id, deleted_at, deleted_at + self.restore_window
            )
            for question in questions:
                await self.question_repo.restore(question, commit=False)

            group.mark_restored()
            self.session.add(group)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(group)
        logger.info(
            "Restored group %s (%s) with %d question(s) deleted at %s",
            group.id, group.slug, len(questions), deleted_at.isoformat()
        )
        return group

    # ===== OPTIONS =====

    async def set_option(self, group: Group, key: str, value: Any) -> Group:
        """Set an option (brand new or updating existing) and save."""
        options = dict(group.options or {})
        options[key] = value
        return await self._save_options(group, options)

    async def unset_option(self, group: Group, key: str) -> Group:
        """Remove an option if present and save."""
        options = dict(group.options or {})
        options.pop(key, None)
        return await self._save_options(group, options)

    async def sync_options(self, group: Group, options: Dict[str, Any]) -> Group:
        """Make the stored options exactly equal to ``options`` in one write."""
        current = dict(group.options or {})
        removed = sorted(set(current) - set(options))
        if removed:
            logger.debug("Removing options %s from group %s", removed, group.id)
        return await self._save_options(group, dict(options))

    async def _save_options(self, group: Group, options: Dict[str, Any]) -> Group:
        # Assign a new dict so the JSON column is flagged as changed
        group.options = options
        group.updated_at = datetime.utcnow()
        self.session.add(group)
        await self.session.commit()
        await self.session.refresh(group)
        return group

    # ===== RESOLVER =====

    async def resolve(self, identifier: Any, include_deleted: bool = False) -> Optional[Group]:
        """Resolve a group from ``None``, a ``Group``, an ID or a slug.

        ``None`` resolves to ``None``. Misses raise ``GroupNotFoundError``
        naming whether the ID or the slug lookup failed.
        """
        target = parse_group_identifier(identifier)

        if isinstance(target, Absent):
            return None

        if isinstance(target, ByInstance):
            return target.group

        if isinstance(target, ById):
            group = await self.get_by_id(target.group_id, include_deleted)
            if group is None:
                logger.debug("No group with id %s (include_deleted=%s)", target.group_id, include_deleted)
                raise GroupNotFoundError(target.group_id, lookup="id")
            return group

        if isinstance(target, BySlug):
            group = await self.get_by_slug(target.slug, include_deleted)
            if group is None:
                logger.debug("No group with slug %r (include_deleted=%s)", target.slug, include_deleted)
                raise GroupNotFoundError(target.slug, lookup="slug")
            return group

        raise TypeError(f"Unsupported group identifier: {target!r}")
