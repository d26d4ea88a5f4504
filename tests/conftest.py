"""
Shared pytest fixtures for Interrogator tests.

Every test gets its own in-memory SQLite database with the schema created
from the SQLModel metadata.
"""

from typing import Any, Dict, Optional

import pytest
import pytest_asyncio

from interrogator.core.database import build_engine, build_session_factory, init_db
from interrogator.models import Section
from interrogator.repositories.group import GroupRepository
from interrogator.repositories.question import QuestionRepository
from interrogator.schemas.group import GroupCreate
from interrogator.schemas.question import QuestionCreate
from interrogator.services.group import GroupService


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def engine():
    engine = build_engine("sqlite+aiosqlite://", echo=False)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


# ============================================================================
# Repository / Service Fixtures
# ============================================================================

@pytest.fixture
def group_repo(session) -> GroupRepository:
    return GroupRepository(session)


@pytest.fixture
def question_repo(session) -> QuestionRepository:
    return QuestionRepository(session)


@pytest.fixture
def group_service(group_repo) -> GroupService:
    return GroupService(group_repo)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def section(session) -> Section:
    section = Section(name="Demographics", slug="demographics")
    session.add(section)
    await session.commit()
    await session.refresh(section)
    return section


@pytest.fixture
def make_group(group_repo, section):
    """Factory creating persisted groups in the default section."""
    async def _make(slug: str = "household", options: Optional[Dict[str, Any]] = None, **kwargs):
        data = GroupCreate(
            name=kwargs.pop("name", slug.replace("-", " ").title()),
            slug=slug,
            section_id=kwargs.pop("section_id", section.id),
            options=options or {},
            **kwargs
        )
        return await group_repo.create(data)
    return _make


@pytest.fixture
def make_question(question_repo):
    """Factory creating persisted questions in a group."""
    async def _make(group, slug: str, **kwargs):
        data = QuestionCreate(
            name=kwargs.pop("name", f"What is your {slug}?"),
            slug=slug,
            group_id=group.id,
            **kwargs
        )
        return await question_repo.create(data)
    return _make
