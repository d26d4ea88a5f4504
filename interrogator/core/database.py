"""Database engine and session management."""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from interrogator.core.config import settings


def build_engine(database_uri: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """Create an async engine for the given URI (defaults to settings)."""
    uri = database_uri or settings.DATABASE_URI
    echo = settings.SQL_ECHO if echo is None else echo

    if uri.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory databases must share one connection
        if uri.rstrip("/").endswith(("sqlite+aiosqlite:", ":memory:")):
            kwargs["poolclass"] = StaticPool
        return create_async_engine(uri, echo=echo, **kwargs)

    return create_async_engine(
        uri,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    """Create a session factory bound to an engine."""
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine()
async_session = build_session_factory(engine)


async def init_db(bind: Optional[AsyncEngine] = None) -> None:
    """Create all tables registered on the SQLModel metadata."""
    # Register table models on the metadata
    import interrogator.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session, rolling back on error."""
    async with async_session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
