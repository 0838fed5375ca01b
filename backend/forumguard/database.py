"""
ForumGuard Backend — Database Session Management
==================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling and provides a
       per-request session. Sessions are read-only: nothing is ever
       committed, the session is rolled back on error and always closed.

Note:
    The forum application owns the schema. This module never creates or
    alters tables; `Base.metadata` exists only so the ORM can map rows.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from forumguard.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
# SQLite (used by tests and local demos) does not accept queue pool sizing.
_engine_options: Dict[str, Any] = {
    "pool_pre_ping": settings.db_pool_pre_ping,
    "echo": settings.log_level == "DEBUG",
}
if not settings.is_sqlite:
    _engine_options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=3600,
    )

engine = create_async_engine(settings.database_url, **_engine_options)

# expire_on_commit=False: records are converted to pydantic models after
# the query, outside any transaction boundary.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for the forum's ORM mappings."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a read-only database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the repository built for this request
        3. On error: rolls back whatever read transaction was opened
        4. Always: closes the session (returns connection to pool)

    Raises:
        Any exception from the handler is re-raised for the global
        exception handlers.
    """
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def dispose_engine() -> None:
    """Closes all pooled connections during application shutdown."""
    await engine.dispose()
