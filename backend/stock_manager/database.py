"""
Stock Manager Backend — Database Session Management
====================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   The engine is the one process-wide store handle; every handler
       reaches it through `get_db_session` instead of a global connection.
How:   The engine is created at import and disposed by the application
       lifespan. Sessions are created per request and commit on success,
       roll back on error.

Lifecycle:
    acquire  → module import (create_async_engine, no connection opened yet)
    use      → one AsyncSession per request, one statement per session
    release  → dispose_engine() from the lifespan shutdown hook
"""

from typing import AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from stock_manager.config import settings


# ── Engine Configuration ──────────────────────────────────────────────────
# Pool sizing is left to SQLAlchemy's defaults.
engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=True,  # Catches stale connections after a database restart
    echo=settings.log_level == "DEBUG",
)

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: RETURNING rows stay readable after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every table lives in the configured schema (`component_manager` by
    default), so the shared metadata carries it and models don't repeat it.
    """

    metadata = MetaData(schema=settings.db_schema)


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory (no connection yet)
        2. Yields it to the route handler, which runs one statement
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session (returns connection to pool)

    Because the session connects lazily, a request rejected by path or
    body validation never touches the store. Write services commit on their
    own (see CrudService); the commit here covers reads and is a no-op
    after a write.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called from the lifespan shutdown."""
    await engine.dispose()
