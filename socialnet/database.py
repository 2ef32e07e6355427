"""
SocialNet Backend — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine (pooled for PostgreSQL, unpooled for SQLite),
       provides a session dependency that commits on success and rolls back
       on error.
Who:   Routes receive sessions via `Depends(get_db_session)`; the app
       lifespan calls `init_models()` and `dispose_engine()`.

Connection Pooling:
    pool_size=20, max_overflow=10, pool_pre_ping, pool_recycle=3600 for
    server databases. SQLite (tests, local runs) uses NullPool because
    aiosqlite connections are bound to the event loop that opened them.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from socialnet.config import Settings, settings


def _engine_options(config: Settings) -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": config.log_level == "DEBUG"}
    if config.is_sqlite:
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_pre_ping=config.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


def build_engine(config: Settings) -> AsyncEngine:
    """Create an async engine for the configured database URL."""
    return create_async_engine(config.database_url, **_engine_options(config))


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings)

# expire_on_commit=False: attributes stay readable after the request's commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class so they share one metadata object,
    which `init_models()` uses to create the schema.
    """
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the global error handler
        5. Always: closes the session (returns connection to pool)
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
async def init_models() -> None:
    """Create any missing tables. Existing tables are left untouched."""
    # Registers every model on Base.metadata
    import socialnet.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close all pooled connections. Called during application shutdown."""
    await engine.dispose()
