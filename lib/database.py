# =============================================================================
# lib/database.py - Async Database Engine
# =============================================================================
# Builds the SQLAlchemy async engine and session factory for a database URL
# and creates the tables at startup.
#
# Usage:
#   engine = create_engine_from_url(settings.DATABASE_URL)
#   session_factory = create_session_factory(engine)
#   await connect_db(engine)
# =============================================================================

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

# Imported for its side effect: registers the products table on SQLModel.metadata
from core.models.product import Product  # noqa: F401

logger = logging.getLogger(__name__)


def create_engine_from_url(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine.

    Nothing connects until the first query, so a bad URL or an unreachable
    server only shows up in connect_db().
    """
    return create_async_engine(database_url, echo=echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory whose objects stay usable after commit."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def connect_db(engine: AsyncEngine) -> bool:
    """
    Check the connection and create all tables.

    Returns False (after logging) instead of raising, so the API keeps
    serving while the database is down.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database connected and tables created")
        return True
    except Exception as e:
        logger.error(f"Unable to connect to the database: {e}")
        return False


async def ping_db(engine: AsyncEngine) -> str:
    """Run a trivial query; returns "healthy" or a short failure reason."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return "healthy"
    except Exception as e:
        return f"unhealthy: {str(e)[:50]}"
