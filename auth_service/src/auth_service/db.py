# auth_service/src/auth_service/db.py

from typing import AsyncGenerator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from auth_service.config import settings
from auth_service.logging_config import logger
from shared.models.base import Base

__all__ = ["Base", "close_engine", "get_db", "get_engine", "get_session_factory"]

_engine: Optional[AsyncEngine] = None
_async_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


def get_engine() -> AsyncEngine:
    """Returns the SQLAlchemy engine, creating it if it doesn't exist."""
    global _engine
    if _engine is None:
        logger.info(f"Creating new AsyncEngine for {settings.PROJECT_NAME}")
        _engine = create_async_engine(
            str(settings.DATABASE_URL),
            echo=(settings.LOGGING_LEVEL.upper() == "DEBUG"),
            pool_pre_ping=True,
        )
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Returns the session factory, creating it if it doesn't exist."""
    global _async_session_factory
    if _async_session_factory is None:
        _async_session_factory = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    return _async_session_factory


async def close_engine() -> None:
    global _engine, _async_session_factory
    if _engine is not None:
        await _engine.dispose()
        logger.info("AsyncEngine disposed")
    _engine = None
    _async_session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a transactional, auto-closing database session.

    Commits when the request succeeds, rolls back on any error and always
    closes the session.
    """
    session = get_session_factory()()
    try:
        yield session
        await session.commit()
    except SQLAlchemyError as e:
        logger.error(f"Database transaction failed: {e}", exc_info=True)
        await session.rollback()
        raise
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()
