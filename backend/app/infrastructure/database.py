"""Database Session Manager: async connection pool with rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to UpstreamError (core/errors.py);
      NoResultFound carries the RECORD_NOT_FOUND code

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - One session per repository call so independent queries can run concurrently
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from app.core.errors import DATABASE_ERROR, RECORD_NOT_FOUND, UpstreamError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 5, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "query",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback and error translation."""
        session = self._session_factory()
        try:
            yield session
        except NoResultFound as e:
            await session.rollback()
            logger.warning(f"DB record not found during {operation}: {e}")
            raise UpstreamError(RECORD_NOT_FOUND, operation, str(e)) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"DB error during {operation}: {e}")
            raise UpstreamError(DATABASE_ERROR, operation, str(e)) from e
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session("health_check") as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db() -> None:
    global db_manager
    if db_manager is not None:
        await db_manager.close()
        db_manager = None


def get_db_manager() -> DatabaseSessionManager:
    """Return the initialized manager or fail loudly."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    return db_manager
