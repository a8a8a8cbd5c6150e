"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - The manager is owned by app.state; nothing reads it from module globals

Design Decisions:
    - Manager created in the FastAPI lifespan and handed to requests via get_db
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from todo_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
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
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


@asynccontextmanager
async def map_database_errors(
    session: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise any SQLAlchemy failure as DatabaseError."""
    try:
        yield
    except IntegrityError as e:
        await session.rollback()
        logger.error(f"DB integrity error during {operation}: {e}")
        raise DatabaseError(operation, "Integrity constraint violated")
    except OperationalError as e:
        await session.rollback()
        logger.error(f"DB operational error during {operation}: {e}")
        raise DatabaseError(operation, "Connection or operational error")
    except DBAPIError as e:
        await session.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise DatabaseError(operation, "Database driver error")
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise DatabaseError(operation, "Database operation failed")


def get_db_manager(request: Request) -> DatabaseSessionManager | None:
    return getattr(request.app.state, "db_manager", None)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    manager = get_db_manager(request)
    if manager is None:
        raise RuntimeError("Database not initialized")
    async with manager.session() as session:
        yield session
