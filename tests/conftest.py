"""Root conftest — shared test configuration and async SQLite fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - StaticPool: all sessions share the one in-memory connection
"""

import os

# Ensure tests never reach a real database server
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from todo_api.db.base import Base
from todo_api.models.activity_group import ActivityGroup
from todo_api.models.todo_item import TodoItem

SEED_CREATED_AT = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def seed_group(test_session_factory):
    """Factory: insert an activity group and return it."""
    async def _seed(title="Sprint Planning", email="a@b.com"):
        async with test_session_factory() as session:
            group = ActivityGroup(
                title=title, email=email, created_at=SEED_CREATED_AT,
            )
            session.add(group)
            await session.commit()
            return group
    return _seed


@pytest.fixture
def seed_todo(test_session_factory):
    """Factory: insert a todo item and return it."""
    async def _seed(
        title="Write report", activity_group_id=1, is_active=True,
        priority="very-high",
    ):
        async with test_session_factory() as session:
            item = TodoItem(
                title=title, activity_group_id=activity_group_id,
                is_active=is_active, priority=priority,
                created_at=SEED_CREATED_AT,
            )
            session.add(item)
            await session.commit()
            return item
    return _seed
