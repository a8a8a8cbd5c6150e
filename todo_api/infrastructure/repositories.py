"""SQLAlchemy Repositories — one parameterized statement per operation.

Invariants:
    - Each method issues exactly one statement (plus commit for writes)
    - update/delete are conditional on the primary key in the same statement:
      zero matched rows is reported as None/False, never as an exception
    - Lists are ordered by primary key ascending
    - SQLAlchemy failures surface as DatabaseError via map_database_errors
    - Ids outside the INTEGER column range match no row and never reach the driver

Design Decisions:
    - UPDATE ... RETURNING reads the untouched columns in the same round trip,
      so there is no separate existence lookup before the write
"""

from datetime import datetime
from typing import Sequence

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.core.domain_types import (
    ActivityGroupId, TodoItemId, ID_MIN, ID_MAX,
)
from todo_api.infrastructure.database import map_database_errors
from todo_api.models.activity_group import ActivityGroup
from todo_api.models.todo_item import TodoItem


def _storable_id(value: int) -> bool:
    return ID_MIN <= value <= ID_MAX


class SqlActivityGroupRepository:
    """Activity group persistence on the `activities` table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_all(self) -> Sequence[ActivityGroup]:
        async with map_database_errors(self.db, "select"):
            result = await self.db.execute(
                select(ActivityGroup).order_by(ActivityGroup.id.asc()),
            )
            return result.scalars().all()

    async def get(self, group_id: ActivityGroupId) -> ActivityGroup | None:
        if not _storable_id(group_id):
            return None
        async with map_database_errors(self.db, "select"):
            result = await self.db.execute(
                select(ActivityGroup).where(ActivityGroup.id == group_id),
            )
            return result.scalar_one_or_none()

    async def create(
        self, title: str, email: str, created_at: datetime,
    ) -> ActivityGroupId:
        group = ActivityGroup(title=title, email=email, created_at=created_at)
        async with map_database_errors(self.db, "insert"):
            self.db.add(group)
            await self.db.flush()
            await self.db.commit()
        return ActivityGroupId(group.id)

    async def update_title(
        self, group_id: ActivityGroupId, title: str,
    ) -> tuple[str, datetime] | None:
        """Set title; return the stored (email, created_at) or None when no row matched."""
        if not _storable_id(group_id):
            return None
        async with map_database_errors(self.db, "update"):
            result = await self.db.execute(
                update(ActivityGroup)
                .where(ActivityGroup.id == group_id)
                .values(title=title)
                .returning(ActivityGroup.email, ActivityGroup.created_at)
                .execution_options(synchronize_session=False),
            )
            row = result.one_or_none()
            await self.db.commit()
        if row is None:
            return None
        return row.email, row.created_at

    async def delete(self, group_id: ActivityGroupId) -> bool:
        if not _storable_id(group_id):
            return False
        async with map_database_errors(self.db, "delete"):
            result = await self.db.execute(
                delete(ActivityGroup).where(ActivityGroup.id == group_id),
            )
            deleted = result.rowcount > 0
            await self.db.commit()
        return deleted


class SqlTodoItemRepository:
    """Todo item persistence on the `todos` table."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_all(self) -> Sequence[TodoItem]:
        async with map_database_errors(self.db, "select"):
            result = await self.db.execute(
                select(TodoItem).order_by(TodoItem.id.asc()),
            )
            return result.scalars().all()

    async def get(self, item_id: TodoItemId) -> TodoItem | None:
        if not _storable_id(item_id):
            return None
        async with map_database_errors(self.db, "select"):
            result = await self.db.execute(
                select(TodoItem).where(TodoItem.id == item_id),
            )
            return result.scalar_one_or_none()

    async def create(
        self,
        activity_group_id: int,
        title: str,
        is_active: bool,
        priority: str,
        created_at: datetime,
    ) -> TodoItemId:
        item = TodoItem(
            activity_group_id=activity_group_id,
            title=title,
            is_active=is_active,
            priority=priority,
            created_at=created_at,
        )
        async with map_database_errors(self.db, "insert"):
            self.db.add(item)
            await self.db.flush()
            await self.db.commit()
        return TodoItemId(item.id)

    async def update(
        self, item_id: TodoItemId, title: str, priority: str, is_active: bool,
    ) -> datetime | None:
        """Rewrite the mutable columns; return stored created_at or None when no row matched."""
        if not _storable_id(item_id):
            return None
        async with map_database_errors(self.db, "update"):
            result = await self.db.execute(
                update(TodoItem)
                .where(TodoItem.id == item_id)
                .values(title=title, priority=priority, is_active=is_active)
                .returning(TodoItem.created_at)
                .execution_options(synchronize_session=False),
            )
            created_at = result.scalar_one_or_none()
            await self.db.commit()
        return created_at

    async def delete(self, item_id: TodoItemId) -> bool:
        if not _storable_id(item_id):
            return False
        async with map_database_errors(self.db, "delete"):
            result = await self.db.execute(
                delete(TodoItem).where(TodoItem.id == item_id),
            )
            deleted = result.rowcount > 0
            await self.db.commit()
        return deleted
