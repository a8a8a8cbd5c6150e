"""Boundary Protocols — contracts between core/services and the persistence shell.

Invariants:
    - Core NEVER imports from infrastructure, models or db
    - Every store operation is exactly one statement on the implementation side
    - update/delete report "no such row" as None/False, never by raising

Design Decisions:
    - Protocol over ABC: structural subtyping, services can be tested with fakes
"""

from datetime import datetime
from typing import Protocol, Sequence

from todo_api.core.domain_types import ActivityGroupId, TodoItemId


class ActivityGroupLike(Protocol):
    """Structural contract for an activity group row."""
    id: int
    title: str
    email: str
    created_at: datetime


class TodoItemLike(Protocol):
    """Structural contract for a todo item row."""
    id: int
    activity_group_id: int
    title: str
    is_active: bool
    priority: str
    created_at: datetime


class ActivityGroupRepository(Protocol):
    """Contract for activity group persistence — implemented by shell."""
    async def list_all(self) -> Sequence[ActivityGroupLike]: ...
    async def get(self, group_id: ActivityGroupId) -> ActivityGroupLike | None: ...
    async def create(
        self, title: str, email: str, created_at: datetime,
    ) -> ActivityGroupId: ...
    async def update_title(
        self, group_id: ActivityGroupId, title: str,
    ) -> tuple[str, datetime] | None: ...
    async def delete(self, group_id: ActivityGroupId) -> bool: ...


class TodoItemRepository(Protocol):
    """Contract for todo item persistence — implemented by shell."""
    async def list_all(self) -> Sequence[TodoItemLike]: ...
    async def get(self, item_id: TodoItemId) -> TodoItemLike | None: ...
    async def create(
        self,
        activity_group_id: int,
        title: str,
        is_active: bool,
        priority: str,
        created_at: datetime,
    ) -> TodoItemId: ...
    async def update(
        self, item_id: TodoItemId, title: str, priority: str, is_active: bool,
    ) -> datetime | None: ...
    async def delete(self, item_id: TodoItemId) -> bool: ...
