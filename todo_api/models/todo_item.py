"""TodoItem ORM — a single task inside an activity group.

Invariants:
    - Python attribute `id` maps to the `todo_id` column
    - activity_group_id is a plain indexed integer (no enforced FK, no cascade)
    - created_at set once at insert; never written by updates

Design Decisions:
    - No FK constraint: deleting an activity group must leave its todo items untouched
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.core.domain_types import DEFAULT_PRIORITY
from todo_api.db.base import Base


class TodoItem(Base):
    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(
        "todo_id", Integer, primary_key=True, autoincrement=True,
    )
    activity_group_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    priority: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DEFAULT_PRIORITY,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
