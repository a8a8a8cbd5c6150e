"""ActivityGroup ORM — a titled group of todo items owned by an email address.

Invariants:
    - Python attribute `id` maps to the `activity_id` column
    - created_at set once at insert; never written by updates
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.db.base import Base


class ActivityGroup(Base):
    __tablename__ = "activities"

    id: Mapped[int] = mapped_column(
        "activity_id", Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
