"""ORM Models — SQLAlchemy declarative models for both resources.

Invariants:
    - All models inherit from Base (db/base.py)
    - No relationship between the two tables (no FK, no cascade)
"""

from todo_api.models.activity_group import ActivityGroup  # noqa: F401
from todo_api.models.todo_item import TodoItem  # noqa: F401
