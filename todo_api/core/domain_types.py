"""Domain Types — identity types and constants shared across layers.

Invariants:
    - ActivityGroupId and TodoItemId wrap the integer primary keys
    - DEFAULT_PRIORITY is the only priority a freshly created todo item can have
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ActivityGroupId = NewType("ActivityGroupId", int)
TodoItemId = NewType("TodoItemId", int)


# ─── Constants ───────────────────────────────────────────────────

DEFAULT_PRIORITY: str = "very-high"

# Range of the INTEGER primary key columns
ID_MIN: int = -(2**31)
ID_MAX: int = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class Resource(str, Enum):
    """Exposed resources; value is the label used in delete messages."""
    ACTIVITY_GROUP = "Activity"
    TODO_ITEM = "Todo item"
