"""Todo Item Schemas — create and update bodies.

Invariants:
    - Every field optional at the type level; required-ness decided by services
    - TodoItemCreate.priority is accepted but never used (always DEFAULT_PRIORITY)
    - TodoItemUpdate.status is echoed back, never stored
    - activity_group_id must fit the INTEGER column
"""

from pydantic import BaseModel, ConfigDict, Field

from todo_api.core.domain_types import ID_MIN, ID_MAX


class TodoItemCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    activity_group_id: int | None = Field(None, ge=ID_MIN, le=ID_MAX)
    is_active: bool | None = None
    priority: str | None = None


class TodoItemUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    priority: str | None = None
    is_active: bool | None = None
    status: str | None = None
