"""Response Envelope — builds the {status, message, data?} body for every endpoint.

Invariants:
    - `data` key present only when data is given (errors never carry it)
    - `location` key present only when explicitly requested
    - createdAt and updatedAt both come from created_at (no update tracking)
"""

from datetime import datetime
from typing import Any

from todo_api.core.errors import EnvelopeStatus
from todo_api.core.repository_protocols import ActivityGroupLike, TodoItemLike


SUCCESS_MESSAGE = "Success"


def success(
    data: Any,
    message: str = SUCCESS_MESSAGE,
    location: str | None = None,
) -> dict:
    """Success envelope. `location` is attached as a top-level field when set."""
    body = {
        "status": EnvelopeStatus.SUCCESS.value,
        "message": message,
        "data": data,
    }
    if location is not None:
        body["location"] = location
    return body


def error(message: str, status: EnvelopeStatus = EnvelopeStatus.ERROR) -> dict:
    return {"status": status.value, "message": message}


def to_iso(value: datetime | str | None) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


def activity_group_to_dict(group: ActivityGroupLike) -> dict:
    created = to_iso(group.created_at)
    return {
        "id": group.id,
        "title": group.title,
        "email": group.email,
        "createdAt": created,
        "updatedAt": created,
    }


def todo_item_to_dict(item: TodoItemLike) -> dict:
    created = to_iso(item.created_at)
    return {
        "id": item.id,
        "activity_group_id": item.activity_group_id,
        "title": item.title,
        "is_active": item.is_active,
        "priority": item.priority,
        "createdAt": created,
        "updatedAt": created,
    }
