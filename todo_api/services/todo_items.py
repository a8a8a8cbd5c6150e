"""Todo Item Service — list/get/create/update/delete flows for /todo-items.

Invariants:
    - Created items always get DEFAULT_PRIORITY, whatever the caller sends
    - Update never rewrites created_at; updatedAt is taken at request entry
    - `status` on update is required and echoed, never persisted
"""

import logging
from datetime import datetime

from todo_api.core.domain_types import DEFAULT_PRIORITY, Resource, TodoItemId
from todo_api.core.envelope import success, to_iso, todo_item_to_dict
from todo_api.core.errors import EnvelopeStatus, ResourceNotFoundError
from todo_api.core.repository_protocols import TodoItemRepository
from todo_api.schemas import parse_payload
from todo_api.schemas.todo_item import TodoItemCreate, TodoItemUpdate
from todo_api.services.crud_helpers import (
    utc_now, require_fields, no_data, deleted_message, delete_not_found,
)

logger = logging.getLogger(__name__)

CREATE_REQUIRED = ("title", "is_active", "activity_group_id")
CREATE_MISSING_MESSAGE = (
    "Missing required fields: title or is_active or activity_group_id."
)
CREATED_MESSAGE = "Todo item added successfully"
UPDATE_REQUIRED = ("title", "priority", "is_active", "status")
UPDATE_MISSING_MESSAGE = (
    "Missing required field: title, priority, is_active, status."
)
NOT_FOUND_MESSAGE = "Todo item not found."


async def list_todo_items(
    repo: TodoItemRepository, location: str | None = None,
) -> dict:
    items = await repo.list_all()
    if not items:
        raise no_data()
    return success([todo_item_to_dict(i) for i in items], location=location)


async def get_todo_item(repo: TodoItemRepository, item_id: TodoItemId) -> dict:
    item = await repo.get(item_id)
    if item is None:
        raise no_data(item_id)
    return success(todo_item_to_dict(item))


async def create_todo_item(
    repo: TodoItemRepository,
    payload: dict,
    now: datetime | None = None,
) -> dict:
    body = parse_payload(TodoItemCreate, payload)
    require_fields(body.model_dump(), CREATE_REQUIRED, CREATE_MISSING_MESSAGE)

    created_at = now or utc_now()
    item_id = await repo.create(
        activity_group_id=body.activity_group_id,
        title=body.title,
        is_active=body.is_active,
        priority=DEFAULT_PRIORITY,
        created_at=created_at,
    )
    logger.info(
        f"Todo item {item_id} created",
        extra={"resource": Resource.TODO_ITEM.value, "resource_id": item_id},
    )
    created = to_iso(created_at)
    return success(
        {
            "id": item_id,
            "activity_group_id": body.activity_group_id,
            "title": body.title,
            "is_active": body.is_active,
            "priorityParam": DEFAULT_PRIORITY,
            "createdAt": created,
            "updatedAt": created,
        },
        message=CREATED_MESSAGE,
    )


async def update_todo_item(
    repo: TodoItemRepository,
    item_id: TodoItemId,
    payload: dict,
    now: datetime | None = None,
) -> dict:
    """Rewrite title/priority/is_active; createdAt comes back from storage unchanged."""
    updated_at = now or utc_now()
    body = parse_payload(TodoItemUpdate, payload)
    require_fields(body.model_dump(), UPDATE_REQUIRED, UPDATE_MISSING_MESSAGE)

    created_at = await repo.update(
        item_id, body.title, body.priority, body.is_active,
    )
    if created_at is None:
        raise ResourceNotFoundError(
            NOT_FOUND_MESSAGE, item_id, EnvelopeStatus.ERROR,
        )
    return success({
        "id": item_id,
        "title": body.title,
        "priority": body.priority,
        "is_active": body.is_active,
        "status": body.status,
        "createdAt": to_iso(created_at),
        "updatedAt": to_iso(updated_at),
    })


async def delete_todo_item(repo: TodoItemRepository, item_id: TodoItemId) -> dict:
    if not await repo.delete(item_id):
        raise delete_not_found(Resource.TODO_ITEM, item_id)
    logger.info(
        f"Todo item {item_id} deleted",
        extra={"resource": Resource.TODO_ITEM.value, "resource_id": item_id},
    )
    return success(
        {"id": item_id},
        message=deleted_message(Resource.TODO_ITEM, item_id),
    )
