"""Todo Item Routes — CRUD endpoints under /todo-items."""

from fastapi import APIRouter, Depends, status

from todo_api.api.dependencies import (
    json_object, require_json_object, location_flag,
    get_todo_item_repository,
)
from todo_api.core.domain_types import TodoItemId
from todo_api.infrastructure.repositories import SqlTodoItemRepository
from todo_api.services import todo_items as service
from todo_api.services.crud_helpers import utc_now

router = APIRouter(prefix="/todo-items", tags=["todo-items"])


@router.get("")
async def list_todo_items(
    location: str | None = Depends(location_flag),
    repo: SqlTodoItemRepository = Depends(get_todo_item_repository),
):
    return await service.list_todo_items(repo, location)


@router.get("/{item_id}")
async def get_todo_item(
    item_id: int,
    repo: SqlTodoItemRepository = Depends(get_todo_item_repository),
):
    return await service.get_todo_item(repo, TodoItemId(item_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_todo_item(
    payload: dict = Depends(require_json_object),
    repo: SqlTodoItemRepository = Depends(get_todo_item_repository),
):
    """Create a todo item. Priority is always very-high."""
    return await service.create_todo_item(repo, payload)


@router.patch("/{item_id}")
async def update_todo_item(
    item_id: int,
    payload: dict = Depends(json_object),
    repo: SqlTodoItemRepository = Depends(get_todo_item_repository),
):
    # updatedAt is stamped before the store round trip
    updated_at = utc_now()
    return await service.update_todo_item(
        repo, TodoItemId(item_id), payload, now=updated_at,
    )


@router.delete("/{item_id}")
async def delete_todo_item(
    item_id: int,
    repo: SqlTodoItemRepository = Depends(get_todo_item_repository),
):
    return await service.delete_todo_item(repo, TodoItemId(item_id))
