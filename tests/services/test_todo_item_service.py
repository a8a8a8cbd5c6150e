"""Todo Item Service — flows over an in-memory repository.

Tests cover:
    - create forces very-high priority regardless of input
    - create rejects falsy is_active / activity_group_id
    - update keeps created_at and stamps updatedAt from the given clock
    - status is echoed but never stored
"""

from datetime import datetime, timezone

import pytest

from todo_api.core.domain_types import DEFAULT_PRIORITY
from todo_api.core.errors import PayloadValidationError, ResourceNotFoundError
from todo_api.services import todo_items as service
from tests.services.fakes import FakeTodoItemRepository, FakeTodo

CREATED = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)
NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)

UPDATE_BODY = {
    "title": "Renamed", "priority": "low", "is_active": True, "status": "done",
}


def _repo_with_item():
    return FakeTodoItemRepository([
        FakeTodo(4, 1, "Write report", True, "very-high", CREATED),
    ])


async def test_list_empty_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        await service.list_todo_items(FakeTodoItemRepository())


async def test_list_maps_todo_ids():
    body = await service.list_todo_items(_repo_with_item())
    assert body["data"][0]["id"] == 4
    assert body["data"][0]["activity_group_id"] == 1


async def test_get_unknown_raises_not_found():
    with pytest.raises(ResourceNotFoundError):
        await service.get_todo_item(_repo_with_item(), 5)


async def test_create_forces_default_priority():
    repo = FakeTodoItemRepository()
    body = await service.create_todo_item(
        repo,
        {"title": "Write report", "activity_group_id": 1, "is_active": True,
         "priority": "low"},
        now=NOW,
    )
    assert body["message"] == "Todo item added successfully"
    assert body["data"]["priorityParam"] == DEFAULT_PRIORITY
    assert body["data"]["id"] == 1
    assert repo.rows[1].priority == DEFAULT_PRIORITY
    assert body["data"]["createdAt"] == NOW.isoformat()


@pytest.mark.parametrize("payload", [
    {"title": "t", "activity_group_id": 1, "is_active": False},
    {"title": "t", "activity_group_id": 0, "is_active": True},
    {"activity_group_id": 1, "is_active": True},
])
async def test_create_rejects_falsy_required_fields(payload):
    repo = FakeTodoItemRepository()
    with pytest.raises(PayloadValidationError) as info:
        await service.create_todo_item(repo, payload)
    assert info.value.message == (
        "Missing required fields: title or is_active or activity_group_id."
    )
    assert repo.calls == []


async def test_update_keeps_created_at_and_stamps_updated_at():
    repo = _repo_with_item()
    body = await service.update_todo_item(repo, 4, UPDATE_BODY, now=NOW)
    assert body["data"] == {
        "id": 4,
        "title": "Renamed",
        "priority": "low",
        "is_active": True,
        "status": "done",
        "createdAt": CREATED.isoformat(),
        "updatedAt": NOW.isoformat(),
    }
    assert repo.rows[4].created_at == CREATED
    assert repo.calls == [("update", 4, "Renamed", "low", True)]


@pytest.mark.parametrize("missing", ["title", "priority", "is_active", "status"])
async def test_update_requires_all_four_fields(missing):
    payload = {k: v for k, v in UPDATE_BODY.items() if k != missing}
    with pytest.raises(PayloadValidationError):
        await service.update_todo_item(_repo_with_item(), 4, payload)


async def test_update_unknown_raises_not_found():
    with pytest.raises(ResourceNotFoundError) as info:
        await service.update_todo_item(_repo_with_item(), 99, UPDATE_BODY)
    assert info.value.message == "Todo item not found."


async def test_delete_existing_and_missing():
    repo = _repo_with_item()
    body = await service.delete_todo_item(repo, 4)
    assert body["message"] == "Todo item with ID 4 Deleted"
    with pytest.raises(ResourceNotFoundError) as info:
        await service.delete_todo_item(repo, 4)
    assert info.value.message == "Todo item with ID 4 Not Found"
