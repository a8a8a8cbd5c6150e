"""Error handling and health probes.

Tests cover:
    - DatabaseError → 500 envelope without internal details
    - update and delete failures → 500 envelope
    - Unexpected exceptions → 500 envelope
    - Liveness always 200, readiness follows the database
"""

from todo_api.api.dependencies import (
    get_activity_group_repository, get_todo_item_repository,
)
from todo_api.core.errors import DatabaseError


class _BrokenRepository:
    def __init__(self, exc: Exception):
        self._exc = exc

    async def list_all(self):
        raise self._exc

    async def create(self, *args, **kwargs):
        raise self._exc

    async def update_title(self, *args, **kwargs):
        raise self._exc

    async def update(self, *args, **kwargs):
        raise self._exc

    async def delete(self, *args, **kwargs):
        raise self._exc


async def test_database_error_is_500_envelope(client, wired_app):
    wired_app.dependency_overrides[get_activity_group_repository] = (
        lambda: _BrokenRepository(DatabaseError("select", "no such table"))
    )
    res = await client.get("/activity-groups")
    assert res.status_code == 500
    assert res.json() == {"status": "Error", "message": "Internal Server Error"}


async def test_insert_failure_is_500(client, wired_app):
    wired_app.dependency_overrides[get_todo_item_repository] = (
        lambda: _BrokenRepository(DatabaseError("insert"))
    )
    res = await client.post(
        "/todo-items",
        json={"title": "t", "activity_group_id": 1, "is_active": True},
    )
    assert res.status_code == 500


async def test_update_failure_is_500_envelope(client, wired_app):
    wired_app.dependency_overrides[get_activity_group_repository] = (
        lambda: _BrokenRepository(DatabaseError("update"))
    )
    res = await client.patch("/activity-groups/1", json={"title": "x"})
    assert res.status_code == 500
    assert res.json() == {"status": "Error", "message": "Internal Server Error"}

    wired_app.dependency_overrides[get_todo_item_repository] = (
        lambda: _BrokenRepository(DatabaseError("update"))
    )
    res = await client.patch(
        "/todo-items/1",
        json={"title": "t", "priority": "low", "is_active": True, "status": "ok"},
    )
    assert res.status_code == 500
    assert res.json() == {"status": "Error", "message": "Internal Server Error"}


async def test_delete_failure_is_500_envelope(client, wired_app):
    wired_app.dependency_overrides[get_activity_group_repository] = (
        lambda: _BrokenRepository(DatabaseError("delete"))
    )
    res = await client.delete("/activity-groups/1")
    assert res.status_code == 500
    assert res.json() == {"status": "Error", "message": "Internal Server Error"}

    wired_app.dependency_overrides[get_todo_item_repository] = (
        lambda: _BrokenRepository(DatabaseError("delete"))
    )
    res = await client.delete("/todo-items/1")
    assert res.status_code == 500
    assert "data" not in res.json()


async def test_unexpected_exception_is_500_envelope(lenient_client, wired_app):
    wired_app.dependency_overrides[get_activity_group_repository] = (
        lambda: _BrokenRepository(RuntimeError("boom"))
    )
    res = await lenient_client.get("/activity-groups")
    assert res.status_code == 500
    assert res.json() == {"status": "Error", "message": "Internal Server Error"}
    assert "boom" not in res.text


async def test_liveness(client):
    res = await client.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client, wired_app):
    wired_app.state.db_manager = None
    res = await client.get("/health/ready")
    assert res.status_code == 503
