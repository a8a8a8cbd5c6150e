"""Payload Schemas — type checks at the API boundary.

Invariants:
    - Fields are optional at the type level
    - Type mismatches raise PayloadValidationError naming the field
    - Unknown fields are dropped
"""

import pytest

from todo_api.core.errors import PayloadValidationError
from todo_api.schemas import parse_payload
from todo_api.schemas.activity_group import ActivityGroupCreate, ActivityGroupUpdate
from todo_api.schemas.todo_item import TodoItemCreate, TodoItemUpdate


def test_activity_group_create_accepts_partial_body():
    body = parse_payload(ActivityGroupCreate, {"title": "Sprint"})
    assert body.title == "Sprint"
    assert body.email is None


def test_activity_group_update_ignores_email():
    body = parse_payload(ActivityGroupUpdate, {"title": "New", "email": "x@y.z"})
    assert body.model_dump() == {"title": "New"}


def test_todo_create_coerces_boolean_and_int():
    body = parse_payload(
        TodoItemCreate,
        {"title": "t", "is_active": "true", "activity_group_id": "3"},
    )
    assert body.is_active is True
    assert body.activity_group_id == 3


def test_todo_create_rejects_wrong_type():
    with pytest.raises(PayloadValidationError) as info:
        parse_payload(TodoItemCreate, {"activity_group_id": "abc"})
    assert info.value.http_status == 400
    assert "activity_group_id" in info.value.fields


def test_todo_update_keeps_status():
    body = parse_payload(
        TodoItemUpdate,
        {"title": "t", "priority": "low", "is_active": True, "status": "done"},
    )
    assert body.status == "done"


def test_title_must_be_string():
    with pytest.raises(PayloadValidationError):
        parse_payload(ActivityGroupCreate, {"title": {"nested": 1}})


# ─── Typing is stricter than a presence check ────────────────────

def test_numeric_title_is_rejected():
    with pytest.raises(PayloadValidationError) as info:
        parse_payload(ActivityGroupCreate, {"title": 123, "email": "a@b.com"})
    assert info.value.message == "Invalid request data"
    assert "title" in info.value.fields


def test_string_false_is_coerced_to_false():
    body = parse_payload(TodoItemUpdate, {"is_active": "false"})
    assert body.is_active is False


def test_activity_group_id_beyond_integer_range_is_rejected():
    with pytest.raises(PayloadValidationError) as info:
        parse_payload(TodoItemCreate, {"activity_group_id": 2**31})
    assert "activity_group_id" in info.value.fields
