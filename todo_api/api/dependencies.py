"""Request Dependencies — body parsing, location flag and repository injection.

Invariants:
    - require_json_object checks Content-Type BEFORE reading the body
    - json_object is lenient: non-JSON content type yields {} (then fails field checks)
    - Repositories are built per request around the injected AsyncSession
"""

import json

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.config import get_settings
from todo_api.core.errors import PayloadValidationError
from todo_api.core.validation import is_json_content_type
from todo_api.infrastructure.database import get_db
from todo_api.infrastructure.repositories import (
    SqlActivityGroupRepository, SqlTodoItemRepository,
)

INVALID_CONTENT_TYPE_MESSAGE = "Invalid content type. Please send JSON data."
MALFORMED_BODY_MESSAGE = "Request body must be a JSON object."


async def json_object(request: Request) -> dict:
    """Parse the body as a JSON object; non-JSON requests read as empty."""
    if not is_json_content_type(request.headers.get("content-type")):
        return {}
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadValidationError(MALFORMED_BODY_MESSAGE) from e
    if not isinstance(payload, dict):
        raise PayloadValidationError(MALFORMED_BODY_MESSAGE)
    return payload


async def require_json_object(request: Request) -> dict:
    """Reject non-JSON requests, then parse the body as a JSON object."""
    if not is_json_content_type(request.headers.get("content-type")):
        raise PayloadValidationError(INVALID_CONTENT_TYPE_MESSAGE)
    return await json_object(request)


def location_flag(location: str | None = Query(None)) -> str | None:
    """Placeholder location text when ?location=true, else None."""
    if location == "true":
        return get_settings().location_placeholder
    return None


def get_activity_group_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlActivityGroupRepository:
    return SqlActivityGroupRepository(db)


def get_todo_item_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlTodoItemRepository:
    return SqlTodoItemRepository(db)
