"""Activity Group Service — list/get/create/update/delete flows for /activity-groups.

Invariants:
    - Empty table on list is a 404, not an empty array
    - Update changes only the title; email and created_at are echoed from storage
    - updatedAt always equals createdAt (no modification tracking)
"""

import logging
from datetime import datetime

from todo_api.core.domain_types import ActivityGroupId, Resource
from todo_api.core.envelope import (
    success, to_iso, activity_group_to_dict,
)
from todo_api.core.errors import EnvelopeStatus, ResourceNotFoundError
from todo_api.core.repository_protocols import ActivityGroupRepository
from todo_api.schemas import parse_payload
from todo_api.schemas.activity_group import (
    ActivityGroupCreate, ActivityGroupUpdate,
)
from todo_api.services.crud_helpers import (
    utc_now, require_fields, no_data, deleted_message, delete_not_found,
)

logger = logging.getLogger(__name__)

CREATE_REQUIRED = ("title", "email")
CREATE_MISSING_MESSAGE = "Missing required fields: title and/or email."
CREATED_MESSAGE = "Activity group added successfully"
UPDATE_MISSING_MESSAGE = "Missing required field: title."
NOT_FOUND_MESSAGE = "Activity group not found."


async def list_activity_groups(
    repo: ActivityGroupRepository, location: str | None = None,
) -> dict:
    groups = await repo.list_all()
    if not groups:
        raise no_data()
    return success(
        [activity_group_to_dict(g) for g in groups], location=location,
    )


async def get_activity_group(
    repo: ActivityGroupRepository, group_id: ActivityGroupId,
) -> dict:
    group = await repo.get(group_id)
    if group is None:
        raise no_data(group_id)
    return success(activity_group_to_dict(group))


async def create_activity_group(
    repo: ActivityGroupRepository,
    payload: dict,
    now: datetime | None = None,
) -> dict:
    """Validate, insert one row, echo the input plus generated id and timestamp."""
    body = parse_payload(ActivityGroupCreate, payload)
    require_fields(body.model_dump(), CREATE_REQUIRED, CREATE_MISSING_MESSAGE)

    created_at = now or utc_now()
    group_id = await repo.create(body.title, body.email, created_at)
    logger.info(
        f"Activity group {group_id} created",
        extra={"resource": Resource.ACTIVITY_GROUP.value, "resource_id": group_id},
    )
    created = to_iso(created_at)
    return success(
        {
            "id": group_id,
            "title": body.title,
            "email": body.email,
            "createdAt": created,
            "updatedAt": created,
        },
        message=CREATED_MESSAGE,
    )


async def update_activity_group(
    repo: ActivityGroupRepository, group_id: ActivityGroupId, payload: dict,
) -> dict:
    body = parse_payload(ActivityGroupUpdate, payload)
    require_fields(body.model_dump(), ("title",), UPDATE_MISSING_MESSAGE)

    stored = await repo.update_title(group_id, body.title)
    if stored is None:
        raise ResourceNotFoundError(
            NOT_FOUND_MESSAGE, group_id, EnvelopeStatus.ERROR,
        )
    email, created_at = stored
    created = to_iso(created_at)
    return success({
        "id": group_id,
        "title": body.title,
        "email": email,
        "createdAt": created,
        "updatedAt": created,
    })


async def delete_activity_group(
    repo: ActivityGroupRepository, group_id: ActivityGroupId,
) -> dict:
    if not await repo.delete(group_id):
        raise delete_not_found(Resource.ACTIVITY_GROUP, group_id)
    logger.info(
        f"Activity group {group_id} deleted",
        extra={"resource": Resource.ACTIVITY_GROUP.value, "resource_id": group_id},
    )
    return success(
        {"id": group_id},
        message=deleted_message(Resource.ACTIVITY_GROUP, group_id),
    )
