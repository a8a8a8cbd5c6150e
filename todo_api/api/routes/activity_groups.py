"""Activity Group Routes — CRUD endpoints under /activity-groups."""

from fastapi import APIRouter, Depends, status

from todo_api.api.dependencies import (
    json_object, require_json_object, location_flag,
    get_activity_group_repository,
)
from todo_api.core.domain_types import ActivityGroupId
from todo_api.infrastructure.repositories import SqlActivityGroupRepository
from todo_api.services import activity_groups as service

router = APIRouter(prefix="/activity-groups", tags=["activity-groups"])


@router.get("")
async def list_activity_groups(
    location: str | None = Depends(location_flag),
    repo: SqlActivityGroupRepository = Depends(get_activity_group_repository),
):
    return await service.list_activity_groups(repo, location)


@router.get("/{group_id}")
async def get_activity_group(
    group_id: int,
    repo: SqlActivityGroupRepository = Depends(get_activity_group_repository),
):
    return await service.get_activity_group(repo, ActivityGroupId(group_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_activity_group(
    payload: dict = Depends(require_json_object),
    repo: SqlActivityGroupRepository = Depends(get_activity_group_repository),
):
    return await service.create_activity_group(repo, payload)


@router.patch("/{group_id}")
async def update_activity_group(
    group_id: int,
    payload: dict = Depends(json_object),
    repo: SqlActivityGroupRepository = Depends(get_activity_group_repository),
):
    """Update the title only."""
    return await service.update_activity_group(
        repo, ActivityGroupId(group_id), payload,
    )


@router.delete("/{group_id}")
async def delete_activity_group(
    group_id: int,
    repo: SqlActivityGroupRepository = Depends(get_activity_group_repository),
):
    return await service.delete_activity_group(repo, ActivityGroupId(group_id))
