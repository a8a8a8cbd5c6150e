"""CRUD Helpers — shared validation and message plumbing for resource services."""

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone

from todo_api.core.domain_types import Resource
from todo_api.core.errors import PayloadValidationError, ResourceNotFoundError
from todo_api.core.validation import check_required

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data found"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def require_fields(
    payload: Mapping[str, object], required: Sequence[str], message: str,
) -> None:
    """Raise PayloadValidationError when any required field is missing or falsy."""
    result = check_required(payload, required)
    if not result.ok:
        logger.info(
            f"Rejected payload, missing: {', '.join(result.missing)}",
        )
        raise PayloadValidationError(message, result.missing)


def no_data(resource_id: int | None = None) -> ResourceNotFoundError:
    return ResourceNotFoundError(NO_DATA_MESSAGE, resource_id)


def deleted_message(resource: Resource, resource_id: int) -> str:
    return f"{resource.value} with ID {resource_id} Deleted"


def delete_not_found(resource: Resource, resource_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        f"{resource.value} with ID {resource_id} Not Found", resource_id,
    )
