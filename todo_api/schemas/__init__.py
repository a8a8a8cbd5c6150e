"""Pydantic Schemas — request body shapes for the API boundary.

Invariants:
    - Schemas only check types; presence rules live in core/validation.py
    - Unknown body fields are ignored

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from todo_api.core.errors import PayloadValidationError

INVALID_BODY_MESSAGE = "Invalid request data"

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_payload(schema: type[SchemaT], payload: dict) -> SchemaT:
    """Validate a JSON object against `schema`, raising PayloadValidationError on type errors."""
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        fields = tuple(
            ".".join(str(loc) for loc in err["loc"]) for err in e.errors()
        )
        raise PayloadValidationError(INVALID_BODY_MESSAGE, fields) from e
