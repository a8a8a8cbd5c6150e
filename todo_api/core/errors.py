"""Error Hierarchy — typed exceptions for every failure mode of the API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), HTTP status and
      envelope status ("Error" or "Not Found")
    - to_response() produces the same {status, message} envelope as success paths
    - No internal details leaked in user-facing messages (DatabaseError keeps the
      operation name for logs only)

Design Decisions:
    - Single hierarchy with TodoApiError base: the global handler catches all of it
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


class EnvelopeStatus(str, Enum):
    """Values of the envelope `status` field."""
    SUCCESS = "Success"
    ERROR = "Error"
    NOT_FOUND = "Not Found"


INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class TodoApiError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        envelope_status: EnvelopeStatus = EnvelopeStatus.ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.envelope_status = envelope_status

    def to_response(self) -> dict:
        """Convert to the standard response envelope (no data)."""
        return {"status": self.envelope_status.value, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class PayloadValidationError(TodoApiError):
    """Wrong content type, malformed body or missing required fields."""
    def __init__(self, message: str, fields: tuple[str, ...] = ()):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION, 400,
        )
        self.fields = fields


class ResourceNotFoundError(TodoApiError):
    """No row matches the requested id (or the table is empty)."""
    def __init__(
        self,
        message: str,
        resource_id: int | None = None,
        envelope_status: EnvelopeStatus = EnvelopeStatus.NOT_FOUND,
    ):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            404, envelope_status,
        )
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(TodoApiError):
    """Database statement or connection failed."""
    def __init__(self, operation: str, detail: str = ""):
        super().__init__(
            INTERNAL_ERROR_MESSAGE, "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
        )
        self.operation = operation
        self.detail = detail
