"""Error Handlers — global exception handlers for the API.

Invariants:
    - TodoApiError → its own envelope and HTTP status
    - RequestValidationError → 400 envelope (bad path id, bad query types)
    - Exception (catch-all) → 500 envelope, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (TodoApiError), validation (FastAPI), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from todo_api.core.envelope import error
from todo_api.core.errors import (
    TodoApiError, DatabaseError, INTERNAL_ERROR_MESSAGE,
)
from todo_api.schemas import INVALID_BODY_MESSAGE

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TodoApiError)
    async def api_error_handler(request: Request, exc: TodoApiError):
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.http_status,
        }
        if isinstance(exc, DatabaseError):
            logger.error(
                f"DatabaseError during {exc.operation}: {exc.detail}",
                extra={**extra, "operation": exc.operation},
            )
        else:
            logger.warning(f"{exc.code}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error(INVALID_BODY_MESSAGE),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error(INTERNAL_ERROR_MESSAGE),
        )
