"""Error Handlers: application-level exception handlers for failures outside wrapped handlers.

Invariants:
    - ApiError → its own envelope and status
    - RequestValidationError → 400 envelope
    - Starlette HTTPException (unknown route, wrong method) → envelope with its status
    - Exception (catch-all) → 500 envelope, never leaks internal details
    - Every body is {success: false, message, status, path}

Design Decisions:
    - Wrapped handlers recover on their own (api/handler_wrapper.py); these cover
      dependency resolution, route cache key computation and routing errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core import envelope
from app.core.errors import ApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(request: Request, message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=envelope.error(message, status_code, {"path": request.url.path}),
    )


def _register_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.error(
            f"ApiError: {exc.message}",
            extra={
                "error_kind": exc.kind.value,
                "http_status": exc.http_status,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(request.url.path),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _error_response(
            request, "Invalid request data", status.HTTP_400_BAD_REQUEST,
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return _error_response(request, message, exc.status_code)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all, never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path, "method": request.method},
        )
        return _error_response(
            request, "An unexpected error occurred",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
