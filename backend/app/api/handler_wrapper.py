"""Handler Wrapper: the single error-recovery boundary for endpoint handlers.

Invariants:
    - No exception escapes a wrapped handler; every failure becomes
      {success: false, message, status, path} with the matching status code
    - Non-ApiError exceptions are classified as UnexpectedError (500) and their
      details only reach the log
    - Successful results are returned untouched

Design Decisions:
    - Decorator over a global exception handler: failures are logged with the
      handler name and request method, and recovery happens before the
      response leaves the route (global handlers in error_handlers.py only
      cover failures outside wrapped handlers)
    - functools.wraps keeps the endpoint signature visible to FastAPI's
      dependency injection
"""

import functools
import logging
from typing import Any, Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from app.core.errors import ApiError, UnexpectedError

logger = logging.getLogger(__name__)

Endpoint = Callable[..., Awaitable[Any]]


def request_from_call(args: tuple, kwargs: dict) -> Request:
    """Find the Request among an endpoint's call arguments."""
    request = kwargs.get("request")
    if isinstance(request, Request):
        return request
    for value in (*args, *kwargs.values()):
        if isinstance(value, Request):
            return value
    raise TypeError("Wrapped endpoints must declare a 'request: Request' parameter")


def classify_failure(exc: Exception) -> ApiError:
    if isinstance(exc, ApiError):
        return exc
    return UnexpectedError(exc)


def render_failure(
    failure: ApiError, request: Request, handler_name: str,
) -> JSONResponse:
    """Log failure and render its error envelope."""
    extra = {
        "path": request.url.path,
        "method": request.method,
        "handler": handler_name,
        "error_kind": failure.kind.value,
        "http_status": failure.http_status,
    }
    level = logging.ERROR if failure.http_status >= 500 else logging.WARNING
    logger.log(
        level, f"Error in {handler_name}: {failure.message}",
        extra=extra, exc_info=True,
    )
    return JSONResponse(
        status_code=failure.http_status,
        content=failure.to_response(request.url.path),
    )


def api_handler(handler: Endpoint) -> Endpoint:
    """Wrap an async endpoint so every failure renders an error envelope."""

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        request = request_from_call(args, kwargs)
        try:
            return await handler(*args, **kwargs)
        except Exception as exc:
            return render_failure(classify_failure(exc), request, handler.__name__)

    return wrapper
