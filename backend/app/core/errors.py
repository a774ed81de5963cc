"""Error Hierarchy: typed, kind-tagged exceptions for every API failure mode.

Invariants:
    - Every error carries a kind (FailureKind), an http_status and a user-facing message
    - FailureKind is closed: VALIDATION, NOT_FOUND, UPSTREAM, UNEXPECTED
    - to_response() produces the error envelope; internal details stay in context
    - Errors are constructed where the failure happens, never inferred afterwards

Design Decisions:
    - Single hierarchy with ApiError base: the handler wrapper and the global
      handlers only need isinstance(exc, ApiError) (ADR: uniform error shape)
    - RECORD_NOT_FOUND keeps the persistence code the browser client already knows
"""

from enum import Enum
from typing import Any

from app.core import envelope

RECORD_NOT_FOUND = "P2025"
DATABASE_ERROR = "DATABASE_ERROR"


class FailureKind(str, Enum):
    """Closed set of failure categories."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    UNEXPECTED = "unexpected"


class ApiError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        kind: FailureKind,
        http_status: int = 500,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.http_status = http_status
        self.context = context or {}

    def to_response(self, path: str) -> dict:
        """Convert to the error envelope returned to the client."""
        return envelope.error(self.message, self.http_status, {"path": path})


# ─── Client errors (400-level) ──────────────────────────────────

class InvalidArgumentError(ApiError):
    """Request parameter is missing or malformed."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, FailureKind.VALIDATION, 400, {"field": field},
        )
        self.field = field


class NotFoundError(ApiError):
    """Query returned no rows where emptiness is meaningful."""
    def __init__(self, message: str, resource: str | None = None):
        super().__init__(
            message, FailureKind.NOT_FOUND, 404, {"resource": resource},
        )


# ─── Server errors (500-level) ──────────────────────────────────

class UpstreamError(ApiError):
    """Persistence layer failed. The record-not-found code maps to 404."""
    def __init__(self, code: str, operation: str, detail: str | None = None):
        if code == RECORD_NOT_FOUND:
            message, status = "Record not found.", 404
        else:
            message, status = "Database operation failed.", 500
        super().__init__(
            message, FailureKind.UPSTREAM, status,
            {"code": code, "operation": operation, "detail": detail},
        )
        self.code = code
        self.operation = operation


class UnexpectedError(ApiError):
    """Anything not raised as an ApiError."""
    def __init__(self, cause: BaseException | None = None):
        super().__init__(
            "An unexpected error occurred", FailureKind.UNEXPECTED, 500,
            {"cause": repr(cause) if cause is not None else None},
        )
        self.cause = cause
