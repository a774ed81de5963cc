"""Response Envelope: the uniform JSON wrapper around every response.

Invariants:
    - success() always has success=True, message and data keys
    - error() always has success=False, message and status keys
    - meta/details are merged at the top level, never nested
"""

from typing import Any


def success(
    data: Any, message: str = "Success", meta: dict[str, Any] | None = None,
) -> dict:
    """Build a success envelope."""
    return {"success": True, "message": message, "data": data, **(meta or {})}


def error(
    message: str = "Internal server error",
    status: int = 500,
    details: dict[str, Any] | None = None,
) -> dict:
    """Build an error envelope. Never put stack traces in details."""
    return {"success": False, "message": message, "status": status, **(details or {})}
