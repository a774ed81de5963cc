"""Input Validation: parse and bound-check untrusted request parameters.

Invariants:
    - validate_pagination never raises: 1 <= page <= MAX_PAGE, 1 <= limit <= 100,
      skip == (page - 1) * limit and skip fits a signed 64-bit OFFSET
    - validate_id returns at most MAX_ID (signed 64-bit key range)
    - validate_id and require_text are the only validators that raise
      (InvalidArgumentError, HTTP 400)

Design Decisions:
    - Lenient integer parsing (leading integer prefix, "3abc" -> 3, "2.9" -> 2):
      query strings from the browser client are not always clean
    - Missing or non-numeric pagination values fall back to the defaults
"""

import re
from dataclasses import dataclass

from app.core.errors import InvalidArgumentError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# Largest value a BIGINT column, OFFSET or LIMIT accepts
MAX_DB_INT = 2**63 - 1
MAX_PAGE = MAX_DB_INT // MAX_LIMIT + 1
MAX_ID = MAX_DB_INT

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class Pagination:
    """Normalized pagination window."""
    page: int
    limit: int
    skip: int


def parse_int(value: object) -> int | None:
    """Parse the leading integer of value, or None when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None
    match = _INT_PREFIX.match(str(value))
    return int(match.group(1)) if match else None


def validate_pagination(page: object = None, limit: object = None) -> Pagination:
    parsed_page = parse_int(page)
    parsed_limit = parse_int(limit)
    if parsed_page is None:
        parsed_page = DEFAULT_PAGE
    if parsed_limit is None:
        parsed_limit = DEFAULT_LIMIT

    parsed_page = min(MAX_PAGE, max(1, parsed_page))
    parsed_limit = min(MAX_LIMIT, max(1, parsed_limit))
    return Pagination(
        page=parsed_page,
        limit=parsed_limit,
        skip=(parsed_page - 1) * parsed_limit,
    )


def validate_id(value: object, entity_name: str = "ID") -> int:
    """Parse a positive integer identifier or raise InvalidArgumentError."""
    parsed = parse_int(value)
    if parsed is None or not 0 < parsed <= MAX_ID:
        raise InvalidArgumentError(f"Invalid {entity_name} provided", field="id")
    return parsed


def require_text(value: str | None, message: str, field: str | None = None) -> str:
    """Strip value; raise InvalidArgumentError(message) when nothing is left."""
    text = (value or "").strip()
    if not text:
        raise InvalidArgumentError(message, field=field)
    return text
