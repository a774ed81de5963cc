"""Waste Routes: read endpoints over waste categories and waste items.

Invariants:
    - Every handler is wrapped by api_handler: the body is always one envelope
    - Listing by type and name search return 404 on empty results; the
      paginated list returns an empty page with total=0 instead
    - Successful bodies are published to the route cache (no-op when uncached)
    - Name filters are trimmed, case-insensitive substrings

Design Decisions:
    - Raw path/query values are taken as strings and validated by core/validation.py,
      so malformed input yields the envelope's 400 instead of FastAPI's 422
    - Page rows and total count are fetched concurrently (asyncio.gather); a
      failure in either fails the request
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from app.api.handler_wrapper import api_handler
from app.api.route_cache import cache_response, with_cache
from app.config import get_settings
from app.core import envelope
from app.core.errors import NotFoundError
from app.core.repository_protocols import WasteRepository
from app.core.validation import require_text, validate_id, validate_pagination
from app.infrastructure.waste_repository import get_waste_repository
from app.schemas.waste import (
    ErrorEnvelope,
    PaginationMeta,
    WasteListEnvelope,
    WastePageEnvelope,
    WasteTypeListEnvelope,
    WasteWithTypeListEnvelope,
)

logger = logging.getLogger(__name__)
settings = get_settings()
router = APIRouter(prefix=settings.api_prefix, tags=["waste"])

SEARCH_RESULT_LIMIT = 50

_ERRORS = {
    400: {"model": ErrorEnvelope},
    404: {"model": ErrorEnvelope},
    500: {"model": ErrorEnvelope},
}


def waste_list_cache_key(request: Request) -> str:
    """Key on the normalized window so equivalent queries share an entry."""
    params = request.query_params
    pagination = validate_pagination(params.get("page"), params.get("limit"))
    search = (params.get("search") or "").strip().lower()
    return f"waste:list:{pagination.page}:{pagination.limit}:{search}"


def waste_by_type_cache_key(request: Request) -> str:
    return f"waste:type:{request.path_params.get('waste_type_id')}"


@router.get(
    "/waste-types",
    responses={200: {"model": WasteTypeListEnvelope}, **_ERRORS},
)
@with_cache("waste_types", settings.cache_ttl_seconds)
@api_handler
async def list_waste_types(
    request: Request,
    repo: WasteRepository = Depends(get_waste_repository),
):
    """List all waste categories by name."""
    waste_types = await repo.list_waste_types()
    if not waste_types:
        raise NotFoundError("No waste types found.", resource="waste_type")

    body = envelope.success(waste_types)
    await cache_response(request, body)
    return body


@router.get(
    "/waste/type/{waste_type_id}",
    responses={200: {"model": WasteWithTypeListEnvelope}, **_ERRORS},
)
@with_cache(waste_by_type_cache_key, settings.cache_ttl_seconds)
@api_handler
async def list_waste_by_type(
    request: Request,
    waste_type_id: str,
    repo: WasteRepository = Depends(get_waste_repository),
):
    """List the waste items of one category, each with its category."""
    type_id = validate_id(waste_type_id, "Waste Type")
    waste = await repo.list_waste_by_type(type_id)
    if not waste:
        raise NotFoundError("No waste found for the given ID.", resource="waste")

    body = envelope.success(waste)
    await cache_response(request, body)
    return body


@router.get(
    "/waste",
    responses={200: {"model": WastePageEnvelope}, **_ERRORS},
)
@with_cache(waste_list_cache_key, settings.cache_ttl_seconds)
@api_handler
async def list_waste(
    request: Request,
    page: str | None = None,
    limit: str | None = None,
    search: str | None = None,
    repo: WasteRepository = Depends(get_waste_repository),
):
    """Paginated waste list, optionally filtered by name."""
    pagination = validate_pagination(page, limit)
    term = (search or "").strip() or None

    items, total = await asyncio.gather(
        repo.list_waste(search=term, skip=pagination.skip, take=pagination.limit),
        repo.count_waste(search=term),
    )

    meta = PaginationMeta.build(total, pagination.page, pagination.limit)
    body = envelope.success({"items": items, "pagination": meta.to_dict()})
    await cache_response(request, body)
    return body


@router.get(
    "/waste/search",
    responses={200: {"model": WasteListEnvelope}, **_ERRORS},
)
@api_handler
async def search_waste_by_name(
    request: Request,
    name: str | None = None,
    repo: WasteRepository = Depends(get_waste_repository),
):
    """Case-insensitive name search, capped at SEARCH_RESULT_LIMIT rows."""
    term = require_text(name, "Waste name is required.", field="name")
    waste = await repo.search_waste_by_name(term, take=SEARCH_RESULT_LIMIT)
    if not waste:
        raise NotFoundError("No waste found with the given name.", resource="waste")

    return envelope.success(waste)
