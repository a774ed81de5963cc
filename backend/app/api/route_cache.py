"""Route Cache: decorator that short-circuits a route on a cache hit.

Invariants:
    - One TTLCache per decorated route, created when the route is declared and
      shared by every request to it (never created per request)
    - Hit: the stored body is returned verbatim, the wrapped endpoint never runs
    - Miss: request.state.cache is a CacheWriter bound to the computed key and
      TTL; the handler publishes its body through cache_response()
    - Key computation and lookup failures are not handled here; they reach the
      application exception handlers

Design Decisions:
    - Stores registered in a module registry so tests and operators can purge them
    - Apply outside api_handler so a hit skips the handler and its logging entirely
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from app.api.handler_wrapper import Endpoint, request_from_call
from app.infrastructure.ttl_cache import DEFAULT_TTL_SECONDS, MISSING, TTLCache

logger = logging.getLogger(__name__)

CacheKey = str | Callable[[Request], str]

_route_caches: list[TTLCache] = []


@dataclass
class CacheWriter:
    """Publishes a response body under the key computed for this request."""
    cache: TTLCache
    key: str
    ttl_seconds: int

    async def set(self, data: Any) -> None:
        await self.cache.set(self.key, data, self.ttl_seconds)


def route_caches() -> list[TTLCache]:
    return list(_route_caches)


def with_cache(
    get_cache_key: CacheKey, ttl_seconds: int = DEFAULT_TTL_SECONDS,
) -> Callable[[Endpoint], Endpoint]:
    """Cache a route's JSON body under get_cache_key(request) (or a literal key)."""

    def decorator(endpoint: Endpoint) -> Endpoint:
        cache = TTLCache(ttl_seconds)
        _route_caches.append(cache)

        @functools.wraps(endpoint)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            request = request_from_call(args, kwargs)
            key = get_cache_key(request) if callable(get_cache_key) else get_cache_key
            cached = await cache.get(key)
            if cached is not MISSING:
                logger.debug(
                    "Cache hit", extra={"cache_key": key, "path": request.url.path},
                )
                return JSONResponse(content=cached)

            request.state.cache = CacheWriter(cache, key, ttl_seconds)
            return await endpoint(*args, **kwargs)

        wrapper.cache = cache  # type: ignore[attr-defined]
        return wrapper

    return decorator


async def cache_response(request: Request, body: Any) -> None:
    """Store body for this request's route, if the route is cached."""
    writer = getattr(request.state, "cache", None)
    if writer is not None:
        await writer.set(body)
