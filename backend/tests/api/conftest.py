"""API test fixtures: FastAPI test client over the test database.

Invariants:
    - db_manager patched to the per-test SQLite engine and restored afterwards
    - Route caches purged before every test (they live for the whole process)
    - Dependency overrides cleared after every test

Design Decisions:
    - raise_app_exceptions=False: the catch-all handler's 500 envelope is
      asserted like any other response
"""

import pytest
from httpx import ASGITransport, AsyncClient

import app.infrastructure.database as db_module
from app.api.route_cache import route_caches
from app.infrastructure.waste_repository import get_waste_repository
from app.main import app


@pytest.fixture(autouse=True)
async def purge_route_caches():
    for cache in route_caches():
        await cache.purge()
    yield


@pytest.fixture
async def client(test_db_manager):
    """FastAPI test client with db_manager pointing at the test engine."""
    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


class FakeWasteRepository:
    """Scriptable WasteRepository: returns canned rows or raises `error`."""

    def __init__(self):
        self.rows: list[dict] = []
        self.total = 0
        self.error: Exception | None = None
        self.calls: list[str] = []

    async def _answer(self, name: str):
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return self.rows

    async def list_waste_types(self):
        return await self._answer("list_waste_types")

    async def list_waste_by_type(self, waste_type_id):
        return await self._answer("list_waste_by_type")

    async def list_waste(self, *, search, skip, take):
        return await self._answer("list_waste")

    async def count_waste(self, *, search):
        await self._answer("count_waste")
        return self.total

    async def search_waste_by_name(self, name, *, take):
        return await self._answer("search_waste_by_name")


@pytest.fixture
def fake_repo(client):
    """Route the waste endpoints to a FakeWasteRepository."""
    repo = FakeWasteRepository()
    app.dependency_overrides[get_waste_repository] = lambda: repo
    return repo
