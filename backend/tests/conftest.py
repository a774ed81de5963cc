"""Root conftest: shared test configuration and database fixtures.

Invariants:
    - Every test that asks for test_engine gets a fresh SQLite database file
    - seed_catalog inserts waste types and waste rows through the ORM

Design Decisions:
    - File-backed SQLite over :memory: so concurrent sessions (the paginated
      list gathers two queries) get separate connections
"""

import os

# Settings are read at import time by app.main and the route modules
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, async_sessionmaker, create_async_engine,
)

from app.db.base import Base  # noqa: E402
from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.models import Waste, WasteType  # noqa: E402


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'waste.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def test_db_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the test engine."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def seed_catalog(test_session_factory):
    """Insert rows: await seed_catalog(types=[names], waste=[(name, type_index)])."""

    async def _seed(
        types: list[str] = (),
        waste: list[tuple[str, int]] = (),
    ) -> tuple[list[WasteType], list[Waste]]:
        async with test_session_factory() as session:
            type_rows = [
                WasteType(waste_type_name=name, image=f"{name.lower()}.png")
                for name in types
            ]
            session.add_all(type_rows)
            await session.flush()
            waste_rows = [
                Waste(
                    waste_name=name,
                    description=f"About {name}",
                    waste_type_id=type_rows[type_index].waste_type_id,
                )
                for name, type_index in waste
            ]
            session.add_all(waste_rows)
            await session.commit()
            return type_rows, waste_rows

    return _seed
