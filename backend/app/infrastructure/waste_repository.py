"""Waste Repository: SQLAlchemy implementation of the WasteRepository protocol.

Invariants:
    - Each method opens its own session, so calls can be awaited concurrently
    - Only the fixed projections (core/repository_protocols.py) are loaded and returned
    - Name filters are case-insensitive substrings with LIKE wildcards escaped
    - Driver failures surface as UpstreamError via DatabaseSessionManager.session()
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.orm import joinedload, load_only

from app.core.repository_protocols import (
    WASTE_FIELDS, WASTE_TYPE_FIELDS, WasteRepository,
)
from app.infrastructure import database
from app.infrastructure.database import DatabaseSessionManager
from app.models import Waste, WasteType

logger = logging.getLogger(__name__)

_WASTE_TYPE_COLUMNS = [getattr(WasteType, name) for name in WASTE_TYPE_FIELDS]
_WASTE_COLUMNS = [getattr(Waste, name) for name in WASTE_FIELDS]


def _project(obj: object, fields: tuple[str, ...]) -> dict:
    return {name: getattr(obj, name) for name in fields}


def _filter_by_name(stmt: Select, term: str | None) -> Select:
    if term:
        stmt = stmt.where(Waste.waste_name.icontains(term, autoescape=True))
    return stmt


class SqlWasteRepository:
    """Reads the waste catalog through the shared session manager."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def list_waste_types(self) -> list[dict]:
        stmt = (
            select(WasteType)
            .options(load_only(*_WASTE_TYPE_COLUMNS))
            .order_by(WasteType.waste_type_name.asc(), WasteType.waste_type_id.asc())
        )
        async with self._db.session("list_waste_types") as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [_project(row, WASTE_TYPE_FIELDS) for row in rows]

    async def list_waste_by_type(self, waste_type_id: int) -> list[dict]:
        stmt = (
            select(Waste)
            .where(Waste.waste_type_id == waste_type_id)
            .options(
                load_only(*_WASTE_COLUMNS),
                joinedload(Waste.waste_type).load_only(*_WASTE_TYPE_COLUMNS),
            )
            .order_by(Waste.waste_name.asc(), Waste.waste_id.asc())
        )
        async with self._db.session("list_waste_by_type") as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [
            {
                **_project(row, WASTE_FIELDS),
                "waste_type": _project(row.waste_type, WASTE_TYPE_FIELDS),
            }
            for row in rows
        ]

    async def list_waste(
        self, *, search: str | None, skip: int, take: int,
    ) -> list[dict]:
        stmt = _filter_by_name(
            select(Waste).options(load_only(*_WASTE_COLUMNS)), search,
        )
        stmt = (
            stmt.order_by(Waste.waste_name.asc(), Waste.waste_id.asc())
            .offset(skip)
            .limit(take)
        )
        async with self._db.session("list_waste") as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [_project(row, WASTE_FIELDS) for row in rows]

    async def count_waste(self, *, search: str | None) -> int:
        stmt = _filter_by_name(select(func.count()).select_from(Waste), search)
        async with self._db.session("count_waste") as session:
            return (await session.execute(stmt)).scalar_one()

    async def search_waste_by_name(self, name: str, *, take: int) -> list[dict]:
        stmt = _filter_by_name(
            select(Waste).options(load_only(*_WASTE_COLUMNS)), name,
        )
        stmt = stmt.order_by(Waste.waste_name.asc(), Waste.waste_id.asc()).limit(take)
        async with self._db.session("search_waste_by_name") as session:
            rows = (await session.execute(stmt)).scalars().all()
        return [_project(row, WASTE_FIELDS) for row in rows]


def get_waste_repository() -> WasteRepository:
    """FastAPI dependency for the waste repository."""
    return SqlWasteRepository(database.get_db_manager())
