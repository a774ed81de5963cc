"""Boundary Protocols: contracts between the endpoint layer and persistence.

Invariants:
    - Rows cross the boundary as plain dicts restricted to the fixed projections
    - Every listing is ordered by name ascending
    - Failures surface as UpstreamError (core/errors.py), never driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, route tests inject fakes without inheritance
"""

from typing import Protocol

WASTE_TYPE_FIELDS = ("waste_type_id", "waste_type_name", "image")
WASTE_FIELDS = ("waste_id", "waste_name", "image", "description", "waste_type_id")


class WasteRepository(Protocol):
    """Contract for waste catalog reads, implemented by infrastructure."""
    async def list_waste_types(self) -> list[dict]: ...
    async def list_waste_by_type(self, waste_type_id: int) -> list[dict]: ...
    async def list_waste(
        self, *, search: str | None, skip: int, take: int,
    ) -> list[dict]: ...
    async def count_waste(self, *, search: str | None) -> int: ...
    async def search_waste_by_name(self, name: str, *, take: int) -> list[dict]: ...
