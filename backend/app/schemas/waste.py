"""Waste Schemas: Pydantic models describing the envelope bodies of the waste routes.

Invariants:
    - Field sets mirror the fixed projections in core/repository_protocols.py
    - PaginationMeta serializes total_pages as totalPages (client contract)

Design Decisions:
    - Handlers return plain envelope dicts; these models document the routes in
      OpenAPI and build the pagination block
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WasteTypeOut(BaseModel):
    """Waste category projection."""
    waste_type_id: int
    waste_type_name: str
    image: str | None = None


class WasteOut(BaseModel):
    """Waste item projection."""
    waste_id: int
    waste_name: str
    image: str | None = None
    description: str | None = None
    waste_type_id: int


class WasteWithTypeOut(WasteOut):
    """Waste item with its nested category."""
    waste_type: WasteTypeOut


class PaginationMeta(BaseModel):
    """Pagination block of the paginated waste list."""
    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")

    @classmethod
    def build(cls, total: int, page: int, limit: int) -> "PaginationMeta":
        return cls(
            total=total, page=page, limit=limit,
            total_pages=math.ceil(total / limit),
        )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class WastePage(BaseModel):
    items: list[WasteOut]
    pagination: PaginationMeta


class Envelope(BaseModel):
    success: bool
    message: str


class WasteTypeListEnvelope(Envelope):
    data: list[WasteTypeOut]


class WasteWithTypeListEnvelope(Envelope):
    data: list[WasteWithTypeOut]


class WasteListEnvelope(Envelope):
    data: list[WasteOut]


class WastePageEnvelope(Envelope):
    data: WastePage


class ErrorEnvelope(BaseModel):
    success: bool = False
    message: str
    status: int
    path: str
