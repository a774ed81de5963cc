"""Waste ORM: a single waste item belonging to one WasteType.

Invariants:
    - Always belongs to a WasteType (waste_type_id FK)
    - waste_name is non-nullable; name searches are case-insensitive substrings

Design Decisions:
    - Index on waste_type_id: the by-type listing filters on it
"""

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class Waste(Base):
    """Waste item entity."""
    __tablename__ = "waste"

    waste_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    waste_name: Mapped[str] = mapped_column(String(200), nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    waste_type_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("waste_type.waste_type_id"),
        nullable=False,
        index=True,
    )

    # Relationships
    waste_type: Mapped["WasteType"] = relationship(
        "WasteType", back_populates="waste",
    )
