"""WasteType ORM: a waste category shown as a tile in the client.

Invariants:
    - waste_type_id is an integer primary key
    - waste_type_name is non-nullable
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class WasteType(Base):
    """Waste category, parent of Waste rows."""
    __tablename__ = "waste_type"

    waste_type_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    waste_type_name: Mapped[str] = mapped_column(String(100), nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Relationships
    waste: Mapped[list["Waste"]] = relationship(
        "Waste", back_populates="waste_type",
    )
