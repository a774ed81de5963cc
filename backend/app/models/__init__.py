"""ORM Models: SQLAlchemy declarative models for the waste catalog.

Invariants:
    - All models inherit from Base (db/base.py)
    - WasteType is the parent; Waste rows are scoped by waste_type_id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.waste_type import WasteType  # noqa: F401
from app.models.waste import Waste  # noqa: F401
