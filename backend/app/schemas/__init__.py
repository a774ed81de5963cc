"""Pydantic Schemas: API contracts for the waste routes.

Invariants:
    - Schemas describe the wire format; models describe persistence

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
