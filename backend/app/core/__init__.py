"""Core Layer: pure request-handling building blocks, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - Envelopes, validators and errors are deterministic and side-effect free

Design Decisions:
    - Functional core separated from the FastAPI/SQLAlchemy shell
"""
