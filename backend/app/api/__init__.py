"""API Layer: FastAPI routes, the handler wrapper, the route cache and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return envelope-shaped JSON responses
"""
