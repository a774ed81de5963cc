"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Persistence is reached only through the WasteRepository protocol
"""
