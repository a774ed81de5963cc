"""Waste Catalog API package: read endpoints over waste categories and items.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
