"""Infrastructure Layer: database, repository, cache store and logging.

Invariants:
    - Driver exceptions never leave this layer untranslated
"""
