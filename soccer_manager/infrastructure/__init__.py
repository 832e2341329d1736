"""Infrastructure Layer — database, Redis, and observability adapters.

Invariants:
    - Infrastructure never contains transfer-market rules
    - All external calls mapped onto core/errors.py (DatabaseError, CacheError)
"""
