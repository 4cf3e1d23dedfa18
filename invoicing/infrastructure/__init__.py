"""Infrastructure Layer — database sessions, logging, and view caching.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store calls pass through DatabaseSessionManager error mapping
"""
