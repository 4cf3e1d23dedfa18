"""Persistence Base — declarative Base, id generation, standalone session factory.

Invariants:
    - Primary keys are text UUIDs generated client-side (new_id)
    - Request handling goes through infrastructure.database; db.session is for scripts
"""
