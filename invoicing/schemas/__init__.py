"""Pydantic Schemas — form validation and read models for the dashboard.

Invariants:
    - Schemas validate at system boundary (form input, query results)

Design Decisions:
    - Separate from models: schemas are contracts, models are persistence
"""
