"""Invoicing Dashboard Package — customers, invoices, and revenue metrics.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
