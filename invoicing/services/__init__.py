"""Services Layer — query and mutation operations over the dashboard tables.

Invariants:
    - Every service receives its SessionProvider by constructor injection
    - Services return schema models, never ORM instances

Design Decisions:
    - One file per concern: dashboard overview, invoices, customers, invoice writes
"""
