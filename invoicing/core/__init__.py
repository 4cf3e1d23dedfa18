"""Core Layer — money, pagination, domain types, errors, and service protocols.

Invariants:
    - Nothing here opens a connection or awaits
    - Money arithmetic is Decimal/int only; floats never reach a write
"""
