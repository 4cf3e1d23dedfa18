"""ORM Models — SQLAlchemy declarative models for the four dashboard tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Customer 1-N Invoice is the only relationship

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from invoicing.models.user import User  # noqa: F401
from invoicing.models.customer import Customer  # noqa: F401
from invoicing.models.invoice import Invoice  # noqa: F401
from invoicing.models.revenue import Revenue  # noqa: F401
