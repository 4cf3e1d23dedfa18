"""User ORM — dashboard login accounts, read by email for the auth collaborator.

Invariants:
    - password holds a bcrypt hash, never plaintext
    - email is conceptually unique per account (not enforced by the store)

Design Decisions:
    - Written only by the seed script; the dashboard core never creates users
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from invoicing.db.base import Base, new_id


class User(Base):
    """User entity: credentials for the dashboard."""
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)
