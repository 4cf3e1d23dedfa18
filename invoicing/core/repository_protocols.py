"""Boundary Protocols — contracts between the query/mutation services and their collaborators.

Invariants:
    - Services never import the engine singleton; the store arrives by injection
    - SessionProvider.session() maps every store failure to DataAccessError
    - ViewRefresher is told which path changed, never what changed

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class SessionProvider(Protocol):
    """Contract for the store handle: implemented by DatabaseSessionManager."""
    def session(
        self, operation: str = ...,
    ) -> AbstractAsyncContextManager["AsyncSession"]: ...


class ViewRefresher(Protocol):
    """Contract for cached-view invalidation: implemented by ViewCache."""
    def revalidate_path(self, path: str) -> None: ...
