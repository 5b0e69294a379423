"""Abstract repository for the Franchise aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Every method is a coroutine: callers suspend while the
adapter talks to storage instead of blocking the event loop.

The whole franchise document, branches and products included, is the
unit of storage.  There is no version check on ``save``; the last
writer wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from franchises.domain.model.franchise import Franchise


class FranchiseRepository(ABC):

    @abstractmethod
    async def save(self, franchise: Franchise) -> Franchise:
        """Upsert the whole franchise and return what storage now holds.

        Assigns an id when ``franchise.id`` is empty.  Raises
        StorageError if the adapter fails.
        """

    @abstractmethod
    async def find_by_id(self, franchise_id: str) -> Franchise | None:
        """Return a franchise by its ID, or None if not found."""

    @abstractmethod
    async def find_all(self) -> list[Franchise]:
        """Return every franchise, in no particular order."""

    @abstractmethod
    async def delete_by_id(self, franchise_id: str) -> None:
        """Remove a franchise; does nothing if it does not exist."""

    @abstractmethod
    async def exists_by_id(self, franchise_id: str) -> bool:
        """Return True if a franchise with this ID is stored."""
