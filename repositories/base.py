"""
Repository base classes - define the durable storage interface.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from models import Response

# Fields an update may replace. id is the lookup key and never changes.
UPDATABLE_FIELDS = frozenset({"text", "score", "confidence"})


class ResponseStorage(ABC):
    """
    Durable storage for response records.

    Backends keep records in insertion order. Every method either succeeds
    or raises StorageError.
    """

    @abstractmethod
    def fetch_all(self) -> list[Response]:
        """All records, oldest first."""
        pass

    @abstractmethod
    def insert(self, response: Response) -> None:
        """Append a record. Replaces an existing record with the same id."""
        pass

    @abstractmethod
    def update(self, id: UUID, fields: dict) -> bool:
        """Replace fields of a record. Returns False if id is absent."""
        pass

    @abstractmethod
    def delete(self, id: UUID) -> bool:
        """Delete record by id. Returns True if deleted."""
        pass

    def exists(self, id: UUID) -> bool:
        """Check if a record exists."""
        return any(r.id == id for r in self.fetch_all())

    def count(self) -> int:
        return len(self.fetch_all())


def check_fields(fields: dict) -> dict:
    """Reject updates to anything but text/score/confidence."""
    unknown = set(fields) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update fields: {sorted(unknown)}")
    return fields
