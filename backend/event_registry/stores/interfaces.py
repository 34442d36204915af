"""Store interface (repository pattern).

Stores must be swappable and return ``EventRecord`` instances. Ids are
assigned by the store; a lookup by an id that names no record (including one
the backend could never have issued) returns ``None``.
"""
from abc import ABC, abstractmethod

from event_registry.schemas.event import EventRecord


class EventStore(ABC):
    """Interface for event registration persistence."""

    @abstractmethod
    async def insert(self, record: EventRecord) -> EventRecord:
        """Persist a new record and return it with its assigned id."""
        ...

    @abstractmethod
    async def find_by_id(self, event_id: str) -> EventRecord | None:
        ...

    @abstractmethod
    async def find_all(self) -> list[EventRecord]:
        """Return every record, in whatever order the backend yields them."""
        ...

    @abstractmethod
    async def find_by_id_and_update(self, event_id: str, record: EventRecord) -> EventRecord | None:
        """Replace the stored fields of ``event_id`` with ``record``; ``None`` if absent."""
        ...

    @abstractmethod
    async def find_by_id_and_delete(self, event_id: str) -> EventRecord | None:
        """Remove ``event_id`` and return what was removed; ``None`` if absent."""
        ...
