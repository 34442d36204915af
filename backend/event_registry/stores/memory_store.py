"""Dict-backed EventStore, used by tests and local experiments."""
import uuid

from event_registry.schemas.event import EventRecord
from event_registry.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    """Keeps records in insertion order; returns copies so callers cannot mutate state."""

    def __init__(self) -> None:
        self._records: dict[str, EventRecord] = {}

    async def insert(self, record: EventRecord) -> EventRecord:
        event_id = str(uuid.uuid4())
        stored = record.model_copy(update={"id": event_id})
        self._records[event_id] = stored
        return stored.model_copy()

    async def find_by_id(self, event_id: str) -> EventRecord | None:
        record = self._records.get(event_id)
        return record.model_copy() if record else None

    async def find_all(self) -> list[EventRecord]:
        return [record.model_copy() for record in self._records.values()]

    async def find_by_id_and_update(self, event_id: str, record: EventRecord) -> EventRecord | None:
        if event_id not in self._records:
            return None
        stored = record.model_copy(update={"id": event_id})
        self._records[event_id] = stored
        return stored.model_copy()

    async def find_by_id_and_delete(self, event_id: str) -> EventRecord | None:
        return self._records.pop(event_id, None)
