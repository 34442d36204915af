"""Document store implementations for Event records."""
from event_registry.stores.interfaces import EventStore
from event_registry.stores.memory_store import InMemoryEventStore
from event_registry.stores.sqlalchemy_store import SqlAlchemyEventStore

__all__ = ["EventStore", "InMemoryEventStore", "SqlAlchemyEventStore"]
