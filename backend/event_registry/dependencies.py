"""FastAPI dependencies wiring the controller to its store.

Tests replace ``get_store`` through ``app.dependency_overrides``.
"""
from fastapi import Depends

from event_registry.database import SessionLocal
from event_registry.services.event_controller import EventController
from event_registry.stores import EventStore, SqlAlchemyEventStore

_store = SqlAlchemyEventStore(SessionLocal)


def get_store() -> EventStore:
    return _store


def get_controller(store: EventStore = Depends(get_store)) -> EventController:
    return EventController(store)
