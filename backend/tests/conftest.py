"""Pytest fixtures: SQLite-backed and in-memory stores for fast, isolated tests."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from event_registry.database import Base
from event_registry.dependencies import get_store
from event_registry.main import app
from event_registry.schemas.event import EventRecord
from event_registry.services.event_controller import EventController
from event_registry.stores import EventStore, InMemoryEventStore, SqlAlchemyEventStore

# Import all models so they register with Base.metadata
from event_registry.models.event import Event  # noqa: F401

SQLITE_URL = "sqlite:///./test.db"

VALID_PAYLOAD = {
    "eventName": "Colombo Fashion Week",
    "attendeeFirstName": "John",
    "attendeeLastName": "Doe",
    "email": "john.doe@gmail.com",
    "contactNumber": "0712345678",
    "address": "123 Main Street, Colombo",
    "ticketType": "Regular",
    "specialRequests": "No special requests",
}


class BrokenEventStore(EventStore):
    """Every call fails the way an unreachable database would."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or ConnectionError("database unreachable")
        self.calls: list[str] = []

    async def _fail(self, operation: str):
        self.calls.append(operation)
        raise self.error

    async def insert(self, record: EventRecord) -> EventRecord:
        return await self._fail("insert")

    async def find_by_id(self, event_id: str) -> EventRecord | None:
        return await self._fail("find_by_id")

    async def find_all(self) -> list[EventRecord]:
        return await self._fail("find_all")

    async def find_by_id_and_update(self, event_id: str, record: EventRecord) -> EventRecord | None:
        return await self._fail("find_by_id_and_update")

    async def find_by_id_and_delete(self, event_id: str) -> EventRecord | None:
        return await self._fail("find_by_id_and_delete")


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def sql_store(db_engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    return SqlAlchemyEventStore(TestingSession)


@pytest.fixture(scope="function")
def memory_store():
    return InMemoryEventStore()


@pytest.fixture(scope="function")
def broken_store():
    return BrokenEventStore()


@pytest.fixture(scope="function")
def controller(memory_store):
    return EventController(memory_store)


def _client_for(store: EventStore):
    app.dependency_overrides[get_store] = lambda: store
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(sql_store):
    """FastAPI TestClient whose controller writes to the per-test SQLite database."""
    yield from _client_for(sql_store)


@pytest.fixture(scope="function")
def memory_client(memory_store):
    """FastAPI TestClient whose controller writes to an InMemoryEventStore."""
    yield from _client_for(memory_store)


@pytest.fixture(scope="function")
def broken_client(broken_store):
    """FastAPI TestClient whose store fails on every call."""
    yield from _client_for(broken_store)


# ---------------------------------------------------------------------------
# Helper: register an attendee via the API, returns the stored event dict
# ---------------------------------------------------------------------------
def create_test_registration(client: TestClient, **overrides) -> dict:
    """Helper: POST /api/events/create and return the created event."""
    resp = client.post("/api/events/create", json={**VALID_PAYLOAD, **overrides})
    assert resp.status_code == 201, resp.text
    return resp.json()["event"]
