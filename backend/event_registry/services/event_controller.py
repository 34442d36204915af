"""Event registration controller: the five CRUD operations over an EventStore.

Responsibilities:
- Required-field and contact-detail checks before anything touches the store
- Schema defaults on create, field-by-field merge and whole-record
  re-validation on update
- Mapping every outcome onto the error taxonomy in ``event_registry.errors``;
  unexpected store failures are logged and surface as ``InternalError``

Update is two store round-trips (fetch, then write) with no transaction
around them.
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Callable

from event_registry.errors import (
    EventNotFoundError,
    EventRegistryError,
    InternalError,
    InvalidContactNumberError,
    InvalidEmailError,
    MissingFieldsError,
)
from event_registry.schemas.event import (
    REQUIRED_FIELDS,
    EventRecord,
    build_new_record,
    merge_changes,
    parse_changes,
    validate_record,
)
from event_registry.services.validators import is_valid_contact_number, is_valid_email
from event_registry.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@asynccontextmanager
async def _store_failures(operation: str, event_id: str | None = None):
    """Turn anything unexpected raised by the store into InternalError."""
    try:
        yield
    except EventRegistryError:
        raise
    except Exception as exc:
        logger.exception("Store failure during %s (event %s)", operation, event_id)
        raise InternalError() from exc


class EventController:
    """Create, read, update and delete event registrations."""

    def __init__(self, store: EventStore, clock: Callable[[], datetime] = _utcnow) -> None:
        self._store = store
        self._clock = clock

    async def create(self, payload: dict[str, Any]) -> EventRecord:
        """Register an attendee.

        Raises:
            MissingFieldsError: a required field is absent or empty.
            InvalidEmailError / InvalidContactNumberError: malformed contact details.
            RecordValidationError: the payload fails the record schema.
            InternalError: the store failed.
        """
        if any(not payload.get(field) for field in REQUIRED_FIELDS):
            raise MissingFieldsError()
        if not is_valid_email(payload["email"]):
            raise InvalidEmailError()
        if not is_valid_contact_number(payload["contactNumber"]):
            raise InvalidContactNumberError()

        record = build_new_record(payload, self._clock())
        async with _store_failures("create"):
            created = await self._store.insert(record)
        logger.info("Created event registration %s", created.id)
        return created

    async def get_all(self) -> list[EventRecord]:
        async with _store_failures("get_all"):
            return await self._store.find_all()

    async def get_by_id(self, event_id: str) -> EventRecord:
        async with _store_failures("get_by_id", event_id):
            record = await self._store.find_by_id(event_id)
        if record is None:
            raise EventNotFoundError(event_id)
        return record

    async def update(self, event_id: str, payload: dict[str, Any]) -> EventRecord:
        """Apply a partial update and return the stored result.

        Contact details are checked before the store is consulted; the merged
        record is then validated as a whole before it is written.
        """
        contact_number = payload.get("contactNumber")
        if contact_number and not is_valid_contact_number(contact_number):
            raise InvalidContactNumberError()
        email = payload.get("email")
        if email and not is_valid_email(email):
            raise InvalidEmailError()

        async with _store_failures("update", event_id):
            existing = await self._store.find_by_id(event_id)
        if existing is None:
            raise EventNotFoundError(event_id)

        merged = validate_record(merge_changes(existing, parse_changes(payload)))

        async with _store_failures("update", event_id):
            updated = await self._store.find_by_id_and_update(event_id, merged)
        if updated is None:
            # Deleted between the fetch and the write.
            raise EventNotFoundError(event_id)
        logger.info("Updated event registration %s", event_id)
        return updated

    async def delete_by_id(self, event_id: str) -> None:
        async with _store_failures("delete_by_id", event_id):
            removed = await self._store.find_by_id_and_delete(event_id)
        if removed is None:
            raise EventNotFoundError(event_id)
        logger.info("Deleted event registration %s", event_id)
