"""SQLAlchemy implementation of the EventStore.

ORM calls block, so each one runs on the threadpool and the request handler
keeps the event loop free. Every call uses its own short-lived session from
the shared ``sessionmaker``.
"""
import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import sessionmaker

from event_registry.models.event import Event
from event_registry.schemas.event import EventRecord
from event_registry.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def _to_record(row: Event) -> EventRecord:
    return EventRecord.model_validate(
        {column.name: getattr(row, column.name) for column in Event.__table__.columns}
    )


def _columns(record: EventRecord) -> dict:
    return record.model_dump(exclude={"id"})


class SqlAlchemyEventStore(EventStore):
    """Relational-database-backed event store."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    async def insert(self, record: EventRecord) -> EventRecord:
        return await run_in_threadpool(self._insert, record)

    async def find_by_id(self, event_id: str) -> EventRecord | None:
        return await run_in_threadpool(self._find_by_id, event_id)

    async def find_all(self) -> list[EventRecord]:
        return await run_in_threadpool(self._find_all)

    async def find_by_id_and_update(self, event_id: str, record: EventRecord) -> EventRecord | None:
        return await run_in_threadpool(self._find_by_id_and_update, event_id, record)

    async def find_by_id_and_delete(self, event_id: str) -> EventRecord | None:
        return await run_in_threadpool(self._find_by_id_and_delete, event_id)

    def _insert(self, record: EventRecord) -> EventRecord:
        with self._session_factory() as db:
            row = Event(**_columns(record))
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.debug("Inserted event row %s", row.id)
            return _to_record(row)

    def _find_by_id(self, event_id: str) -> EventRecord | None:
        with self._session_factory() as db:
            row = db.get(Event, event_id)
            return _to_record(row) if row else None

    def _find_all(self) -> list[EventRecord]:
        with self._session_factory() as db:
            return [_to_record(row) for row in db.query(Event).all()]

    def _find_by_id_and_update(self, event_id: str, record: EventRecord) -> EventRecord | None:
        with self._session_factory() as db:
            row = db.get(Event, event_id)
            if row is None:
                return None
            for field, value in _columns(record).items():
                setattr(row, field, value)
            db.commit()
            db.refresh(row)
            return _to_record(row)

    def _find_by_id_and_delete(self, event_id: str) -> EventRecord | None:
        with self._session_factory() as db:
            row = db.get(Event, event_id)
            if row is None:
                return None
            record = _to_record(row)
            db.delete(row)
            db.commit()
            return record
