"""SQLAlchemy engine, session factory and declarative base.

The engine (and its connection pool) is created once here and shared by every
request; stores receive ``SessionLocal`` rather than opening connections
themselves.
"""
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from event_registry.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str):
    """Create an engine for ``url`` with connection lifecycle logging."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, connect_args=connect_args, pool_pre_ping=True)

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_conn, connection_record):
        logger.debug("Opened database connection (%s)", engine.url.get_backend_name())

    @event.listens_for(engine, "close")
    def _on_close(dbapi_conn, connection_record):
        logger.debug("Closed database connection (%s)", engine.url.get_backend_name())

    return engine


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
