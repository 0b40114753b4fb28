"""
Database configuration and session management for the GD Farms backend.

The Store wraps a pooled SQLAlchemy engine. One instance is built by the
application factory and handed to every service call, so tests can swap in
an in-memory database without touching module state.
"""

import os
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from gdfarms.config import Settings
from gdfarms.core.exceptions import StoreError

logger = logging.getLogger(__name__)

# Base class for declarative models
Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp used for created_at/updated_at columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def build_engine(settings: Settings) -> Engine:
    """
    Create the SQLAlchemy engine described by the settings.

    Server databases get a bounded connection pool. When SSL is required the
    connection is encrypted but the certificate is not verified.
    """
    url = settings.DATABASE_URL
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    connect_args: Dict[str, Any] = {}
    engine_kwargs: Dict[str, Any] = {"echo": settings.DATABASE_ECHO}

    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    else:
        engine_kwargs.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_timeout=settings.DATABASE_POOL_TIMEOUT,
            pool_pre_ping=True,
        )
        if settings.database_requires_ssl:
            connect_args["sslmode"] = "require"

    return create_engine(url, connect_args=connect_args, **engine_kwargs)


class Store:
    """Pooled access to the relational store."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(
            bind=engine, autoflush=False, expire_on_commit=False
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        return cls(build_engine(settings))

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Yield a session wrapped in a transaction.

        Commits when the block exits cleanly, rolls back otherwise, and always
        returns the connection to the pool. SQLAlchemy failures are re-raised
        as StoreError.
        """
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Database transaction failed: {exc}", exc_info=True)
            raise StoreError(f"{exc.__class__.__name__}: {exc}") from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def execute(
        self, statement: str, parameters: Optional[Dict[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Run one parameterized statement and return its rows as dicts."""
        try:
            with self.engine.begin() as conn:
                result = conn.execute(text(statement), parameters or {})
                if result.returns_rows:
                    return [dict(row._mapping) for row in result.fetchall()]
                return []
        except SQLAlchemyError as exc:
            logger.error(f"Statement failed: {exc}", exc_info=True)
            raise StoreError(f"{exc.__class__.__name__}: {exc}") from exc

    def ping(self) -> Any:
        """Return the database clock; raises StoreError when unreachable."""
        rows = self.execute("SELECT CURRENT_TIMESTAMP AS now")
        return rows[0]["now"]

    def init_schema(self) -> None:
        """
        Initialize database by creating all tables.
        """
        # Import models to ensure they're registered
        from gdfarms.models import user, item, user_settings, goal  # noqa: F401

        # Create database directory if it doesn't exist
        database = self.engine.url.database
        if self.engine.url.get_backend_name() == "sqlite" and database not in (None, "", ":memory:"):
            db_dir = os.path.dirname(database)
            if db_dir and not os.path.exists(db_dir):
                os.makedirs(db_dir, exist_ok=True)

        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            raise StoreError(f"{exc.__class__.__name__}: {exc}") from exc

    def dispose(self) -> None:
        self.engine.dispose()
