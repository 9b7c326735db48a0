"""Database client and session management."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from lms.config import Settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


class Database:
    """Own the engine and session factory used by the whole application.

    The client is constructed explicitly and handed to whoever needs
    persistence. ``open`` creates the connection pool, ``close`` releases it.
    """

    def __init__(self, url: str, *, pool_size: int = 10, echo: bool = False) -> None:
        self.url = url
        self.pool_size = pool_size
        self.echo = echo
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, pool_size=settings.db_pool_size)

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database client is not open")
        return self._engine

    def open(self) -> None:
        """Create the engine and its connection pool."""

        if self._engine is not None:
            return

        url = make_url(self.url)
        options: dict[str, object] = {"pool_pre_ping": True, "echo": self.echo}
        if url.get_backend_name() == "sqlite":
            # Sessions are used from FastAPI's worker threads.
            options["connect_args"] = {"check_same_thread": False}
        else:
            options["pool_size"] = self.pool_size
            options["max_overflow"] = 0

        self._engine = create_engine(url, **options)
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, bind=self._engine
        )
        logger.info("Opened database pool for %s", url.render_as_string(hide_password=True))

    def close(self) -> None:
        """Dispose the pool; the client can be opened again afterwards."""

        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Closed database pool")

    def session(self) -> Session:
        """Return a new session bound to the pool."""

        if self._session_factory is None:
            raise RuntimeError("Database client is not open")
        return self._session_factory()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Yield a session that commits on success and rolls back on failure."""

        session = self.session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


def get_database(request: Request) -> Database:
    """Return the client attached to the running application."""

    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()


__all__ = ["Base", "Database", "get_database", "get_db"]
