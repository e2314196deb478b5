"""
SQLAlchemy engine and session factory setup.

The API uses synchronous sessions: one :class:`Session` per request,
handed to the repository by the FastAPI dependency in
``infrastructure.container``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from infrastructure.settings import AppSettings

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, settings: AppSettings | None = None) -> Engine:
    """Create a synchronous SQLAlchemy :class:`Engine` for *database_url*.

    SQLite gets ``check_same_thread`` disabled (FastAPI runs sync
    dependencies in a thread pool) and foreign keys switched on; an
    in-memory SQLite URL shares a single connection so every session
    sees the same database.  Other backends get a sized pool.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=False, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    s = settings or AppSettings()
    return create_engine(
        url,
        pool_size=s.db_pool_size,
        max_overflow=s.db_max_overflow,
        pool_pre_ping=True,
        echo=False,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)

