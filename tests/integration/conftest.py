"""Integration test fixtures: an in-memory SQLite database migrated with Alembic."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


@pytest.fixture
def sync_engine():
    """A fresh in-memory SQLite engine, migrated to head."""
    from infrastructure.database.engine import build_engine
    from infrastructure.database.migration_runner import MigrationRunner

    engine = build_engine("sqlite://")
    MigrationRunner(engine).upgrade()
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sync_engine):
    from infrastructure.database.engine import build_session_factory

    return build_session_factory(sync_engine)


@pytest.fixture
def db_session(session_factory):
    """Provide a session that is closed after the test."""
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def library_repo(db_session):
    from infrastructure.database.repository import SqlAlchemyLibraryRepository

    return SqlAlchemyLibraryRepository(db_session)
