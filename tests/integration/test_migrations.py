"""Integration tests for the programmatic Alembic runner."""

from __future__ import annotations

import pytest
from sqlalchemy import inspect

from infrastructure.database.engine import build_engine
from infrastructure.database.migration_runner import MigrationRunner


@pytest.mark.integration
class TestMigrationRunner:

    def test_upgrade_creates_tables(self, sync_engine):
        tables = set(inspect(sync_engine).get_table_names())
        assert {"authors", "books", "alembic_version"} <= tables

    def test_status_up_to_date_after_upgrade(self, sync_engine):
        status = MigrationRunner(sync_engine).status()
        assert status.current_revision == "001"
        assert status.head_revision == "001"
        assert status.is_up_to_date is True

    def test_fresh_database_not_up_to_date(self):
        engine = build_engine("sqlite://")
        try:
            status = MigrationRunner(engine).status()
            assert status.current_revision is None
            assert status.is_up_to_date is False
        finally:
            engine.dispose()

    def test_downgrade_to_base_drops_tables(self, sync_engine):
        runner = MigrationRunner(sync_engine)
        runner.downgrade("base")
        tables = set(inspect(sync_engine).get_table_names())
        assert "authors" not in tables
        assert "books" not in tables
        assert runner.status().current_revision is None
