"""
Programmatic Alembic migration runner.

Runs the migrations shipped in ``infrastructure/database/migrations``
against an existing :class:`Engine`, without needing an ``alembic.ini``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from alembic import command as alembic_command
from alembic.config import Config as AlembicConfig
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

_DEFAULT_SCRIPT_LOCATION = Path(__file__).resolve().parent / "migrations"


@dataclass
class MigrationStatus:
    """Snapshot of the database's migration state."""

    current_revision: Optional[str]
    head_revision: Optional[str]
    is_up_to_date: bool


class MigrationRunner:
    """Run Alembic migrations against *engine*.

    Parameters
    ----------
    engine:
        A synchronous SQLAlchemy :class:`Engine`.
    script_location:
        Alembic script directory.  If *None* the bundled migrations are
        used.
    """

    def __init__(self, engine: Engine, script_location: Optional[str] = None) -> None:
        self._engine = engine
        self._script_location = script_location or str(_DEFAULT_SCRIPT_LOCATION)

    def _make_alembic_config(self) -> AlembicConfig:
        cfg = AlembicConfig()
        cfg.set_main_option("script_location", self._script_location)
        cfg.set_main_option("sqlalchemy.url", self._engine.url.render_as_string(hide_password=False))
        return cfg

    def upgrade(self, revision: str = "head") -> None:
        logger.info("Upgrading database to %s", revision)
        cfg = self._make_alembic_config()
        with self._engine.begin() as conn:
            cfg.attributes["connection"] = conn
            alembic_command.upgrade(cfg, revision)

    def downgrade(self, revision: str) -> None:
        """Downgrade to *revision* (e.g. ``"base"`` or ``"-1"``)."""
        logger.info("Downgrading database to %s", revision)
        cfg = self._make_alembic_config()
        with self._engine.begin() as conn:
            cfg.attributes["connection"] = conn
            alembic_command.downgrade(cfg, revision)

    def status(self) -> MigrationStatus:
        with self._engine.connect() as conn:
            current_rev = MigrationContext.configure(conn).get_current_revision()

        script = ScriptDirectory.from_config(self._make_alembic_config())
        head_rev = script.get_current_head()

        return MigrationStatus(
            current_revision=current_rev,
            head_revision=head_rev,
            is_up_to_date=(current_rev == head_rev),
        )
