"""Contract test fixtures: a fresh application per test over the in-memory backend."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))


@pytest.fixture
def settings():
    from infrastructure.settings import AppSettings

    return AppSettings(repository_backend="memory", seed_data=False, cors_origins="*")


@pytest.fixture
def app(settings):
    from infrastructure.container import configure_container, reset_container
    from presentation.main import create_app

    reset_container()
    configure_container(settings)
    application = create_app()
    yield application
    application.dependency_overrides.clear()
    reset_container()


@pytest.fixture
def client(app):
    from starlette.testclient import TestClient

    return TestClient(app)
