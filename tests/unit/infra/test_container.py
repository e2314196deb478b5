"""Unit tests for ServiceContainer repository wiring."""

from __future__ import annotations

import pytest

from infrastructure.adapters import InMemoryLibraryRepository
from infrastructure.container import ServiceContainer
from infrastructure.settings import AppSettings


def _memory_container() -> ServiceContainer:
    return ServiceContainer(AppSettings(repository_backend="memory", seed_data=False))


class TestRepositories:

    def test_memory_backend_yields_fresh_unit_of_work_per_request(self):
        container = _memory_container()
        first = next(container.repositories())
        second = next(container.repositories())
        assert isinstance(first, InMemoryLibraryRepository)
        assert first is not second
        assert first._store is second._store is container.memory_store

    def test_no_backend_raises_runtime_error(self):
        container = _memory_container()
        container.memory_store = None
        with pytest.raises(RuntimeError, match="no persistence backend"):
            next(container.repositories())
