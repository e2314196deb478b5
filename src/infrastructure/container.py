"""Dependency injection container for the Library Catalog API.

Wires together the repository adapter selected by the settings and the
application services, exposing factory functions suitable for FastAPI's
``Depends()`` system.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from fastapi import Depends

from application.services.author_service import AuthorService
from application.services.book_service import BookService
from application.services.ports import LibraryRepository
from infrastructure.adapters import InMemoryCatalogStore, InMemoryLibraryRepository
from infrastructure.database.engine import build_engine, build_session_factory
from infrastructure.database.migration_runner import MigrationRunner
from infrastructure.database.repository import SqlAlchemyLibraryRepository
from infrastructure.seed import seed_catalog
from infrastructure.settings import AppSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlalchemy.engine import Engine
    from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Central DI container that owns the persistence wiring.

    With the ``memory`` backend one :class:`InMemoryCatalogStore` lives for
    the life of the process and every request gets its own
    :class:`InMemoryLibraryRepository` over it.  With ``sqlalchemy`` the container
    owns the engine and session factory, and every request gets its own
    session and repository.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self.settings = settings or get_settings()

        self.engine: Optional[Engine] = None
        self.session_factory: Optional[sessionmaker[Session]] = None
        self.memory_store: Optional[InMemoryCatalogStore] = None

        if self.settings.repository_backend == "sqlalchemy":
            self.engine = build_engine(self.settings.database_url, self.settings)
            self.session_factory = build_session_factory(self.engine)
        else:
            self.memory_store = InMemoryCatalogStore()

        logger.info(
            "ServiceContainer initialized with %s backend",
            self.settings.repository_backend,
        )

    def initialize(self) -> None:
        """Bring the store up to date: run migrations, then seed if empty."""
        if self.engine is not None and self.settings.run_migrations:
            MigrationRunner(self.engine).upgrade()

        if self.settings.seed_data:
            for repo in self.repositories():
                seed_catalog(repo)

    def repositories(self) -> Generator[LibraryRepository, None, None]:
        """Yield one repository; with SQLAlchemy its session is closed afterwards."""
        if self.memory_store is not None:
            yield InMemoryLibraryRepository(self.memory_store)
            return
        if self.session_factory is None:
            raise RuntimeError("ServiceContainer has no persistence backend configured")

        session = self.session_factory()
        try:
            yield SqlAlchemyLibraryRepository(session)
        finally:
            session.close()

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


# Module-level singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return the global container singleton."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def configure_container(settings: AppSettings) -> ServiceContainer:
    """Replace the global container with one built from *settings*."""
    global _container
    _container = ServiceContainer(settings)
    return _container


def reset_container() -> None:
    """Reset the global container (for testing)."""
    global _container
    if _container is not None:
        _container.dispose()
    _container = None


# ---------------------------------------------------------------------------
# FastAPI dependency factories
# ---------------------------------------------------------------------------


def get_library_repository() -> Generator[LibraryRepository, None, None]:
    yield from get_container().repositories()


def get_author_service(
    repo: LibraryRepository = Depends(get_library_repository),
) -> AuthorService:
    return AuthorService(library_repo=repo)


def get_book_service(
    repo: LibraryRepository = Depends(get_library_repository),
) -> BookService:
    return BookService(library_repo=repo)
