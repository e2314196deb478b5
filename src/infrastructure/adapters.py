"""Adapter implementations bridging infrastructure to application-layer ports.

Provides the in-memory ``LibraryRepository`` used by the default wiring
and by the unit tests.  Committed data lives in an
:class:`InMemoryCatalogStore` shared by every request; each
:class:`InMemoryLibraryRepository` is one unit of work over that store.
Like the SQLAlchemy adapter it hands out copies and stages every change
until :meth:`InMemoryLibraryRepository.save`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import replace
from operator import attrgetter
from typing import Optional
from uuid import UUID

from application.services.ports import DEFAULT_AUTHOR_ORDER
from domain.models.author import Author, Book

logger = logging.getLogger(__name__)

_SORTABLE_AUTHOR_FIELDS = frozenset({"first_name", "last_name", "genre", "date_of_birth"})


def _normalize(value: str) -> str:
    return value.strip().lower()


class KeyCollisionError(Exception):
    """A staged insert reuses a key that is already committed."""


class InMemoryCatalogStore:
    """Committed authors and books, guarded by one lock."""

    def __init__(self) -> None:
        self.authors: dict[UUID, Author] = {}
        self.books: dict[UUID, Book] = {}
        self.lock = threading.RLock()

    def insert_author(self, author: Author) -> None:
        if author.id in self.authors or any(b.id in self.books for b in author.books):
            raise KeyCollisionError(str(author.id))
        self.authors[author.id] = replace(author, books=[])
        for book in author.books:
            self.books[book.id] = replace(book, author_id=author.id)

    def remove_author(self, author_id: UUID) -> None:
        self.authors.pop(author_id, None)
        for book_id in [b.id for b in self.books.values() if b.author_id == author_id]:
            del self.books[book_id]

    def insert_book(self, book: Book) -> None:
        if book.id in self.books:
            raise KeyCollisionError(str(book.id))
        self.books[book.id] = book

    def update_book(self, book: Book) -> None:
        current = self.books.get(book.id)
        if current is not None and current.author_id == book.author_id:
            self.books[book.id] = book


# ---------------------------------------------------------------------------
# In-memory repository adapter (swap for SqlAlchemyLibraryRepository)
# ---------------------------------------------------------------------------

class InMemoryLibraryRepository:
    """Synchronous in-memory author/book unit of work.

    Parameters
    ----------
    store:
        Committed data to work against.  A private store is created when
        omitted.
    """

    def __init__(self, store: InMemoryCatalogStore | None = None) -> None:
        self._store = store or InMemoryCatalogStore()
        self._pending: list[Callable[[InMemoryCatalogStore], None]] = []

    # -- helpers ----------------------------------------------------------

    def _books_of(self, author_id: UUID) -> list[Book]:
        books = [replace(b) for b in self._store.books.values() if b.author_id == author_id]
        return sorted(books, key=attrgetter("title"))

    def _author_copy(self, author: Author) -> Author:
        return replace(author, books=self._books_of(author.id))

    # -- authors ----------------------------------------------------------

    def find_authors(
        self,
        search_query: Optional[str] = None,
        genre: Optional[str] = None,
        order_by: Sequence[str] = DEFAULT_AUTHOR_ORDER,
    ) -> list[Author]:
        unknown = set(order_by) - _SORTABLE_AUTHOR_FIELDS
        if unknown:
            raise ValueError(f"Cannot order authors by {sorted(unknown)[0]!r}")

        with self._store.lock:
            authors = list(self._store.authors.values())

            if genre and genre.strip():
                wanted = _normalize(genre)
                authors = [a for a in authors if _normalize(a.genre) == wanted]

            if search_query and search_query.strip():
                needle = _normalize(search_query)
                authors = [
                    a
                    for a in authors
                    if needle in a.genre.lower()
                    or needle in a.first_name.lower()
                    or needle in a.last_name.lower()
                ]

            if order_by:
                authors.sort(key=attrgetter(*order_by))
            return [self._author_copy(a) for a in authors]

    def author_exists(self, author_id: UUID) -> bool:
        with self._store.lock:
            return author_id in self._store.authors

    def get_author(self, author_id: UUID) -> Optional[Author]:
        with self._store.lock:
            author = self._store.authors.get(author_id)
            return self._author_copy(author) if author else None

    def add_author(self, author: Author) -> None:
        staged = replace(author, books=[replace(b) for b in author.books])
        self._pending.append(lambda store: store.insert_author(staged))

    def delete_author(self, author: Author) -> None:
        author_id = author.id
        self._pending.append(lambda store: store.remove_author(author_id))

    # -- books ------------------------------------------------------------

    def get_books_for_author(self, author_id: UUID) -> list[Book]:
        with self._store.lock:
            return self._books_of(author_id)

    def get_book_for_author(self, author_id: UUID, book_id: UUID) -> Optional[Book]:
        with self._store.lock:
            book = self._store.books.get(book_id)
            if book is None or book.author_id != author_id:
                return None
            return replace(book)

    def book_exists(self, book_id: UUID) -> bool:
        with self._store.lock:
            return book_id in self._store.books

    def add_book_for_author(self, author_id: UUID, book: Book) -> None:
        book.author_id = author_id
        staged = replace(book)
        self._pending.append(lambda store: store.insert_book(staged))

    def update_book_for_author(self, book: Book) -> None:
        staged = replace(book)
        self._pending.append(lambda store: store.update_book(staged))

    def delete_book(self, book: Book) -> None:
        book_id = book.id
        self._pending.append(lambda store: store.books.pop(book_id, None))

    # -- unit of work -----------------------------------------------------

    def save(self) -> bool:
        """Apply this unit of work's staged changes atomically.

        A staged insert that collides with a committed key discards the
        whole batch and returns ``False``.
        """
        pending, self._pending = self._pending, []
        with self._store.lock:
            snapshot = (dict(self._store.authors), dict(self._store.books))
            try:
                for change in pending:
                    change(self._store)
            except KeyCollisionError as exc:
                self._store.authors, self._store.books = snapshot
                logger.error("Save rejected: key %s already exists", exc)
                return False
        logger.debug("Applied %d staged changes", len(pending))
        return True
