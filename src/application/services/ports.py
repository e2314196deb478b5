"""Repository port shared by the author and book services (dependency-inversion)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Protocol
from uuid import UUID

from domain.models.author import Author, Book

DEFAULT_AUTHOR_ORDER: tuple[str, ...] = ("first_name", "last_name")


class LibraryRepository(Protocol):
    """Port: persistence operations for authors and their books.

    ``add_*``, ``update_*`` and ``delete_*`` only stage work; nothing is
    durable until :meth:`save` returns ``True``.
    """

    def find_authors(
        self,
        search_query: Optional[str] = None,
        genre: Optional[str] = None,
        order_by: Sequence[str] = DEFAULT_AUTHOR_ORDER,
    ) -> list[Author]: ...

    def author_exists(self, author_id: UUID) -> bool: ...

    def get_author(self, author_id: UUID) -> Optional[Author]: ...

    def add_author(self, author: Author) -> None: ...

    def delete_author(self, author: Author) -> None: ...

    def get_books_for_author(self, author_id: UUID) -> list[Book]: ...

    def get_book_for_author(self, author_id: UUID, book_id: UUID) -> Optional[Book]: ...

    def book_exists(self, book_id: UUID) -> bool: ...

    def add_book_for_author(self, author_id: UUID, book: Book) -> None: ...

    def update_book_for_author(self, book: Book) -> None: ...

    def delete_book(self, book: Book) -> None: ...

    def save(self) -> bool: ...
