"""Application service for an author's books.

Besides plain create/read/delete, ``BookService`` implements update-or-
create ("upsert") for books addressed by a client-supplied id.  Full
updates and JSON Patch updates share a single decision procedure,
:meth:`BookService._upsert`, and differ only in how they materialize the
update view.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

from domain.exceptions import (
    AuthorNotFoundError,
    BookIdConflictError,
    BookNotFoundError,
    PersistenceError,
)
from domain.models.author import Book

from application.schemas.books import (
    BookForCreation,
    BookForUpdate,
    PatchOperation,
    to_update_view,
    validate_book_for_update,
)
from application.services.book_patch import apply_book_patch
from application.services.ports import LibraryRepository

logger = logging.getLogger(__name__)

# Given the book found by the lookup (or None), produce the validated
# values the book should end up with.
Materializer = Callable[[Optional[Book]], BookForUpdate]


class UpsertOutcome(enum.Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class UpsertResult:
    outcome: UpsertOutcome
    book: Book

    @property
    def created(self) -> bool:
        return self.outcome is UpsertOutcome.CREATED


class BookService:
    """Orchestrates book CRUD and upsert for a single author."""

    def __init__(self, library_repo: LibraryRepository) -> None:
        self._repo = library_repo

    # -- helpers ----------------------------------------------------------

    def _require_author(self, author_id: UUID) -> None:
        if not self._repo.author_exists(author_id):
            raise AuthorNotFoundError(author_id=str(author_id))

    def _save(self, operation: str) -> None:
        if not self._repo.save():
            logger.error("%s failed on save", operation)
            raise PersistenceError(operation=operation)

    def _upsert(self, author_id: UUID, book_id: UUID, materialize: Materializer) -> UpsertResult:
        """Modify the book if it exists, otherwise create it under *book_id*.

        Validation happens inside *materialize*, before anything is staged,
        so a rejected payload never reaches :meth:`LibraryRepository.save`.
        A *book_id* already owned by another author is a conflict, never a
        create.
        """
        self._require_author(author_id)
        existing = self._repo.get_book_for_author(author_id, book_id)
        if existing is None and self._repo.book_exists(book_id):
            raise BookIdConflictError(author_id=str(author_id), book_id=str(book_id))
        values = materialize(existing)

        if existing is None:
            book = Book(
                id=book_id,
                author_id=author_id,
                title=values.title,
                description=values.description,
            )
            self._repo.add_book_for_author(author_id, book)
            self._save("Creating a book")
            logger.info("Book %s created for author %s by upsert", book_id, author_id)
            return UpsertResult(outcome=UpsertOutcome.CREATED, book=book)

        existing.title = values.title
        existing.description = values.description
        self._repo.update_book_for_author(existing)
        self._save("Updating a book")
        logger.info("Book %s updated for author %s", book_id, author_id)
        return UpsertResult(outcome=UpsertOutcome.UPDATED, book=existing)

    # -- public API -------------------------------------------------------

    def list_books_for_author(self, author_id: UUID) -> list[Book]:
        self._require_author(author_id)
        return self._repo.get_books_for_author(author_id)

    def get_book_for_author(self, author_id: UUID, book_id: UUID) -> Book:
        self._require_author(author_id)
        book = self._repo.get_book_for_author(author_id, book_id)
        if book is None:
            raise BookNotFoundError(author_id=str(author_id), book_id=str(book_id))
        return book

    def create_book_for_author(self, author_id: UUID, payload: BookForCreation) -> Book:
        """Create a book with a server-generated id."""
        self._require_author(author_id)
        book = Book(
            id=uuid4(),
            author_id=author_id,
            title=payload.title,
            description=payload.description,
        )
        self._repo.add_book_for_author(author_id, book)
        self._save("Creating a book")
        logger.info("Book %s created for author %s", book.id, author_id)
        return book

    def upsert_book(self, author_id: UUID, book_id: UUID, payload: BookForUpdate) -> UpsertResult:
        """Full update of a book, creating it under *book_id* when missing."""
        return self._upsert(
            author_id,
            book_id,
            lambda existing: validate_book_for_update(payload.model_dump()),
        )

    def patch_book(
        self,
        author_id: UUID,
        book_id: UUID,
        operations: Sequence[PatchOperation],
    ) -> UpsertResult:
        """Apply a JSON Patch to a book, creating it under *book_id* when missing.

        A missing book is patched starting from a blank view, so fields
        the patch does not set stay unset and must still pass validation.
        """
        return self._upsert(
            author_id,
            book_id,
            lambda existing: validate_book_for_update(
                apply_book_patch(to_update_view(existing), operations)
            ),
        )

    def delete_book_for_author(self, author_id: UUID, book_id: UUID) -> None:
        book = self.get_book_for_author(author_id, book_id)
        self._repo.delete_book(book)
        self._save("Deleting a book")
        logger.info("Book %s deleted for author %s", book_id, author_id)
