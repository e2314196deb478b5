"""Application service for the author collection.

``AuthorService`` sits between the presentation layer and the
repository port.  It builds paged, filtered views of the catalog and
handles author creation and deletion.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional
from uuid import UUID, uuid4

from domain.exceptions import AuthorAlreadyExistsError, AuthorNotFoundError, PersistenceError
from domain.models.author import Author, Book

from application.schemas.pagination import PagedResult, PageParameters
from application.services.ports import LibraryRepository

logger = logging.getLogger(__name__)


class AuthorService:
    """Orchestrates author queries and author CRUD."""

    def __init__(self, library_repo: LibraryRepository) -> None:
        self._repo = library_repo

    def _save(self, operation: str) -> None:
        if not self._repo.save():
            logger.error("%s failed on save", operation)
            raise PersistenceError(operation=operation)

    def list_authors(self, params: PageParameters) -> PagedResult[Author]:
        """Return one page of authors matching the filters in *params*."""
        authors = self._repo.find_authors(
            search_query=params.search_query,
            genre=params.genre,
        )
        return PagedResult[Author].create(authors, params.page_number, params.page_size)

    def get_author(self, author_id: UUID) -> Author:
        author = self._repo.get_author(author_id)
        if author is None:
            raise AuthorNotFoundError(author_id=str(author_id))
        return author

    def create_author(
        self,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        genre: str,
        books: Optional[list[dict[str, Any]]] = None,
    ) -> Author:
        """Create an author, and any nested books, with server-generated ids."""
        author = Author(
            id=uuid4(),
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
            genre=genre,
        )
        for book in books or []:
            author.books.append(
                Book(
                    id=uuid4(),
                    author_id=author.id,
                    title=book["title"],
                    description=book.get("description"),
                )
            )

        self._repo.add_author(author)
        self._save("Creating an author")
        logger.info("Author %s created with %d books", author.id, len(author.books))
        return author

    def block_author_creation(self, author_id: UUID) -> None:
        """POST to an existing author's URI is a conflict, otherwise not found."""
        if self._repo.author_exists(author_id):
            raise AuthorAlreadyExistsError(author_id=str(author_id))
        raise AuthorNotFoundError(author_id=str(author_id))

    def delete_author(self, author_id: UUID) -> None:
        """Delete an author; their books go with them."""
        author = self.get_author(author_id)
        self._repo.delete_author(author)
        self._save("Deleting an author")
        logger.info("Author %s deleted", author_id)
