"""
SQLAlchemy implementation of the ``LibraryRepository`` port.

The repository works on a single synchronous :class:`Session`.  Rows
are converted to domain dataclasses on the way out, so callers never
hold ORM instances; changes made to a returned :class:`Book` only reach
the database through :meth:`update_book_for_author` followed by
:meth:`save`.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence
from typing import Optional

from sqlalchemy import exists, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from application.services.ports import DEFAULT_AUTHOR_ORDER
from domain.models.author import Author, Book

from .models import AuthorModel, BookModel

logger = logging.getLogger(__name__)

_AUTHOR_SORT_COLUMNS = {
    "first_name": AuthorModel.first_name,
    "last_name": AuthorModel.last_name,
    "genre": AuthorModel.genre,
    "date_of_birth": AuthorModel.date_of_birth,
}


class SqlAlchemyLibraryRepository:
    """Authors and books stored through SQLAlchemy.

    Parameters
    ----------
    session:
        A :class:`Session` scoped to the current request.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # -- authors ----------------------------------------------------------

    def find_authors(
        self,
        search_query: Optional[str] = None,
        genre: Optional[str] = None,
        order_by: Sequence[str] = DEFAULT_AUTHOR_ORDER,
    ) -> list[Author]:
        stmt = select(AuthorModel)

        if genre and genre.strip():
            stmt = stmt.where(func.lower(func.trim(AuthorModel.genre)) == genre.strip().lower())

        if search_query and search_query.strip():
            pattern = f"%{search_query.strip().lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(AuthorModel.genre).like(pattern),
                    func.lower(AuthorModel.first_name).like(pattern),
                    func.lower(AuthorModel.last_name).like(pattern),
                )
            )

        try:
            columns = [_AUTHOR_SORT_COLUMNS[name] for name in order_by]
        except KeyError as exc:
            raise ValueError(f"Cannot order authors by {exc.args[0]!r}") from exc
        stmt = stmt.order_by(*columns, AuthorModel.id)

        return [row.to_domain() for row in self._session.scalars(stmt).all()]

    def author_exists(self, author_id: uuid.UUID) -> bool:
        stmt = select(exists().where(AuthorModel.id == author_id))
        return bool(self._session.scalar(stmt))

    def get_author(self, author_id: uuid.UUID) -> Optional[Author]:
        row = self._session.get(AuthorModel, author_id)
        return row.to_domain() if row is not None else None

    def add_author(self, author: Author) -> None:
        self._session.add(AuthorModel.from_domain(author))

    def delete_author(self, author: Author) -> None:
        row = self._session.get(AuthorModel, author.id)
        if row is not None:
            self._session.delete(row)

    # -- books ------------------------------------------------------------

    def get_books_for_author(self, author_id: uuid.UUID) -> list[Book]:
        stmt = (
            select(BookModel)
            .where(BookModel.author_id == author_id)
            .order_by(BookModel.title, BookModel.id)
        )
        return [row.to_domain() for row in self._session.scalars(stmt).all()]

    def get_book_for_author(self, author_id: uuid.UUID, book_id: uuid.UUID) -> Optional[Book]:
        stmt = select(BookModel).where(
            BookModel.author_id == author_id,
            BookModel.id == book_id,
        )
        row = self._session.scalars(stmt).one_or_none()
        return row.to_domain() if row is not None else None

    def book_exists(self, book_id: uuid.UUID) -> bool:
        stmt = select(exists().where(BookModel.id == book_id))
        return bool(self._session.scalar(stmt))

    def add_book_for_author(self, author_id: uuid.UUID, book: Book) -> None:
        book.author_id = author_id
        self._session.add(BookModel.from_domain(book))

    def update_book_for_author(self, book: Book) -> None:
        row = self._session.get(BookModel, book.id)
        if row is None:
            return
        row.title = book.title
        row.description = book.description

    def delete_book(self, book: Book) -> None:
        row = self._session.get(BookModel, book.id)
        if row is not None:
            self._session.delete(row)

    # -- unit of work -----------------------------------------------------

    def save(self) -> bool:
        """Commit pending changes; on failure roll back and return ``False``."""
        try:
            self._session.commit()
        except SQLAlchemyError:
            logger.exception("Commit failed; rolling back")
            self._session.rollback()
            return False
        # Collections loaded before the commit would otherwise go stale.
        self._session.expire_all()
        return True
