"""
SQLAlchemy 2.0+ ORM models for the Library Catalog API.

Schema layout
-------------
* ``authors`` -- one row per author
* ``books``   -- one row per book, owned by an author; deleting the
  author deletes their books
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import Date, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)

from domain.models.author import Author, Book


class Base(DeclarativeBase):
    """Shared declarative base for every ORM model."""
    pass


class AuthorModel(Base):
    __tablename__ = "authors"
    __table_args__ = (
        Index("ix_authors_genre", "genre"),
        Index("ix_authors_name", "first_name", "last_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    genre: Mapped[str] = mapped_column(String(50), nullable=False)

    books: Mapped[List["BookModel"]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
        order_by="BookModel.title",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id!r}, name={self.first_name!r} {self.last_name!r})>"

    def to_domain(self) -> Author:
        return Author(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            genre=self.genre,
            books=[book.to_domain() for book in self.books],
        )

    @classmethod
    def from_domain(cls, author: Author) -> AuthorModel:
        return cls(
            id=author.id,
            first_name=author.first_name,
            last_name=author.last_name,
            date_of_birth=author.date_of_birth,
            genre=author.genre,
            books=[BookModel.from_domain(book) for book in author.books],
        )


class BookModel(Base):
    __tablename__ = "books"
    __table_args__ = (
        Index("ix_books_author_id", "author_id"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    author: Mapped["AuthorModel"] = relationship(back_populates="books")

    def __repr__(self) -> str:
        return f"<Book(id={self.id!r}, title={self.title!r})>"

    def to_domain(self) -> Book:
        return Book(
            id=self.id,
            author_id=self.author_id,
            title=self.title,
            description=self.description,
        )

    @classmethod
    def from_domain(cls, book: Book) -> BookModel:
        return cls(
            id=book.id,
            author_id=book.author_id,
            title=book.title,
            description=book.description,
        )
