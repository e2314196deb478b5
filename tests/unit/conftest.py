"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from uuid import UUID

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from application.services.author_service import AuthorService
from application.services.book_service import BookService
from domain.models.author import Author, Book
from infrastructure.adapters import InMemoryLibraryRepository

AUTHOR_ID = UUID("25320c5e-f58a-4b1f-b63a-8ee07a840bdf")
BOOK_ID = UUID("c7ba6add-09c4-45f8-8dd0-eaca221e5d93")


@pytest.fixture
def author_id() -> UUID:
    return AUTHOR_ID


@pytest.fixture
def book_id() -> UUID:
    return BOOK_ID


@pytest.fixture
def sample_author() -> Author:
    return Author(
        id=AUTHOR_ID,
        first_name="Stephen",
        last_name="King",
        date_of_birth=date(1947, 9, 21),
        genre="Horror",
        books=[
            Book(
                id=BOOK_ID,
                author_id=AUTHOR_ID,
                title="The Shining",
                description="A horror novel set in an isolated hotel.",
            )
        ],
    )


@pytest.fixture
def repo() -> InMemoryLibraryRepository:
    return InMemoryLibraryRepository()


@pytest.fixture
def seeded_repo(repo, sample_author) -> InMemoryLibraryRepository:
    repo.add_author(sample_author)
    repo.save()
    return repo


@pytest.fixture
def author_service(seeded_repo) -> AuthorService:
    return AuthorService(library_repo=seeded_repo)


@pytest.fixture
def book_service(seeded_repo) -> BookService:
    return BookService(library_repo=seeded_repo)


@pytest.fixture
def make_authors():
    """Return a helper adding *count* authors named A00, A01, ... and saving them."""

    def _make(repo: InMemoryLibraryRepository, count: int, genre: str = "Fantasy") -> list[Author]:
        authors = [
            Author(
                first_name=f"A{i:02d}",
                last_name="Writer",
                date_of_birth=date(1970, 1, 1),
                genre=genre,
            )
            for i in range(count)
        ]
        for author in authors:
            repo.add_author(author)
        repo.save()
        return authors

    return _make
