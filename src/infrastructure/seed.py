"""Starter catalog loaded into an empty store at startup."""

from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

from application.services.ports import LibraryRepository
from domain.models.author import Author, Book

logger = logging.getLogger(__name__)

_CATALOG: list[tuple[str, str, date, str, list[tuple[str, str]]]] = [
    (
        "Stephen", "King", date(1947, 9, 21), "Horror",
        [
            ("The Shining", "The Shining is a horror novel by American author Stephen King."),
            ("Misery", "Misery is a 1987 psychological horror novel by Stephen King."),
            ("It", "It is a 1986 horror novel by American author Stephen King."),
            ("The Stand", "The Stand is a post-apocalyptic horror/fantasy novel."),
        ],
    ),
    (
        "George", "RR Martin", date(1948, 9, 20), "Fantasy",
        [
            ("A Game of Thrones", "The first novel in A Song of Ice and Fire."),
            ("The Winds of Winter", "Forthcoming sixth novel in A Song of Ice and Fire."),
            ("A Dance with Dragons", "The fifth novel in A Song of Ice and Fire."),
        ],
    ),
    (
        "Neil", "Gaiman", date(1960, 11, 10), "Fantasy",
        [("American Gods", "A Hugo and Nebula Award-winning novel by Neil Gaiman.")],
    ),
    (
        "Tom", "Lanoye", date(1958, 8, 27), "Various",
        [
            ("Speechless", "Good-natured mockery of the Flemish and their ways."),
            ("Good-looking Corpses", "A novel of a Belgian family and its scandals."),
        ],
    ),
    (
        "Douglas", "Adams", date(1952, 3, 11), "Science fiction",
        [("The Hitchhiker's Guide to the Galaxy", "A comic science fiction series.")],
    ),
    (
        "James", "Ellroy", date(1948, 3, 4), "Thriller",
        [("The Black Dahlia", "A crime novel about the murder of Elizabeth Short.")],
    ),
]


def seed_catalog(repo: LibraryRepository) -> int:
    """Add the starter authors when the store is empty; returns how many were added."""
    if repo.find_authors():
        return 0

    for first_name, last_name, born, genre, titles in _CATALOG:
        author = Author(
            id=uuid4(),
            first_name=first_name,
            last_name=last_name,
            date_of_birth=born,
            genre=genre,
        )
        author.books = [
            Book(id=uuid4(), author_id=author.id, title=title, description=description)
            for title, description in titles
        ]
        repo.add_author(author)

    if not repo.save():
        logger.error("Seeding the catalog failed on save")
        return 0
    logger.info("Seeded catalog with %d authors", len(_CATALOG))
    return len(_CATALOG)
