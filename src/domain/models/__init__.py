from domain.models.author import Author, Book

__all__ = [
    "Author",
    "Book",
]
