"""Unit tests for the Author and Book domain models."""

from __future__ import annotations

from datetime import date

from domain.models.author import Author, Book


class TestAuthorAge:

    def test_birthday_already_passed(self):
        author = Author(date_of_birth=date(1947, 9, 21))
        assert author.age(today=date(2026, 10, 1)) == 79

    def test_birthday_not_yet_reached(self):
        author = Author(date_of_birth=date(1947, 9, 21))
        assert author.age(today=date(2026, 9, 20)) == 78

    def test_on_birthday(self):
        author = Author(date_of_birth=date(1947, 9, 21))
        assert author.age(today=date(2026, 9, 21)) == 79

    def test_leap_day_birthday(self):
        author = Author(date_of_birth=date(2000, 2, 29))
        assert author.age(today=date(2025, 2, 28)) == 24
        assert author.age(today=date(2025, 3, 1)) == 25


class TestAuthorDefaults:

    def test_full_name(self):
        assert Author(first_name="Neil", last_name="Gaiman").full_name == "Neil Gaiman"

    def test_ids_are_generated(self):
        assert Author().id != Author().id
        assert Book().id != Book().id

    def test_books_list_not_shared(self):
        first, second = Author(), Author()
        first.books.append(Book(title="X"))
        assert second.books == []
