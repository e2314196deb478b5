"""Unit tests for AuthorService: listing, filtering, create, conflict and delete."""

from __future__ import annotations

from datetime import date
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from application.schemas.pagination import PageParameters
from application.services.author_service import AuthorService
from domain.exceptions import AuthorAlreadyExistsError, AuthorNotFoundError, PersistenceError
from domain.models.author import Author


class TestListAuthors:

    def test_second_page_of_25(self, repo, make_authors):
        make_authors(repo, 25)
        svc = AuthorService(library_repo=repo)
        page = svc.list_authors(PageParameters(page_number=2, page_size=10))
        assert [a.first_name for a in page.items] == [f"A{i:02d}" for i in range(10, 20)]
        assert page.total_count == 25
        assert page.total_pages == 3

    def test_ordered_by_first_then_last_name(self, repo):
        for first, last in [("Neil", "Gaiman"), ("George", "RR Martin"), ("George", "Eliot")]:
            repo.add_author(Author(first_name=first, last_name=last, genre="Fantasy"))
        repo.save()
        svc = AuthorService(library_repo=repo)
        names = [a.full_name for a in svc.list_authors(PageParameters()).items]
        assert names == ["George Eliot", "George RR Martin", "Neil Gaiman"]

    def test_genre_filter_is_trimmed_and_case_insensitive(self, repo, make_authors):
        make_authors(repo, 3, genre="Fantasy")
        make_authors(repo, 2, genre="Horror")
        svc = AuthorService(library_repo=repo)
        page = svc.list_authors(PageParameters(genre="  fantasy "))
        assert page.total_count == 3
        assert all(a.genre == "Fantasy" for a in page.items)

    def test_genre_filter_is_exact_not_substring(self, repo, make_authors):
        make_authors(repo, 2, genre="Science fiction")
        svc = AuthorService(library_repo=repo)
        assert svc.list_authors(PageParameters(genre="fiction")).total_count == 0

    def test_search_matches_names_and_genre(self, repo):
        repo.add_author(Author(first_name="Stephen", last_name="King", genre="Horror"))
        repo.add_author(Author(first_name="Neil", last_name="Gaiman", genre="Fantasy"))
        repo.add_author(Author(first_name="Kingsley", last_name="Amis", genre="Comedy"))
        repo.save()
        svc = AuthorService(library_repo=repo)

        by_name = svc.list_authors(PageParameters(search_query="KING"))
        assert sorted(a.last_name for a in by_name.items) == ["Amis", "King"]

        by_genre = svc.list_authors(PageParameters(search_query="fant"))
        assert [a.last_name for a in by_genre.items] == ["Gaiman"]

    def test_genre_and_search_combine(self, repo):
        repo.add_author(Author(first_name="Stephen", last_name="King", genre="Horror"))
        repo.add_author(Author(first_name="Kingsley", last_name="Amis", genre="Comedy"))
        repo.save()
        svc = AuthorService(library_repo=repo)
        page = svc.list_authors(PageParameters(search_query="king", genre="horror"))
        assert [a.last_name for a in page.items] == ["King"]

    def test_empty_catalog(self, repo):
        page = AuthorService(library_repo=repo).list_authors(PageParameters())
        assert page.items == []
        assert page.total_pages == 0


class TestGetAuthor:

    def test_existing(self, author_service, author_id):
        author = author_service.get_author(author_id)
        assert author.full_name == "Stephen King"
        assert [b.title for b in author.books] == ["The Shining"]

    def test_missing_raises(self, author_service):
        with pytest.raises(AuthorNotFoundError):
            author_service.get_author(uuid4())


class TestCreateAuthor:

    def test_create_with_books(self, author_service):
        author = author_service.create_author(
            first_name="Neil",
            last_name="Gaiman",
            date_of_birth=date(1960, 11, 10),
            genre="Fantasy",
            books=[{"title": "American Gods", "description": "Old gods and new."}],
        )
        stored = author_service.get_author(author.id)
        assert stored.full_name == "Neil Gaiman"
        assert len(stored.books) == 1
        assert stored.books[0].author_id == author.id

    def test_create_without_books(self, author_service):
        author = author_service.create_author("Tom", "Lanoye", date(1958, 8, 27), "Various")
        assert author_service.get_author(author.id).books == []

    def test_failed_save_raises_persistence_error(self):
        repo = MagicMock()
        repo.save.return_value = False
        svc = AuthorService(library_repo=repo)
        with pytest.raises(PersistenceError) as exc_info:
            svc.create_author("Tom", "Lanoye", date(1958, 8, 27), "Various")
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Creating an author failed on save."


class TestBlockAuthorCreation:

    def test_existing_author_conflicts(self, author_service, author_id):
        with pytest.raises(AuthorAlreadyExistsError) as exc_info:
            author_service.block_author_creation(author_id)
        assert exc_info.value.status_code == 409

    def test_unknown_author_not_found(self, author_service):
        with pytest.raises(AuthorNotFoundError):
            author_service.block_author_creation(uuid4())


class TestDeleteAuthor:

    def test_delete_cascades_to_books(self, author_service, seeded_repo, author_id, book_id):
        author_service.delete_author(author_id)
        assert seeded_repo.author_exists(author_id) is False
        assert seeded_repo.get_book_for_author(author_id, book_id) is None

    def test_delete_missing_raises(self, author_service):
        with pytest.raises(AuthorNotFoundError):
            author_service.delete_author(uuid4())
