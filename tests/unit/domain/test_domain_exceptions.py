"""Unit tests for the domain exception hierarchy and its HTTP mapping."""

from __future__ import annotations

import pytest

from domain.exceptions import (
    AuthorAlreadyExistsError,
    AuthorNotFoundError,
    BookNotFoundError,
    BookValidationError,
    DomainError,
    MalformedRequestError,
    PersistenceError,
)


class TestDomainErrorHierarchy:

    @pytest.mark.parametrize(
        "exc, status_code",
        [
            (AuthorNotFoundError("a1"), 404),
            (BookNotFoundError("a1", "b1"), 404),
            (AuthorAlreadyExistsError("a1"), 409),
            (BookValidationError([]), 422),
            (MalformedRequestError(), 400),
            (PersistenceError("Creating a book"), 500),
        ],
    )
    def test_status_codes(self, exc, status_code):
        assert isinstance(exc, DomainError)
        assert exc.status_code == status_code

    def test_problem_type_is_a_uri(self):
        exc = AuthorNotFoundError("a1")
        assert exc.error_type.startswith("https://")
        assert exc.error_type.endswith("/author-not-found")

    def test_not_found_detail_names_the_ids(self):
        exc = BookNotFoundError("a1", "b1")
        assert "a1" in exc.detail
        assert "b1" in exc.detail

    def test_validation_error_carries_field_errors(self):
        errors = [{"field": "title", "message": "Field required", "type": "missing"}]
        assert BookValidationError(errors).errors == errors

    def test_validation_error_defaults_to_empty_list(self):
        assert BookValidationError().errors == []

    def test_persistence_error_detail(self):
        assert PersistenceError("Deleting an author").detail == "Deleting an author failed on save."

    def test_malformed_request_default_reason(self):
        exc = MalformedRequestError()
        assert exc.detail == "Request body is missing."
        assert str(exc) == exc.detail

    def test_base_defaults(self):
        exc = DomainError("oops")
        assert exc.status_code == 400
        assert exc.error_type == "about:blank"
        assert exc.errors is None
