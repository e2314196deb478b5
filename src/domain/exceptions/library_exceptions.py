from __future__ import annotations

from typing import Any

_PROBLEM_BASE = "https://api.library.example/problems"


class DomainError(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so the presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type
        self.errors = errors


class AuthorNotFoundError(DomainError):
    def __init__(self, author_id: str = "") -> None:
        self.author_id = author_id
        super().__init__(
            detail=f"Author not found: {author_id}",
            title="Author Not Found",
            status_code=404,
            error_type=f"{_PROBLEM_BASE}/author-not-found",
        )


class BookNotFoundError(DomainError):
    def __init__(self, author_id: str = "", book_id: str = "") -> None:
        self.author_id = author_id
        self.book_id = book_id
        super().__init__(
            detail=f"Book {book_id} not found for author {author_id}",
            title="Book Not Found",
            status_code=404,
            error_type=f"{_PROBLEM_BASE}/book-not-found",
        )


class AuthorAlreadyExistsError(DomainError):
    def __init__(self, author_id: str = "") -> None:
        self.author_id = author_id
        super().__init__(
            detail=f"Author already exists: {author_id}",
            title="Author Conflict",
            status_code=409,
            error_type=f"{_PROBLEM_BASE}/author-conflict",
        )


class BookValidationError(DomainError):
    """The book payload, or the view produced by a patch, is invalid."""

    def __init__(self, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(
            detail="The book failed validation.",
            title="Validation Error",
            status_code=422,
            error_type=f"{_PROBLEM_BASE}/validation-error",
            errors=errors or [],
        )


class MalformedRequestError(DomainError):
    def __init__(self, reason: str = "Request body is missing.") -> None:
        self.reason = reason
        super().__init__(
            detail=reason,
            title="Malformed Request",
            status_code=400,
            error_type=f"{_PROBLEM_BASE}/malformed-request",
        )


class PersistenceError(DomainError):
    def __init__(self, operation: str = "") -> None:
        self.operation = operation
        super().__init__(
            detail=f"{operation} failed on save.",
            title="Persistence Failure",
            status_code=500,
            error_type=f"{_PROBLEM_BASE}/persistence-failure",
        )


class BookIdConflictError(DomainError):
    """The requested book id is already taken by another author's book."""

    def __init__(self, author_id: str = "", book_id: str = "") -> None:
        self.author_id = author_id
        self.book_id = book_id
        super().__init__(
            detail=f"Book {book_id} belongs to another author than {author_id}",
            title="Book Id Conflict",
            status_code=409,
            error_type=f"{_PROBLEM_BASE}/book-id-conflict",
        )
