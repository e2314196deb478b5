"""
Pydantic v2 request/response schemas for the Library Catalog API.

Book manipulation bodies (``BookForCreation``, ``BookForUpdate``,
``PatchOperation``) live in ``application.schemas.books`` because the
book service validates patched views against them; they are re-exported
here for the routers.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from application.schemas.books import BookForCreation, BookForUpdate, PatchOperation

__all__ = [
    "AuthorForCreation",
    "AuthorResponse",
    "BookForCreation",
    "BookForUpdate",
    "BookResponse",
    "ErrorResponse",
    "PaginationMetadataResponse",
    "PatchOperation",
]


class _SnakeModel(BaseModel):
    """Base model; field names are snake_case on the wire as well."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(_SnakeModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://api.library.example/problems/author-not-found"],
    )
    title: str = Field(..., examples=["Author Not Found"])
    status: int = Field(..., examples=[404])
    detail: str = Field(
        ...,
        examples=["Author not found: 25320c5e-f58a-4b1f-b63a-8ee07a840bdf"],
    )
    instance: str | None = Field(
        default=None,
        examples=["/api/v1/authors/25320c5e-f58a-4b1f-b63a-8ee07a840bdf"],
    )
    errors: list[dict[str, Any]] | None = Field(
        default=None,
        description="Field-level validation errors (status 400/422).",
    )


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class PaginationMetadataResponse(_SnakeModel):
    """Shape of the JSON carried in the ``X-Pagination`` response header."""

    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    previous_page_link: str | None = None
    next_page_link: str | None = None


# ---------------------------------------------------------------------------
# Author schemas
# ---------------------------------------------------------------------------


class AuthorForCreation(_SnakeModel):
    """Request body for creating an author, optionally with books."""

    first_name: str = Field(..., min_length=1, max_length=50, examples=["Stephen"])
    last_name: str = Field(..., min_length=1, max_length=50, examples=["King"])
    date_of_birth: date = Field(..., examples=["1947-09-21"])
    genre: str = Field(..., min_length=1, max_length=50, examples=["Horror"])
    books: list[BookForCreation] = Field(
        default_factory=list,
        description="Books to create together with the author.",
    )


class AuthorResponse(_SnakeModel):
    id: uuid.UUID = Field(..., examples=["25320c5e-f58a-4b1f-b63a-8ee07a840bdf"])
    name: str = Field(..., description="First and last name.", examples=["Stephen King"])
    age: int = Field(..., description="Age in whole years.", examples=[79])
    genre: str = Field(..., examples=["Horror"])


# ---------------------------------------------------------------------------
# Book schemas
# ---------------------------------------------------------------------------


class BookResponse(_SnakeModel):
    id: uuid.UUID = Field(..., examples=["c7ba6add-09c4-45f8-8dd0-eaca221e5d93"])
    author_id: uuid.UUID
    title: str = Field(..., examples=["The Shining"])
    description: str | None = None
