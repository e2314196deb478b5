"""Author collection API endpoints."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Query, Request, Response, status

from application.schemas.pagination import PageParameters
from application.services.author_service import AuthorService
from application.services.link_builder import build_pagination_metadata
from domain.exceptions import MalformedRequestError
from domain.models.author import Author
from infrastructure.container import get_author_service

from .schemas import (
    AuthorForCreation,
    AuthorResponse,
    ErrorResponse,
    PaginationMetadataResponse,
)

router = APIRouter(prefix="/authors", tags=["Authors"])

AuthorID = Annotated[uuid.UUID, Path(description="Unique author identifier.")]

PAGINATION_HEADER = "X-Pagination"


def _author_to_response(author: Author, today: date | None = None) -> AuthorResponse:
    """Map a domain Author to the API response schema."""
    return AuthorResponse(
        id=author.id,
        name=author.full_name,
        age=author.age(today),
        genre=author.genre,
    )


@router.get(
    "",
    name="get_authors",
    response_model=list[AuthorResponse],
    summary="List authors",
    responses={
        200: {
            "description": "One page of authors.",
            "headers": {
                PAGINATION_HEADER: {
                    "description": "JSON pagination metadata with previous/next page links.",
                    "schema": {"type": "string"},
                }
            },
        },
    },
)
def list_authors(
    request: Request,
    response: Response,
    search_query: str | None = Query(
        None, description="Case-insensitive match on first name, last name or genre."
    ),
    genre: str | None = Query(None, description="Exact genre, case-insensitive."),
    page_number: str | None = Query(None, description="Page number (1-indexed, default 1)."),
    page_size: str | None = Query(
        None, description="Items per page (default 10, values above 20 are capped at 20)."
    ),
    service: AuthorService = Depends(get_author_service),
) -> list[AuthorResponse]:
    params = PageParameters.from_query(
        {
            "search_query": search_query,
            "genre": genre,
            "page_number": page_number,
            "page_size": page_size,
        }
    )
    page = service.list_authors(params)

    metadata = build_pagination_metadata(page, params, str(request.url_for("get_authors")))
    response.headers[PAGINATION_HEADER] = PaginationMetadataResponse(
        **metadata.as_dict()
    ).model_dump_json()

    # An empty page is still a 200: the collection exists, it just has no items here.
    return page.map(_author_to_response).items


@router.get(
    "/{author_id}",
    name="get_author",
    response_model=AuthorResponse,
    summary="Get an author",
    responses={404: {"description": "Author not found.", "model": ErrorResponse}},
)
def get_author(
    author_id: AuthorID,
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    return _author_to_response(service.get_author(author_id))


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an author",
    responses={
        201: {"description": "Author created; Location points at it."},
        400: {"description": "Missing or unparseable body.", "model": ErrorResponse},
        422: {"description": "Validation error.", "model": ErrorResponse},
    },
)
def create_author(
    request: Request,
    response: Response,
    body: AuthorForCreation | None = Body(default=None),
    service: AuthorService = Depends(get_author_service),
) -> AuthorResponse:
    if body is None:
        raise MalformedRequestError()

    author = service.create_author(
        first_name=body.first_name,
        last_name=body.last_name,
        date_of_birth=body.date_of_birth,
        genre=body.genre,
        books=[book.model_dump() for book in body.books],
    )
    response.headers["Location"] = str(request.url_for("get_author", author_id=str(author.id)))
    return _author_to_response(author)


@router.post(
    "/{author_id}",
    status_code=status.HTTP_409_CONFLICT,
    summary="Reject creation at an author URI",
    responses={
        404: {"description": "No author with this id.", "model": ErrorResponse},
        409: {"description": "Author already exists.", "model": ErrorResponse},
    },
)
def block_author_creation(
    author_id: AuthorID,
    service: AuthorService = Depends(get_author_service),
) -> None:
    service.block_author_creation(author_id)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author and their books",
    responses={404: {"description": "Author not found.", "model": ErrorResponse}},
)
def delete_author(
    author_id: AuthorID,
    service: AuthorService = Depends(get_author_service),
) -> Response:
    service.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
