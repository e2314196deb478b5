"""Book API endpoints, nested under an author."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from application.services.book_service import BookService, UpsertResult
from domain.exceptions import MalformedRequestError
from domain.models.author import Book
from infrastructure.container import get_book_service
from infrastructure.observability.metrics import record_book_upsert

from .schemas import (
    BookForCreation,
    BookForUpdate,
    BookResponse,
    ErrorResponse,
    PatchOperation,
)

router = APIRouter(prefix="/authors/{author_id}/books", tags=["Books"])

AuthorID = Annotated[uuid.UUID, Path(description="Owning author identifier.")]
BookID = Annotated[uuid.UUID, Path(description="Book identifier.")]

_NOT_FOUND = {404: {"description": "Author or book not found.", "model": ErrorResponse}}

_UPSERT_RESPONSES = {
    201: {"description": "Book created under the requested id.", "model": BookResponse},
    204: {"description": "Book updated."},
    400: {"description": "Missing or unparseable body.", "model": ErrorResponse},
    404: {"description": "Author not found.", "model": ErrorResponse},
    409: {"description": "Book id belongs to another author.", "model": ErrorResponse},
    422: {"description": "Validation error.", "model": ErrorResponse},
}


def _book_to_response(book: Book) -> BookResponse:
    return BookResponse(
        id=book.id,
        author_id=book.author_id,
        title=book.title,
        description=book.description,
    )


def _location(request: Request, book: Book) -> str:
    return str(
        request.url_for(
            "get_book_for_author",
            author_id=str(book.author_id),
            book_id=str(book.id),
        )
    )


def _upsert_response(request: Request, method: str, result: UpsertResult) -> Response:
    record_book_upsert(method, result.outcome.value)
    if result.created:
        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=_book_to_response(result.book).model_dump(mode="json"),
            headers={"Location": _location(request, result.book)},
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List an author's books",
    responses={404: {"description": "Author not found.", "model": ErrorResponse}},
)
def list_books(
    author_id: AuthorID,
    service: BookService = Depends(get_book_service),
) -> list[BookResponse]:
    return [_book_to_response(book) for book in service.list_books_for_author(author_id)]


@router.get(
    "/{book_id}",
    name="get_book_for_author",
    response_model=BookResponse,
    summary="Get one of an author's books",
    responses=_NOT_FOUND,
)
def get_book(
    author_id: AuthorID,
    book_id: BookID,
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    return _book_to_response(service.get_book_for_author(author_id, book_id))


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a book for an author",
    responses={
        400: {"description": "Missing or unparseable body.", "model": ErrorResponse},
        404: {"description": "Author not found.", "model": ErrorResponse},
        422: {"description": "Validation error.", "model": ErrorResponse},
    },
)
def create_book(
    request: Request,
    response: Response,
    author_id: AuthorID,
    body: BookForCreation | None = Body(default=None),
    service: BookService = Depends(get_book_service),
) -> BookResponse:
    if body is None:
        raise MalformedRequestError()
    book = service.create_book_for_author(author_id, body)
    response.headers["Location"] = _location(request, book)
    return _book_to_response(book)


@router.put(
    "/{book_id}",
    summary="Replace a book, creating it when it does not exist",
    responses=_UPSERT_RESPONSES,
)
def upsert_book(
    request: Request,
    author_id: AuthorID,
    book_id: BookID,
    body: BookForUpdate | None = Body(default=None),
    service: BookService = Depends(get_book_service),
) -> Response:
    if body is None:
        raise MalformedRequestError()
    result = service.upsert_book(author_id, book_id, body)
    return _upsert_response(request, "PUT", result)


@router.patch(
    "/{book_id}",
    summary="Apply a JSON Patch to a book, creating it when it does not exist",
    responses=_UPSERT_RESPONSES,
)
def patch_book(
    request: Request,
    author_id: AuthorID,
    book_id: BookID,
    body: list[PatchOperation] | None = Body(default=None),
    service: BookService = Depends(get_book_service),
) -> Response:
    if body is None:
        raise MalformedRequestError()
    result = service.patch_book(author_id, book_id, body)
    return _upsert_response(request, "PATCH", result)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses=_NOT_FOUND,
)
def delete_book(
    author_id: AuthorID,
    book_id: BookID,
    service: BookService = Depends(get_book_service),
) -> Response:
    service.delete_book_for_author(author_id, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
