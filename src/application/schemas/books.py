"""Book manipulation DTOs shared by the service and presentation layers.

Field constraints live on the models; :func:`validate_book_for_update`
turns a plain mapping (for instance a patched update view) into a
:class:`BookForUpdate` or raises :class:`BookValidationError` carrying
field-level errors.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from domain.exceptions import BookValidationError
from domain.models.author import Book

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class BookForManipulation(BaseModel):
    """Fields a client may set on a book."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Book title.",
        examples=["A Game of Thrones"],
    )
    description: str | None = Field(
        default=None,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Short description; must differ from the title.",
        examples=["The first book in A Song of Ice and Fire."],
    )

    @model_validator(mode="after")
    def _description_differs_from_title(self) -> BookForManipulation:
        if self.description == self.title:
            raise ValueError("The description should be different from the title.")
        return self


class BookForCreation(BookForManipulation):
    """Request body for creating a book with a server-generated id."""


class BookForUpdate(BookForManipulation):
    """Request body for a full update; every mutable field is required."""

    description: str = Field(
        ...,
        min_length=1,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Short description; must differ from the title.",
        examples=["The first book in A Song of Ice and Fire."],
    )


class PatchOperation(BaseModel):
    """One RFC 6902 JSON Patch operation."""

    model_config = ConfigDict(populate_by_name=True)

    op: Literal["add", "remove", "replace", "move", "copy", "test"]
    path: str = Field(..., examples=["/title"])
    from_: str | None = Field(default=None, alias="from")
    value: Any = None

    def to_json_patch(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


def validation_errors(exc: ValidationError, model_name: str) -> list[dict[str, Any]]:
    """Flatten a pydantic ``ValidationError`` into ``{field, message, type}`` items.

    Model-level errors have no location; they are reported against
    *model_name*.
    """
    errors = []
    for err in exc.errors():
        loc = err.get("loc", ())
        errors.append(
            {
                "field": " -> ".join(str(part) for part in loc) if loc else model_name,
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return errors


def validate_book_for_update(data: Mapping[str, Any]) -> BookForUpdate:
    """Validate *data* as a full update view; ``None`` values count as missing."""
    present = {key: value for key, value in data.items() if value is not None}
    try:
        return BookForUpdate.model_validate(present)
    except ValidationError as exc:
        raise BookValidationError(validation_errors(exc, "BookForUpdate")) from exc


def to_update_view(book: Book | None) -> dict[str, Any]:
    """Project a book onto its mutable fields; a blank view when *book* is None."""
    if book is None:
        return {"title": None, "description": None}
    return {"title": book.title, "description": book.description}
