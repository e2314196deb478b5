"""Pagination helpers for paginated list queries.

Provides a ``PageParameters`` value object that enforces page / size
defaults and the page-size upper bound, and a generic ``PagedResult``
holding one page of an ordered collection plus the metadata needed to
navigate it.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_NUMBER: int = 1
DEFAULT_PAGE_SIZE: int = 10
MAX_PAGE_SIZE: int = 20


def _coerce_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class PageParameters:
    """Immutable view-selection criteria for the author collection.

    ``page_number`` is 1-based.  ``page_size`` is clamped to
    [1, ``MAX_PAGE_SIZE``]; anything below 1 is raised to 1 for both
    fields.  ``search_query`` and ``genre`` stay ``None`` when absent.
    """

    search_query: Optional[str] = None
    genre: Optional[str] = None
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        # frozen=True requires object.__setattr__ for validation fixups
        object.__setattr__(self, "page_number", max(1, self.page_number))
        object.__setattr__(self, "page_size", max(1, min(self.page_size, MAX_PAGE_SIZE)))

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> PageParameters:
        """Build parameters from raw query-string values.

        Never raises: unparseable numbers fall back to the defaults.
        """
        return cls(
            search_query=query.get("search_query"),
            genre=query.get("genre"),
            page_number=_coerce_int(query.get("page_number"), DEFAULT_PAGE_NUMBER),
            page_size=_coerce_int(query.get("page_size"), DEFAULT_PAGE_SIZE),
        )

    @property
    def offset(self) -> int:
        """Zero-based offset of the first item on the requested page."""
        return (self.page_number - 1) * self.page_size


@dataclass(frozen=True)
class PagedResult(Generic[T]):
    """One page of results plus pagination metadata."""

    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = DEFAULT_PAGE_NUMBER

    @classmethod
    def create(cls, source: Sequence[T], page_number: int, page_size: int) -> PagedResult[T]:
        """Slice *source* (already filtered and ordered) down to one page."""
        offset = (page_number - 1) * page_size
        return cls(
            items=list(source[offset : offset + page_size]),
            total_count=len(source),
            page_size=page_size,
            current_page=page_number,
        )

    @property
    def total_pages(self) -> int:
        """Total number of pages (0 for an empty collection)."""
        if self.total_count == 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def map(self, func: Callable[[T], U]) -> PagedResult[U]:
        """Project the items while keeping the pagination metadata."""
        return PagedResult(
            items=[func(item) for item in self.items],
            total_count=self.total_count,
            page_size=self.page_size,
            current_page=self.current_page,
        )
