"""Navigation links for paged collections.

Everything here is a pure function of its arguments: the same base URL,
parameters and link type always produce the same string.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlencode

from application.schemas.pagination import PagedResult, PageParameters


class ResourceUriType(enum.Enum):
    """Which page a link points at, as an offset from the current page."""

    PREVIOUS_PAGE = -1
    CURRENT_PAGE = 0
    NEXT_PAGE = 1


@dataclass(frozen=True)
class PaginationMetadata:
    """Paging state and navigation links sent in the ``X-Pagination`` header."""

    total_count: int
    page_size: int
    current_page: int
    total_pages: int
    previous_page_link: Optional[str] = None
    next_page_link: Optional[str] = None

    def as_dict(self) -> dict[str, Any]:
        """Snake_case mapping ready for JSON encoding."""
        return {
            "total_count": self.total_count,
            "page_size": self.page_size,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "previous_page_link": self.previous_page_link,
            "next_page_link": self.next_page_link,
        }


def create_resource_uri(
    base_url: str,
    params: PageParameters,
    uri_type: ResourceUriType = ResourceUriType.CURRENT_PAGE,
) -> str:
    """Return the collection URL for the page selected by *uri_type*.

    Filters and page size are carried over unchanged; filters that were
    never supplied are left out of the query string.
    """
    query: list[tuple[str, Any]] = []
    if params.search_query is not None:
        query.append(("search_query", params.search_query))
    if params.genre is not None:
        query.append(("genre", params.genre))
    query.append(("page_number", params.page_number + uri_type.value))
    query.append(("page_size", params.page_size))
    return f"{base_url}?{urlencode(query)}"


def build_pagination_metadata(
    result: PagedResult[Any],
    params: PageParameters,
    base_url: str,
) -> PaginationMetadata:
    """Describe *result*, with a previous link only when there is a previous
    page and a next link only when there is a next one.
    """
    previous_link = (
        create_resource_uri(base_url, params, ResourceUriType.PREVIOUS_PAGE)
        if result.has_previous
        else None
    )
    next_link = (
        create_resource_uri(base_url, params, ResourceUriType.NEXT_PAGE)
        if result.has_next
        else None
    )
    return PaginationMetadata(
        total_count=result.total_count,
        page_size=result.page_size,
        current_page=result.current_page,
        total_pages=result.total_pages,
        previous_page_link=previous_link,
        next_page_link=next_link,
    )
