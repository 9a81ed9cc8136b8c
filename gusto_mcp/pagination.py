"""
Pagination Helper

Gusto paginates a few collections with ``page`` and ``per`` query
parameters and, in general, reports no total. The helpers here normalize
requested parameters and wrap a fetched page in a PaginatedResponse.

The "has more" flag on an un-totalled page is a heuristic: a page that
came back exactly full is assumed to have a successor. It over-reports when
the final page happens to be exactly full. Telling the two cases apart
would need an extra lookahead request, so the heuristic is kept and callers
should treat ``hasMore`` as best-effort.

Endpoints that return bare arrays with no pagination metadata (contractor
payments, payrolls, pay periods and the other plain lists) are passed
through whole; they are not wrapped here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from .config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class PaginationParams(BaseModel):
    """Requested page. Both fields optional; ``page`` counts from 1."""

    model_config = ConfigDict(frozen=True)

    page: int | None = Field(default=None, ge=1)
    per: int | None = None


class PaginatedResponse(BaseModel):
    """
    One page of a collection.

    ``count`` always equals ``len(items)``; it is derived, not stored.
    Serializes with camelCase keys and omits unset optionals.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    items: list[Any]
    total: int | None = None
    has_more: bool = False
    next_page: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict: ``{items, count, total?, hasMore, nextPage?}``."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


def normalize_pagination_params(
    params: PaginationParams | None = None, max_per: int = MAX_PAGE_SIZE
) -> PaginationParams:
    """Clamp ``per`` to ``max_per``, defaulting it when unset or non-positive."""
    requested = params.per if params is not None else None
    if requested is None or requested <= 0:
        requested = DEFAULT_PAGE_SIZE
    return PaginationParams(
        page=params.page if params is not None else None,
        per=min(requested, max_per),
    )


def create_paginated_response(
    items: Sequence[Any],
    *,
    total: int | None = None,
    has_more: bool = False,
    next_page: int | None = None,
) -> PaginatedResponse:
    return PaginatedResponse(
        items=list(items), total=total, has_more=has_more, next_page=next_page
    )


def empty_paginated_response() -> PaginatedResponse:
    return PaginatedResponse(items=[], has_more=False)


def paginate_page(items: Sequence[Any], params: PaginationParams | None = None) -> PaginatedResponse:
    """
    Wrap one fetched, un-totalled page.

    ``has_more`` is true iff the page is exactly full; ``next_page`` is then
    the requested page (default 1) plus one. Best-effort, see module docs.
    """
    per = params.per if params is not None and params.per else DEFAULT_PAGE_SIZE
    page = params.page if params is not None and params.page else 1
    full = len(items) == per
    return create_paginated_response(
        items,
        has_more=full,
        next_page=page + 1 if full else None,
    )


def has_more_items(page: int, per: int, total: int) -> bool:
    """
    Exact rule for upstream lists that report a total count.

    The Gusto lists wrapped today return bare pages, so they go through
    paginate_page instead; these two helpers are for totalled lists.
    """
    return page * per < total


def get_next_page(current_page: int, per: int, total: int) -> int | None:
    """Next page number for a totalled list, or None on the last page."""
    return current_page + 1 if has_more_items(current_page, per, total) else None
