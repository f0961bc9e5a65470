"""Exhaust paginated list endpoints into one ordered collection."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from blcli.constants import DEFAULT_MAX_PAGES, DEFAULT_PER_PAGE
from blcli.errors import InvalidArgumentError, PaginationExhaustedError
from blcli.log import get_logger
from blcli.models.common import ListOptions, Page

T = TypeVar("T")

PageFetcher = Callable[[ListOptions], Awaitable[Page[T]]]

logger = get_logger("pagination")


async def paginate(
    fetch_page: PageFetcher[T],
    *,
    per_page: int = DEFAULT_PER_PAGE,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> list[T]:
    """Fetch every page sequentially and return the concatenated items.

    Errors from `fetch_page` propagate and discard whatever was collected.
    A list that still reports a next page after `max_pages` fetches raises
    `PaginationExhaustedError`.
    """

    if per_page < 1:
        raise InvalidArgumentError("per_page", "cannot be less than 1")
    if max_pages < 1:
        raise InvalidArgumentError("max_pages", "cannot be less than 1")

    collected: list[T] = []
    current = 1
    for _ in range(max_pages):
        page = await fetch_page(ListOptions(page=current, per_page=per_page))
        collected.extend(page.items)
        logger.debug(
            "page %d returned %d items (%d collected, total %s)",
            current,
            len(page.items),
            len(collected),
            page.meta.total if page.meta is not None else "unknown",
        )

        if not page.links.has_next:
            return collected

        announced = page.links.next_page
        current = announced if announced is not None and announced > current else current + 1

    raise PaginationExhaustedError(max_pages=max_pages)
