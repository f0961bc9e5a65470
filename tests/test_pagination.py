from __future__ import annotations

import pytest

from blcli.errors import APIError, InvalidArgumentError, PaginationExhaustedError
from blcli.models.common import Links, ListOptions, Page, Pages
from blcli.pagination import paginate


def _link(page: int) -> Links:
    return Links(pages=Pages(next=f"https://api.binarylane.com.au/v2/servers?page={page}&per_page=2"))


class _PagedSource:
    def __init__(self, pages: list[list[str]]) -> None:
        self._pages = pages
        self.requested: list[ListOptions] = []

    async def __call__(self, options: ListOptions) -> Page[str]:
        self.requested.append(options)
        index = options.page - 1
        links = _link(options.page + 1) if index + 1 < len(self._pages) else Links()
        return Page(items=self._pages[index], links=links)


@pytest.mark.asyncio
async def test_collects_every_page_in_order() -> None:
    source = _PagedSource([["a", "b"], ["c", "d"], ["e"]])

    items = await paginate(source, per_page=2)

    assert items == ["a", "b", "c", "d", "e"]
    assert [options.page for options in source.requested] == [1, 2, 3]
    assert all(options.per_page == 2 for options in source.requested)


@pytest.mark.asyncio
async def test_single_page_without_next_link_makes_one_call() -> None:
    source = _PagedSource([["only"]])

    assert await paginate(source) == ["only"]
    assert len(source.requested) == 1


@pytest.mark.asyncio
async def test_empty_first_page_returns_empty_list() -> None:
    source = _PagedSource([[]])

    assert await paginate(source) == []


@pytest.mark.asyncio
async def test_follows_page_number_announced_by_next_link() -> None:
    requested: list[int] = []

    async def fetch(options: ListOptions) -> Page[int]:
        requested.append(options.page)
        if options.page == 1:
            return Page(items=[1], links=_link(3))
        return Page(items=[3])

    assert await paginate(fetch) == [1, 3]
    assert requested == [1, 3]


@pytest.mark.asyncio
async def test_next_link_without_page_number_advances_by_one() -> None:
    requested: list[int] = []

    async def fetch(options: ListOptions) -> Page[int]:
        requested.append(options.page)
        if options.page < 3:
            return Page(items=[options.page], links=Links(pages=Pages(next="https://api.binarylane.com.au/v2/vpcs")))
        return Page(items=[options.page])

    assert await paginate(fetch) == [1, 2, 3]
    assert requested == [1, 2, 3]


@pytest.mark.asyncio
async def test_never_ending_list_stops_at_max_pages() -> None:
    calls = 0

    async def fetch(options: ListOptions) -> Page[int]:
        nonlocal calls
        calls += 1
        return Page(items=[options.page], links=_link(options.page + 1))

    with pytest.raises(PaginationExhaustedError) as excinfo:
        await paginate(fetch, max_pages=5)

    assert calls == 5
    assert excinfo.value.max_pages == 5
    assert "5 pages" in str(excinfo.value)


@pytest.mark.asyncio
async def test_error_on_later_page_propagates() -> None:
    async def fetch(options: ListOptions) -> Page[int]:
        if options.page == 2:
            raise APIError(status_code=500, message="boom")
        return Page(items=[1], links=_link(2))

    with pytest.raises(APIError, match="HTTP 500: boom"):
        await paginate(fetch)


@pytest.mark.asyncio
@pytest.mark.parametrize(("per_page", "max_pages"), [(0, 10), (10, 0)])
async def test_rejects_non_positive_limits(per_page: int, max_pages: int) -> None:
    async def fetch(options: ListOptions) -> Page[int]:
        raise AssertionError("fetch must not be called")

    with pytest.raises(InvalidArgumentError):
        await paginate(fetch, per_page=per_page, max_pages=max_pages)
