"""
Aggregation of paginated results.

A fetch callable is given an opaque context object (a deadline, a session, a
cancellation token - it is passed through untouched) and the id of the page to fetch,
which is None for the first page. It returns a Page, or an (items, next_page_id)
tuple, and raises to report a failure. Pagination stops once next_page_id is None or
the zero value of its type, so APIs using "" or 0 as their last page marker work
without conversion. A zero id can therefore never be used to request a further page.

There is no limit on the number of pages: a fetch callable which never returns a
final page will be called forever, so callers must bound it themselves.
"""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator, Sequence
from typing import Any, TypeVar

from grab.grab_error import InvalidPageError
from grab.page import Page
from grab.zero import is_zero

T = TypeVar("T")
K = TypeVar("K")
_LOGGER = logging.getLogger(__name__)

PageResult = Page[T, K] | tuple[Sequence[T], K | None]


def _to_page(result: Any) -> Page:
    if isinstance(result, Page):
        return result
    if isinstance(result, tuple) and len(result) == 2:
        items, next_page_id = result
        return Page(items=list(items or ()), next_page_id=next_page_id)
    raise InvalidPageError(f"invalid_page_result:{type(result).__qualname__}")


def iter_pages(
    ctx: Any, fetch: Callable[[Any, K | None], PageResult]
) -> Iterator[Page[T, K]]:
    """Iterate over pages as they are fetched.

    Unlike all_pages, a consumer sees the pages fetched before a failure.

    Args:
        ctx: Context passed unchanged to every fetch call
        fetch: Callable taking the context and a page id (None for the first page)

    Raises:
        Any exception raised by fetch, unchanged
        InvalidPageError: If fetch returns neither a Page nor an (items, next_page_id) tuple
    """
    page_id = None
    page_index = 0
    while True:
        try:
            page = _to_page(fetch(ctx, page_id))
        except Exception:
            _LOGGER.debug("page_fetch_failed:%s", page_index, exc_info=True)
            raise
        _LOGGER.debug("fetched_page:%s:%s", page_index, len(page.items or ()))
        yield page
        page_id = page.next_page_id
        if is_zero(page_id):
            return
        page_index += 1


def all_pages(ctx: Any, fetch: Callable[[Any, K | None], PageResult]) -> list[T]:
    """Fetch every page and get all items, in page order then within page order.

    If any fetch fails its exception propagates and the items fetched so far are
    discarded - no partial result is ever returned.

    Example:
        >>> def fetch(ctx, page_id):
        ...     page_id = page_id or 0
        ...     return pages[page_id], if_(page_id == len(pages) - 1, None, page_id + 1)
        >>> all_pages(None, fetch)
    """
    items: list[T] = []
    for page in iter_pages(ctx, fetch):
        items.extend(page.items or ())
    return items


def count_items(ctx: Any, fetch: Callable[[Any, K | None], PageResult]) -> int:
    count = 0
    for page in iter_pages(ctx, fetch):
        count += len(page.items or ())
    return count


async def iter_pages_async(
    ctx: Any, fetch: Callable[[Any, K | None], Awaitable[PageResult]]
) -> AsyncIterator[Page[T, K]]:
    """Async version of iter_pages. One fetch is awaited at a time; cancelling the
    consuming task cancels the fetch in progress."""
    page_id = None
    page_index = 0
    while True:
        try:
            page = _to_page(await fetch(ctx, page_id))
        except Exception:
            _LOGGER.debug("page_fetch_failed:%s", page_index, exc_info=True)
            raise
        _LOGGER.debug("fetched_page:%s:%s", page_index, len(page.items or ()))
        yield page
        page_id = page.next_page_id
        if is_zero(page_id):
            return
        page_index += 1


async def all_pages_async(
    ctx: Any, fetch: Callable[[Any, K | None], Awaitable[PageResult]]
) -> list[T]:
    """Async version of all_pages"""
    items: list[T] = []
    async for page in iter_pages_async(ctx, fetch):
        items.extend(page.items or ())
    return items


async def count_items_async(
    ctx: Any, fetch: Callable[[Any, K | None], Awaitable[PageResult]]
) -> int:
    count = 0
    async for page in iter_pages_async(ctx, fetch):
        count += len(page.items or ())
    return count
