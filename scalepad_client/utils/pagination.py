"""Pagination utilities for ScalePad SDK.

This module turns a page-fetching coroutine function into lazy sequences of
pages or items by following the ``next_cursor`` of each page envelope.

The sequences returned by ``paginate_pages`` and ``paginate_items`` are
async generators: they are single-pass and cannot be restarted. Iterate
again by calling the function again. Pages are fetched strictly one after
another; the next fetch starts only once the current page has been received.
"""

from typing import AsyncIterator, Awaitable, List, Optional, Protocol, TypeVar

from ..models.pagination import ListResult

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PageFetcher(Protocol[T_co]):
    """Coroutine function fetching the page that starts at ``cursor``."""

    def __call__(self, cursor: Optional[str]) -> "Awaitable[ListResult[T_co]]": ...


async def paginate_pages(fetch_page: PageFetcher[T]) -> AsyncIterator[List[T]]:
    """Yield the ``data`` list of each page.

    The first page is requested with ``cursor=None``, each following page
    with the previous envelope's ``next_cursor``. Iteration stops after the
    page whose cursor is missing or empty; that page is still yielded.

    Args:
        fetch_page: Coroutine function ``(cursor) -> ListResult``

    Yields:
        Items of each page, in fetch order

    Examples:
        >>> async for page in paginate_pages(fetch_page):
        ...     handle(page)

    """
    cursor: Optional[str] = None
    while True:
        result = await fetch_page(cursor)
        yield result.data
        cursor = result.next_cursor
        if not cursor:
            return


async def paginate_items(fetch_page: PageFetcher[T]) -> AsyncIterator[T]:
    """Yield individual items across all pages, preserving order.

    Args:
        fetch_page: Coroutine function ``(cursor) -> ListResult``

    Yields:
        Items one by one

    """
    async for page in paginate_pages(fetch_page):
        for item in page:
            yield item


async def collect_all(fetch_page: PageFetcher[T]) -> List[T]:
    """Fetch every page and concatenate the items.

    Memory use is unbounded; use ``paginate_pages``/``paginate_items`` for
    large result sets.

    Args:
        fetch_page: Coroutine function ``(cursor) -> ListResult``

    Returns:
        All items in fetch order

    """
    items: List[T] = []
    async for page in paginate_pages(fetch_page):
        items.extend(page)
    return items
