"""
Lazy traversal of paged collections.

:class:`Paginator` chains page fetches into one flat item sequence. It holds
at most one page at a time and only fetches the next page once the consumer
has drained the current one::

    paginator = Paginator(fetch, "https://canvas.example.edu/api/v1/courses")
    for course in paginator:
        ...

Pages are fetched strictly one after the other, in the order the server's
``next`` links give. A paginator is single-pass: build a new one to walk the
collection again.
"""

from __future__ import annotations

import typing

import httpx

from ._page import Page

__all__ = ["AsyncPaginator", "Paginator"]

T = typing.TypeVar("T")

_DRAINED = object()


class _PaginatorState(typing.Generic[T]):
    def __init__(
        self,
        start: httpx.URL | str,
        max_pages: int | None,
        return_exceptions: bool,
    ) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError("max_pages must be at least 1")
        self.frontier: httpx.URL | None = httpx.URL(start)
        self.exhausted = False
        self.pages_fetched = 0
        self.max_pages = max_pages
        self.return_exceptions = return_exceptions
        self.page: Page[T] | None = None
        self._items: typing.Iterator[T] = iter(())

    def next_item(self) -> typing.Any:
        return next(self._items, _DRAINED)

    def next_url(self) -> httpx.URL | None:
        """Return the URL to fetch next, or ``None`` once the walk is over."""
        if self.frontier is None:
            self.exhausted = True
        elif self.max_pages is not None and self.pages_fetched >= self.max_pages:
            self.frontier = None
            self.exhausted = True
        return self.frontier

    def advance(self, page: Page[T]) -> None:
        self.pages_fetched += 1
        self.page = page
        self.frontier = page.next
        self._items = iter(page.items)

    def fail(self) -> None:
        self.frontier = None
        self.exhausted = True


class Paginator(typing.Generic[T]):
    """Iterate over every item of a paged collection.

    Parameters
    ----------
    fetch:
        Callable ``(URL) -> Page[T]`` that fetches one page.
    start:
        URL of the first page.
    max_pages:
        Stop cleanly after this many pages. ``None`` follows ``next`` links
        until the server stops sending one.
    return_exceptions:
        If ``False`` (default) a failed fetch raises. If ``True`` the
        exception is yielded as a single item instead. Either way the
        paginator is exhausted afterwards.
    """

    def __init__(
        self,
        fetch: typing.Callable[[httpx.URL], Page[T]],
        start: httpx.URL | str,
        *,
        max_pages: int | None = None,
        return_exceptions: bool = False,
    ) -> None:
        self._fetch = fetch
        self._state: _PaginatorState[T] = _PaginatorState(
            start, max_pages, return_exceptions
        )

    @property
    def pages_fetched(self) -> int:
        return self._state.pages_fetched

    @property
    def frontier(self) -> httpx.URL | None:
        return self._state.frontier

    @property
    def current_page(self) -> Page[T] | None:
        return self._state.page

    def __iter__(self) -> Paginator[T]:
        return self

    def __next__(self) -> T:
        state = self._state
        while not state.exhausted:
            item = state.next_item()
            if item is not _DRAINED:
                return item

            url = state.next_url()
            if url is None:
                break
            try:
                page = self._fetch(url)
            except Exception as exc:
                state.fail()
                if state.return_exceptions:
                    return exc  # type: ignore[return-value]
                raise
            state.advance(page)
        raise StopIteration

    def collect(self) -> list[T]:
        """Drain the paginator into a list."""
        return list(self)


class AsyncPaginator(typing.Generic[T]):
    """Async version of :class:`Paginator`.

    ``fetch`` is an async callable ``(URL) -> Page[T]``. Each page fetch is a
    suspension point; nothing runs in the background between ``__anext__``
    calls.
    """

    def __init__(
        self,
        fetch: typing.Callable[[httpx.URL], typing.Awaitable[Page[T]]],
        start: httpx.URL | str,
        *,
        max_pages: int | None = None,
        return_exceptions: bool = False,
    ) -> None:
        self._fetch = fetch
        self._state: _PaginatorState[T] = _PaginatorState(
            start, max_pages, return_exceptions
        )

    @property
    def pages_fetched(self) -> int:
        return self._state.pages_fetched

    @property
    def frontier(self) -> httpx.URL | None:
        return self._state.frontier

    @property
    def current_page(self) -> Page[T] | None:
        return self._state.page

    def __aiter__(self) -> AsyncPaginator[T]:
        return self

    async def __anext__(self) -> T:
        state = self._state
        while not state.exhausted:
            item = state.next_item()
            if item is not _DRAINED:
                return item

            url = state.next_url()
            if url is None:
                break
            try:
                page = await self._fetch(url)
            except Exception as exc:
                state.fail()
                if state.return_exceptions:
                    return exc  # type: ignore[return-value]
                raise
            state.advance(page)
        raise StopAsyncIteration

    async def collect(self) -> list[T]:
        """Drain the paginator into a list."""
        return [item async for item in self]
