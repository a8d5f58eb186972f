from __future__ import annotations

import functools
import logging
import typing

import httpx
import pydantic

from ._config import CanvasBuilder, CanvasConfig
from ._exceptions import (
    DecodeFailure,
    MalformedLinkHeader,
    MissingLinkHeader,
    RequestFailure,
)
from ._links import parse_link_header
from ._page import Page
from ._paginate import AsyncPaginator, Paginator

if typing.TYPE_CHECKING:
    from .api import AsyncCourseHandler, CourseHandler

__all__ = ["AsyncCanvas", "Canvas", "build_page"]

logger = logging.getLogger(__name__)

T = typing.TypeVar("T")

QueryParams = typing.Optional[typing.Mapping[str, typing.Any]]


@functools.lru_cache(maxsize=None)
def _items_adapter(model: typing.Any) -> pydantic.TypeAdapter[typing.Any]:
    return pydantic.TypeAdapter(typing.List[model])  # type: ignore[valid-type]


def build_page(
    response: httpx.Response,
    model: type[T],
    *,
    require_link_header: bool = False,
) -> Page[T]:
    """Assemble a :class:`Page` from one successful response.

    The body must be a JSON array of ``model`` items. Navigation links come
    from the ``Link`` header; without one the page is treated as the only
    page unless ``require_link_header`` is set.
    """
    request = response.request
    try:
        items = _items_adapter(model).validate_json(response.content)
    except pydantic.ValidationError as exc:
        name = getattr(model, "__name__", repr(model))
        raise DecodeFailure(
            f"Could not decode {request.url} as a list of {name}: {exc}",
            request=request,
        ) from exc

    header = response.headers.get("link")
    if header is None:
        if require_link_header:
            raise MissingLinkHeader(
                f"Response from {request.url} has no Link header", request=request
            )
        links: dict[str, httpx.URL] = {}
    else:
        try:
            links = parse_link_header(header, base_url=response.url)
        except MalformedLinkHeader as exc:
            exc.request = request
            raise

    page = Page.from_links(items, links, response.url)
    logger.debug(
        "Fetched %d item(s) from %s (next=%s)", len(page), response.url, page.next
    )
    return page


def _check_response(request: httpx.Request, response: httpx.Response) -> None:
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise RequestFailure(
            f"GET {request.url} returned {response.status_code}",
            request=request,
            status_code=response.status_code,
        ) from exc


def _transport_failure(request: httpx.Request, exc: httpx.HTTPError) -> RequestFailure:
    return RequestFailure(f"GET {request.url} failed: {exc!r}", request=request)


class _BaseCanvas:
    def __init__(self, config: CanvasConfig) -> None:
        self._config = config

    @classmethod
    def builder(cls) -> CanvasBuilder:
        return CanvasBuilder(cls)

    @property
    def config(self) -> CanvasConfig:
        return self._config

    @property
    def api_url(self) -> httpx.URL:
        return self._config.api_url

    def absolute_url(self, route: str | httpx.URL) -> httpx.URL:
        """Resolve an API route such as ``"courses/"`` against the API root."""
        return self._config.api_url.join(route)

    def _start_url(self, route: str | httpx.URL, params: QueryParams) -> httpx.URL:
        url = self.absolute_url(route)
        if params:
            url = url.copy_merge_params(params)
        return url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_url={str(self.api_url)!r})"


class Canvas(_BaseCanvas):
    """Synchronous Canvas API client.

    Wraps one :class:`httpx.Client`, which keeps a connection pool and a
    cookie jar for the lifetime of the object::

        with Canvas(CanvasConfig.build(url, token)) as canvas:
            for course in canvas.courses().iter_my_courses():
                print(course.name)
    """

    def __init__(
        self,
        config: CanvasConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(config)
        self._client = httpx.Client(
            headers=config.headers(),
            timeout=config.httpx_timeout(),
            follow_redirects=True,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> Canvas:
        return self

    def __exit__(self, *args: typing.Any) -> None:
        self.close()

    def courses(self) -> CourseHandler:
        from .api import CourseHandler

        return CourseHandler(self)

    def fetch_page(
        self,
        url: str | httpx.URL,
        model: type[T],
        *,
        params: QueryParams = None,
    ) -> Page[T]:
        """Send one GET to ``url`` and return the resulting page."""
        request = self._client.build_request("GET", url, params=params)
        logger.debug("GET %s", request.url)
        try:
            response = self._client.send(request)
        except httpx.HTTPError as exc:
            raise _transport_failure(request, exc) from exc
        _check_response(request, response)
        return build_page(
            response, model, require_link_header=self._config.require_link_header
        )

    def get_page(
        self,
        route: str | httpx.URL,
        model: type[T],
        *,
        params: QueryParams = None,
    ) -> Page[T]:
        return self.fetch_page(self.absolute_url(route), model, params=params)

    def paginate(
        self,
        route: str | httpx.URL,
        model: type[T],
        *,
        params: QueryParams = None,
        max_pages: int | None = None,
        return_exceptions: bool = False,
    ) -> Paginator[T]:
        """Lazily iterate every item behind ``route``, page by page.

        ``params`` apply to the first request only. Later pages are fetched
        from the server's ``next`` links as sent.
        """
        return Paginator(
            functools.partial(self.fetch_page, model=model),
            self._start_url(route, params),
            max_pages=max_pages,
            return_exceptions=return_exceptions,
        )


class AsyncCanvas(_BaseCanvas):
    """Async version of :class:`Canvas`, backed by :class:`httpx.AsyncClient`."""

    def __init__(
        self,
        config: CanvasConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config)
        self._client = httpx.AsyncClient(
            headers=config.headers(),
            timeout=config.httpx_timeout(),
            follow_redirects=True,
            transport=transport,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncCanvas:
        return self

    async def __aexit__(self, *args: typing.Any) -> None:
        await self.aclose()

    def courses(self) -> AsyncCourseHandler:
        from .api import AsyncCourseHandler

        return AsyncCourseHandler(self)

    async def fetch_page(
        self,
        url: str | httpx.URL,
        model: type[T],
        *,
        params: QueryParams = None,
    ) -> Page[T]:
        request = self._client.build_request("GET", url, params=params)
        logger.debug("GET %s", request.url)
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            raise _transport_failure(request, exc) from exc
        _check_response(request, response)
        return build_page(
            response, model, require_link_header=self._config.require_link_header
        )

    async def get_page(
        self,
        route: str | httpx.URL,
        model: type[T],
        *,
        params: QueryParams = None,
    ) -> Page[T]:
        return await self.fetch_page(self.absolute_url(route), model, params=params)

    def paginate(
        self,
        route: str | httpx.URL,
        model: type[T],
        *,
        params: QueryParams = None,
        max_pages: int | None = None,
        return_exceptions: bool = False,
    ) -> AsyncPaginator[T]:
        return AsyncPaginator(
            functools.partial(self.fetch_page, model=model),
            self._start_url(route, params),
            max_pages=max_pages,
            return_exceptions=return_exceptions,
        )
