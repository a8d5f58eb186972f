from __future__ import annotations

import typing

import httpx
import pytest

import canvasr

BASE_URL = "https://canvas.example.edu/"
API_URL = "https://canvas.example.edu/api/v1/"
COURSES_URL = API_URL + "courses/"
TOKEN = "  secret-token\n"


# httpx.MockTransport runs on asyncio; trio is not exercised here.
@pytest.fixture
def anyio_backend():
    return "asyncio"


class MockCanvas:
    """A fake Canvas server serving paged JSON arrays keyed by URL.

    ``pages`` maps an absolute URL to ``(items, links)``. ``links`` becomes
    the ``Link`` header (omitted when ``None``). URLs listed in ``failures``
    raise a transport error instead. Every request is recorded.
    """

    def __init__(self) -> None:
        self.pages: dict[str, tuple[list[typing.Any], dict[str, str] | None]] = {}
        self.failures: set[str] = set()
        self.requests: list[httpx.Request] = []

    def add_page(
        self,
        url: str,
        items: list[typing.Any],
        links: dict[str, str] | None = None,
    ) -> None:
        self.pages[str(httpx.URL(url))] = (items, links)

    def add_chain(self, urls: list[str], items_per_page: int = 2) -> list[list[dict]]:
        """Register pages linked first -> ... -> last via ``rel="next"``."""
        all_items = []
        for index, url in enumerate(urls):
            items = [
                {"id": index * items_per_page + n + 1, "name": f"Course {index}.{n}"}
                for n in range(items_per_page)
            ]
            links = {"current": url, "first": urls[0], "last": urls[-1]}
            if index > 0:
                links["prev"] = urls[index - 1]
            if index < len(urls) - 1:
                links["next"] = urls[index + 1]
            self.add_page(url, items, links)
            all_items.append(items)
        return all_items

    def requested_urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url in self.failures:
            raise httpx.ConnectError("Connection refused", request=request)
        if url not in self.pages:
            return httpx.Response(404, json={"errors": [{"message": "not found"}]})
        items, links = self.pages[url]
        headers = {}
        if links is not None:
            headers["link"] = canvasr.format_link_header(links)
        return httpx.Response(200, json=items, headers=headers)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server() -> MockCanvas:
    return MockCanvas()


@pytest.fixture
def config() -> canvasr.CanvasConfig:
    return canvasr.CanvasConfig.build(BASE_URL, TOKEN)


@pytest.fixture
def canvas(server: MockCanvas, config: canvasr.CanvasConfig) -> typing.Iterator[canvasr.Canvas]:
    with canvasr.Canvas(config, transport=server.transport()) as client:
        yield client


@pytest.fixture
async def async_canvas(
    server: MockCanvas, config: canvasr.CanvasConfig
) -> typing.AsyncIterator[canvasr.AsyncCanvas]:
    async with canvasr.AsyncCanvas(config, transport=server.transport()) as client:
        yield client
