from __future__ import annotations

import types
import typing
from dataclasses import dataclass, field

import httpx

__all__ = ["Page"]

T = typing.TypeVar("T")


@dataclass(frozen=True)
class Page(typing.Generic[T]):
    """One fetched page of a paged collection.

    ``items`` holds exactly one response body, in server order. The link
    attributes come only from that response's ``Link`` header; ``current`` and
    ``first`` fall back to the request URL when the server leaves them out.
    Iterating a page yields its own items, never the following pages'.
    ``links`` is a read-only view of every relation the header carried.
    """

    items: tuple[T, ...]
    current: httpx.URL
    first: httpx.URL
    next: httpx.URL | None = None
    prev: httpx.URL | None = None
    last: httpx.URL | None = None
    links: typing.Mapping[str, httpx.URL] = field(
        default_factory=lambda: types.MappingProxyType({}), repr=False
    )

    @classmethod
    def from_links(
        cls,
        items: typing.Iterable[T],
        links: typing.Mapping[str, httpx.URL],
        request_url: httpx.URL,
    ) -> Page[T]:
        return cls(
            items=tuple(items),
            current=links.get("current", request_url),
            first=links.get("first", request_url),
            next=links.get("next"),
            prev=links.get("prev"),
            last=links.get("last"),
            links=types.MappingProxyType(dict(links)),
        )

    @property
    def has_next(self) -> bool:
        return self.next is not None

    def __iter__(self) -> typing.Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]
