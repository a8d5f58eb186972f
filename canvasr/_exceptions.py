"""
Exception hierarchy for canvasr.

Every error raised by the library derives from :class:`CanvasError`::

    CanvasError
    ├── RequestFailure
    ├── DecodeFailure
    ├── LinkHeaderError
    │   ├── MalformedLinkHeader
    │   └── MissingLinkHeader
    └── ConfigError
        ├── InvalidBaseURL
        └── MissingToken
"""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    import httpx

__all__ = [
    "CanvasError",
    "ConfigError",
    "DecodeFailure",
    "InvalidBaseURL",
    "LinkHeaderError",
    "MalformedLinkHeader",
    "MissingLinkHeader",
    "MissingToken",
    "RequestFailure",
]


class CanvasError(Exception):
    """Base class for all canvasr errors."""

    def __init__(self, message: str, *, request: httpx.Request | None = None) -> None:
        super().__init__(message)
        self._request = request

    @property
    def request(self) -> httpx.Request:
        if self._request is None:
            raise RuntimeError("The .request property has not been set.")
        return self._request

    @request.setter
    def request(self, request: httpx.Request) -> None:
        self._request = request


class RequestFailure(CanvasError):
    """The GET could not be sent, or the server answered with a non-2xx status.

    The underlying httpx exception is available as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        request: httpx.Request | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, request=request)
        self.status_code = status_code


class DecodeFailure(CanvasError):
    """The response body is not JSON, or does not match the item schema."""


class LinkHeaderError(CanvasError):
    pass


class MalformedLinkHeader(LinkHeaderError):
    """A ``Link`` header was present but could not be parsed."""


class MissingLinkHeader(LinkHeaderError):
    """No ``Link`` header, and the client was configured to require one."""


class ConfigError(CanvasError):
    pass


class InvalidBaseURL(ConfigError):
    pass


class MissingToken(ConfigError):
    pass
