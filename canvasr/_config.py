from __future__ import annotations

import os
import typing
from dataclasses import dataclass

import httpx

from ._exceptions import InvalidBaseURL, MissingToken

if typing.TYPE_CHECKING:
    from ._client import Canvas

__all__ = ["DEFAULT_TIMEOUT", "CanvasBuilder", "CanvasConfig"]

API_PATH = "/api/v1/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "canvasr"

URL_ENV_VAR = "CANVAS_API_URL"
TOKEN_ENV_VAR = "CANVAS_API_TOKEN"


def _parse_base_url(base_url: str | httpx.URL) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidBaseURL(f"Invalid Canvas base URL {base_url!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidBaseURL(
            f"Invalid Canvas base URL {str(base_url)!r}: "
            "expected an absolute http(s) URL such as 'https://canvas.example.edu/'"
        )
    return url


@dataclass(frozen=True)
class CanvasConfig:
    """Connection settings for one Canvas instance.

    Build it with :meth:`build` or :meth:`from_env`; both validate the base
    URL up front instead of on the first request.
    """

    base_url: httpx.URL
    api_url: httpx.URL
    token: str
    timeout: float | None = DEFAULT_TIMEOUT
    require_link_header: bool = False
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def build(
        cls,
        base_url: str | httpx.URL,
        token: str,
        *,
        timeout: float | None = DEFAULT_TIMEOUT,
        require_link_header: bool = False,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> CanvasConfig:
        base = _parse_base_url(base_url)
        return cls(
            base_url=base,
            api_url=base.join(API_PATH),
            token=token.strip(),
            timeout=timeout,
            require_link_header=require_link_header,
            user_agent=user_agent,
        )

    @classmethod
    def from_env(
        cls,
        environ: typing.Mapping[str, str] | None = None,
        **kwargs: typing.Any,
    ) -> CanvasConfig:
        """Read ``CANVAS_API_URL`` and ``CANVAS_API_TOKEN``."""
        environ = os.environ if environ is None else environ
        base_url = environ.get(URL_ENV_VAR)
        if not base_url:
            raise InvalidBaseURL(f"{URL_ENV_VAR} is not set")
        token = environ.get(TOKEN_ENV_VAR, "")
        if not token.strip():
            raise MissingToken(f"{TOKEN_ENV_VAR} is not set")
        return cls.build(base_url, token, **kwargs)

    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def httpx_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.timeout)


class CanvasBuilder:
    """Fluent construction of a :class:`~canvasr.Canvas` client.

    `AsyncCanvas.builder()` builds an :class:`~canvasr.AsyncCanvas` instead.

    >>> canvas = (
    ...     Canvas.builder()
    ...     .set_url("https://canvas.example.edu/")
    ...     .set_token(token)
    ...     .build()
    ... )
    """

    def __init__(self, client_class: type[typing.Any] | None = None) -> None:
        self._client_class = client_class
        self._base_url: str | httpx.URL = ""
        self._token = ""
        self._options: dict[str, typing.Any] = {}

    def set_url(self, base_url: str | httpx.URL) -> CanvasBuilder:
        self._base_url = base_url
        return self

    def set_token(self, token: str) -> CanvasBuilder:
        self._token = token
        return self

    def set_timeout(self, timeout: float | None) -> CanvasBuilder:
        self._options["timeout"] = timeout
        return self

    def require_link_header(self, required: bool = True) -> CanvasBuilder:
        self._options["require_link_header"] = required
        return self

    def config(self) -> CanvasConfig:
        return CanvasConfig.build(self._base_url, self._token, **self._options)

    def build(self, **client_kwargs: typing.Any) -> Canvas:
        from ._client import Canvas

        client_class = self._client_class or Canvas
        return client_class(self.config(), **client_kwargs)
