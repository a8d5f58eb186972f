from __future__ import annotations

import re
import typing

import httpx

from ._exceptions import MalformedLinkHeader

__all__ = ["format_link_header", "parse_link_header"]

_TARGET_REGEX = re.compile(r"\s*<(?P<target>[^>]*)>(?P<params>.*)", re.DOTALL)

# One ``; name=value`` parameter. Values are either a quoted string or a token.
_PARAM_REGEX = re.compile(
    r'\s*;\s*(?P<name>[^\s=;,"]+)\s*'
    r'(?:=\s*(?:"(?P<quoted>(?:[^"\\]|\\.)*)"|(?P<token>[^\s;,"]*)))?\s*',
    re.DOTALL,
)

_QUOTED_PAIR_REGEX = re.compile(r"\\(.)", re.DOTALL)


def _split_segments(value: str) -> list[str]:
    """Split a ``Link`` header on top-level commas.

    Commas inside ``<...>`` targets or quoted parameter values are kept.
    Empty segments are dropped.
    """
    segments: list[str] = []
    buffer: list[str] = []
    in_target = False
    in_quotes = False
    escaped = False

    for char in value:
        if in_quotes:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_quotes = False
        elif in_target:
            if char == ">":
                in_target = False
        elif char == "<":
            in_target = True
        elif char == '"':
            in_quotes = True
        elif char == ",":
            segments.append("".join(buffer))
            buffer = []
            continue
        buffer.append(char)

    segments.append("".join(buffer))
    return [segment.strip() for segment in segments if segment.strip()]


def _parse_params(segment: str, params: str) -> dict[str, str]:
    parsed: dict[str, str] = {}
    params = params.rstrip()
    pos = 0
    while pos < len(params):
        match = _PARAM_REGEX.match(params, pos)
        if match is None or match.end() == pos:
            raise MalformedLinkHeader(
                f"Invalid parameters in Link header segment {segment!r}"
            )
        name = match.group("name").lower()
        if match.group("quoted") is not None:
            param_value = _QUOTED_PAIR_REGEX.sub(r"\1", match.group("quoted"))
        else:
            param_value = match.group("token") or ""
        # RFC 8288: occurrences after the first are ignored.
        parsed.setdefault(name, param_value)
        pos = match.end()
    return parsed


def _resolve(segment: str, target: str, base_url: httpx.URL | None) -> httpx.URL:
    try:
        url = httpx.URL(target) if base_url is None else base_url.join(target)
    except httpx.InvalidURL as exc:
        raise MalformedLinkHeader(
            f"Invalid URL in Link header segment {segment!r}: {exc}"
        ) from exc
    if not url.is_absolute_url:
        raise MalformedLinkHeader(
            f"Relative URL in Link header segment {segment!r} with no base URL"
        )
    return url


def parse_link_header(
    value: str,
    base_url: httpx.URL | str | None = None,
) -> dict[str, httpx.URL]:
    """Parse an RFC 8288 ``Link`` header into ``{relation: URL}``.

    Both ``rel="next"`` and ``rel=next`` are accepted. A ``rel`` holding
    several space-separated relation types registers the URL under each one.
    Relation names keep the case the server sent. When a relation appears
    more than once the later URL wins.

    Relative targets are resolved against ``base_url``; without one they are
    rejected.

    Raises :class:`MalformedLinkHeader` if any segment lacks a ``<url>``
    target or a ``rel`` parameter. The whole header is rejected in that case.

    >>> links = parse_link_header(
    ...     '<https://canvas.example.edu/api/v1/courses?page=2>; rel="next"'
    ... )
    >>> str(links["next"])
    'https://canvas.example.edu/api/v1/courses?page=2'
    """
    base = httpx.URL(base_url) if base_url is not None else None
    links: dict[str, httpx.URL] = {}

    for segment in _split_segments(value):
        match = _TARGET_REGEX.fullmatch(segment)
        if match is None or not match.group("target").strip():
            raise MalformedLinkHeader(
                f"Missing <url> target in Link header segment {segment!r}"
            )
        params = _parse_params(segment, match.group("params"))
        rel = params.get("rel", "").strip()
        if not rel:
            raise MalformedLinkHeader(
                f"Missing rel parameter in Link header segment {segment!r}"
            )

        url = _resolve(segment, match.group("target").strip(), base)
        for relation in rel.split():
            links[relation] = url

    return links


def format_link_header(links: typing.Mapping[str, httpx.URL | str]) -> str:
    """Serialize ``{relation: URL}`` into a ``Link`` header value.

    ``"`` and ``\\`` in relation names are written as quoted-pairs.
    """
    return ", ".join(
        f'<{url}>; rel="{_quote(relation)}"' for relation, url in links.items()
    )


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')
