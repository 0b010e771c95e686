from __future__ import annotations

from typing import Any, Iterator
from urllib.parse import (
    ParseResult,
    SplitResult,
    parse_qsl,
    urlencode,
    urljoin,
    urlsplit,
    urlunsplit,
)

import httpx

from geouri.domain.exceptions import InvalidURL


def url_to_string(value: Any) -> str:
    """Accept strings, urllib split/parse results and URL-like objects."""

    if value is None:
        raise InvalidURL("Missing URL")
    if isinstance(value, (SplitResult, ParseResult)):
        return value.geturl()
    return str(value)


def _split(value: str) -> SplitResult:
    try:
        return urlsplit(value)
    except ValueError as exc:
        raise InvalidURL(f"Invalid URL {value!r}") from exc


def _split_absolute(value: str) -> SplitResult:
    parts = _split(value)
    if not parts.scheme:
        raise InvalidURL(f"Invalid URL {value!r}")
    return parts


def _resolve(value: str, base: str | None) -> SplitResult:
    parts = _split(value)
    if parts.scheme:
        return parts
    if base is None:
        raise InvalidURL(f"Invalid URL {value!r}")

    base_parts = _split_absolute(base)
    if base_parts.netloc:
        return _split(urljoin(base, value))

    # Opaque base paths (geo:, mailto:, ...) only accept fragment references.
    if parts.netloc or parts.path or parts.query:
        raise InvalidURL(f"Can't resolve {value!r} against {base!r}")
    return base_parts._replace(fragment=parts.fragment)


class StandardURL:
    """Mutable URL value built on ``urllib.parse``.

    Accessor names and formats mirror the WHATWG URL API, which is what geo
    URI consumers usually expect: ``protocol`` keeps the trailing colon,
    ``search`` and ``hash`` keep their leading ``?`` and ``#``.

    Pathnames of URLs without an authority are opaque, so the only way to
    change one is rewriting the whole href (see ``set_pathname``).
    """

    __slots__ = ("_parts",)

    def __init__(self, url: Any, base: Any = None) -> None:
        self._parts = _resolve(
            url_to_string(url), None if base is None else url_to_string(base)
        )

    def __str__(self) -> str:
        return self.href

    def __repr__(self) -> str:
        return f"StandardURL({self.href!r})"

    @property
    def href(self) -> str:
        return urlunsplit(self._parts)

    @href.setter
    def href(self, value: str) -> None:
        self._parts = _split_absolute(value)

    @property
    def protocol(self) -> str:
        return f"{self._parts.scheme}:"

    @property
    def origin(self) -> str:
        if self._parts.scheme in {"http", "https", "ws", "wss", "ftp"}:
            return f"{self._parts.scheme}://{self.host}"
        return "null"

    @property
    def username(self) -> str:
        return self._parts.username or ""

    @property
    def password(self) -> str:
        return self._parts.password or ""

    @property
    def host(self) -> str:
        return self._parts.netloc.rpartition("@")[2]

    @property
    def hostname(self) -> str:
        return self._parts.hostname or ""

    @property
    def port(self) -> str:
        port = self._parts.port
        return "" if port is None else str(port)

    @property
    def pathname(self) -> str:
        return self._parts.path

    def set_pathname(self, value: str) -> None:
        self.href = f"{self.protocol}{value}{self.search}{self.hash}"

    @property
    def search(self) -> str:
        query = self._parts.query
        return f"?{query}" if query else ""

    @search.setter
    def search(self, value: str) -> None:
        query = value[1:] if value.startswith("?") else value
        # A literal "#" would start the fragment.
        query = query.replace("#", "%23")
        self._parts = self._parts._replace(query=query)

    @property
    def search_params(self) -> SearchParams:
        return SearchParams(self)

    @property
    def hash(self) -> str:
        fragment = self._parts.fragment
        return f"#{fragment}" if fragment else ""

    @hash.setter
    def hash(self, value: str) -> None:
        fragment = value[1:] if value.startswith("#") else value
        self._parts = self._parts._replace(fragment=fragment)


class SearchParams:
    """Live view of a URL query string.

    Lookups are delegated to ``httpx.QueryParams``. Every read parses the
    current query of the bound URL, every write replaces it. Iteration and
    writes follow the pair order of the query, so repeated names that are
    apart in the query stay apart.
    """

    __slots__ = ("_url",)

    def __init__(self, url: StandardURL) -> None:
        self._url = url

    def _read(self) -> httpx.QueryParams:
        return httpx.QueryParams(self._url.search[1:])

    def _items(self) -> list[tuple[str, str]]:
        return parse_qsl(self._url.search[1:], keep_blank_values=True)

    def _write(self, items: list[tuple[str, str]]) -> None:
        self._url.search = urlencode(items)

    def get(self, name: str) -> str | None:
        return self._read().get(name)

    def get_all(self, name: str) -> list[str]:
        return self._read().get_list(name)

    def has(self, name: str) -> bool:
        return name in self._read()

    def set(self, name: str, value: str) -> None:
        """Replace the first pair named ``name`` and drop the others."""

        items: list[tuple[str, str]] = []
        replaced = False
        for key, current in self._items():
            if key != name:
                items.append((key, current))
            elif not replaced:
                items.append((name, value))
                replaced = True
        if not replaced:
            items.append((name, value))
        self._write(items)

    def delete(self, name: str) -> None:
        items = self._items()
        if any(key == name for key, _ in items):
            self._write([item for item in items if item[0] != name])

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._items())

    def __len__(self) -> int:
        return len(self._items())

    def __str__(self) -> str:
        return urlencode(self._items())

    def __repr__(self) -> str:
        return f"SearchParams({str(self)!r})"
