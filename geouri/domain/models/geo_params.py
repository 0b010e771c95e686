from __future__ import annotations

from typing import Callable, Iterable, Iterator, Mapping, Union

from geouri.domain.algorithms.param import read_param, write_param
from geouri.domain.exceptions import MalformedPairInput

BeforeSetHook = Callable[[str, str], None]
GeoParamsInit = Union[str, Mapping[str, str], Iterable[Iterable[str]], None]

# Parameters that go right after the coordinates, in this order.
_PARAM_RANKS = {"crs": 0, "u": 1}


def insert_param(kvs: list[tuple[str, str]], name: str, value: str) -> None:
    """Update a parameter in place or insert it at its position.

    Existing parameters keep their position and take the new name casing.
    New ``crs`` and ``u`` go in front (``crs`` first), others go last.
    """

    lc_name = name.lower()
    for i, (k, _) in enumerate(kvs):
        if k.lower() == lc_name:
            kvs[i] = (name, value)
            return

    rank = _PARAM_RANKS.get(lc_name)
    if rank is None:
        kvs.append((name, value))
        return

    pos = 0
    while pos < len(kvs) and _PARAM_RANKS.get(kvs[pos][0].lower(), rank) < rank:
        pos += 1
    kvs.insert(pos, (name, value))


class GeoParams:
    """Geo URI parameters as defined in RFC 5870.

    Similar to a query string parameter collection, but for the
    semicolon-separated ``p`` part of a geo URI that follows the coordinates.
    Names are case-insensitive and values keep their case.

    Parameters are assumed not to repeat: ``crs`` and ``u`` can't by the URI
    syntax, and RFC 5870 compares other parameters as sets. So there's no
    ``append`` or ``get_all``.

    ``options`` is one of:

    - None or ``""`` for no parameters
    - a parameter string without the leading ``;``, e.g. ``"u=10;flag"``
    - a mapping of names to values
    - an iterable of name-value pairs

    A view obtained from ``GeoURL.geo_params`` reads and writes the URL it
    came from.
    """

    __slots__ = ("_p", "_read_pathname", "_write_pathname", "_before_set")

    def __init__(self, options: GeoParamsInit = None) -> None:
        self._p = ""
        self._read_pathname: Callable[[], str] | None = None
        self._write_pathname: Callable[[str], None] | None = None
        self._before_set: BeforeSetHook | None = None

        if options is None or isinstance(options, str):
            self._p = options or ""
            return

        items = options.items() if isinstance(options, Mapping) else options
        kvs: list[tuple[str, str]] = []
        for kv in items:
            pair = tuple(kv)
            if len(pair) != 2:
                raise MalformedPairInput(
                    f"Expected 2 items in pair but got {len(pair)}"
                )
            insert_param(kvs, str(pair[0]), str(pair[1]))
        self._write(None, kvs)

    @classmethod
    def _bind(
        cls,
        read_pathname: Callable[[], str],
        write_pathname: Callable[[str], None],
        before_set: BeforeSetHook | None = None,
    ) -> GeoParams:
        """Create a view over a pathname owned by someone else.

        ``write_pathname`` receives the whole new pathname, coordinates
        included, once per mutation.
        """

        params = cls()
        params._read_pathname = read_pathname
        params._write_pathname = write_pathname
        params._before_set = before_set
        return params

    @property
    def size(self) -> int:
        _, kvs = self._read()
        return len(kvs)

    def __len__(self) -> int:
        return self.size

    def get(self, name: str) -> str | None:
        """Value of the parameter, ``""`` for a flag or None if missing."""

        _, kvs = self._read()
        lc_name = name.lower()
        for k, v in kvs:
            if k.lower() == lc_name:
                return v
        return None

    def set(self, name: str, value: str) -> None:
        if self._before_set is not None:
            self._before_set(name, value)

        coords, kvs = self._read()
        insert_param(kvs, name, value)
        self._write(coords, kvs)

    def delete(self, name: str, value: str | None = None) -> None:
        """Delete a parameter, only if it has ``value`` when one is given."""

        coords, kvs = self._read()
        lc_name = name.lower()
        for i, (k, v) in enumerate(kvs):
            if k.lower() != lc_name:
                continue
            if value is not None and v != value:
                continue
            del kvs[i]
            break
        self._write(coords, kvs)

    def has(self, name: str, value: str | None = None) -> bool:
        _, kvs = self._read()
        lc_name = name.lower()
        for k, v in kvs:
            if k.lower() == lc_name:
                return value is None or v == value
        return False

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.entries()

    def entries(self) -> Iterator[tuple[str, str]]:
        _, kvs = self._read()
        yield from kvs

    def keys(self) -> Iterator[str]:
        _, kvs = self._read()
        for k, _ in kvs:
            yield k

    def values(self) -> Iterator[str]:
        _, kvs = self._read()
        for _, v in kvs:
            yield v

    def __str__(self) -> str:
        """Semicolon-separated parameters, without the leading ``;``."""

        if self._read_pathname is not None:
            return self._read_pathname().partition(";")[2]
        return self._p

    def __repr__(self) -> str:
        return f"GeoParams({str(self)!r})"

    def _read(self) -> tuple[str | None, list[tuple[str, str]]]:
        if self._read_pathname is not None:
            coords, *params = self._read_pathname().split(";")
            return coords, [read_param(p) for p in params]
        if self._p == "":
            return None, []
        return None, [read_param(p) for p in self._p.split(";")]

    def _write(self, coords: str | None, kvs: list[tuple[str, str]]) -> None:
        params = [write_param(k, v) for k, v in kvs]
        if self._write_pathname is not None:
            self._write_pathname(";".join([coords or "", *params]))
        else:
            self._p = ";".join(params)
