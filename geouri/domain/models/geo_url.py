from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Mapping, Sequence, cast

from geouri.adapters.url import SearchParams, StandardURL
from geouri.domain.algorithms.coordinates import (
    check_coordinates_string,
    parse_coordinates_string,
    split_coordinates_string,
    validate_coordinates,
)
from geouri.domain.algorithms.number import format_number, parse_number
from geouri.domain.exceptions import InvalidScheme
from geouri.settings import NumberFormatSettings

from .geo_params import BeforeSetHook, GeoParams

logger = logging.getLogger(__name__)

DEFAULT_CRS = "wgs84"


class GeoURL:
    """URL interface for a geo URI (RFC 5870) with an arbitrary CRS.

    Wraps a generic URL value and adds validated access to the coordinates
    and geo parameters. Every setter validates first and then rewrites the
    href in one step, so a failed write leaves the URL unchanged.

    Subclasses customize validation by plugging functions into the class
    attributes below rather than overriding the setters:

      - coordinates_validator: called with the parsed coordinate list on
        construction and on every coordinate write
      - crs_validator: called with the lowercased CRS on construction
      - params_before_set: installed on every ``geo_params`` view, may veto
        ``set`` calls
    """

    __slots__ = ("_url",)

    coordinates_validator: ClassVar[Callable[[Sequence[Any]], None]] = staticmethod(
        validate_coordinates
    )
    crs_validator: ClassVar[Callable[[str], None] | None] = None
    params_before_set: ClassVar[BeforeSetHook | None] = None

    def __init__(self, url: Any, base: Any = None) -> None:
        """Parse a geo URI.

        ``url`` may be a string, another GeoURL or any URL-like value. A
        ``base`` is only useful for adding a fragment to a geo URI, since geo
        URI paths are opaque: ``GeoURL("#hash", "geo:12,34")``.
        """

        self._url = StandardURL(url, base)
        if self._url.protocol != "geo:":
            raise InvalidScheme(f"Invalid protocol {self._url.protocol}")
        self.coordinates_validator(parse_coordinates_string(self.coordinates_string))
        if self.crs_validator is not None:
            self.crs_validator(self.crs)

    @classmethod
    def parse(cls, url: Any, base: Any = None) -> GeoURL | None:
        """Create an instance or return None if ``url`` isn't acceptable."""

        try:
            return cls(url, base)
        except (ValueError, TypeError) as exc:
            logger.debug("Rejected %s input %r: %s", cls.__name__, url, exc)
            return None

    @classmethod
    def can_parse(cls, url: Any, base: Any = None) -> bool:
        return cls.parse(url, base) is not None

    def __str__(self) -> str:
        return self._url.href

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._url.href!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.href == cast(GeoURL, other).href

    __hash__ = None  # type: ignore[assignment]

    def to_json(self) -> str:
        return self._url.href

    @property
    def href(self) -> str:
        return self._url.href

    @property
    def origin(self) -> str:
        return self._url.origin

    @property
    def protocol(self) -> str:
        return self._url.protocol

    @property
    def username(self) -> str:
        return self._url.username

    @property
    def password(self) -> str:
        return self._url.password

    @property
    def host(self) -> str:
        return self._url.host

    @property
    def hostname(self) -> str:
        return self._url.hostname

    @property
    def port(self) -> str:
        return self._url.port

    @property
    def pathname(self) -> str:
        return self._url.pathname

    @property
    def search(self) -> str:
        return self._url.search

    @search.setter
    def search(self, value: str) -> None:
        self._url.search = value

    @property
    def search_params(self) -> SearchParams:
        """Query string parameters; only ``z`` has a meaning for geo URIs."""

        return self._url.search_params

    @property
    def hash(self) -> str:
        return self._url.hash

    @hash.setter
    def hash(self, value: str) -> None:
        self._url.hash = value

    @property
    def z(self) -> float | None:
        """Zoom level from the ``z`` query parameter, None if missing.

        0 shows the whole world in one map tile, around 14 buildings become
        visible on typical map renderings.
        """

        return parse_number(self.search_params.get("z"))

    @z.setter
    def z(self, value: float | None) -> None:
        if value is None:
            self.search_params.delete("z")
            return
        digits = NumberFormatSettings.from_env().parameter_digits
        self.search_params.set("z", format_number(value, digits))

    @property
    def zoom(self) -> float | None:
        return self.z

    @zoom.setter
    def zoom(self, value: float | None) -> None:
        self.z = value

    @property
    def geo_params(self) -> GeoParams:
        return GeoParams._bind(
            lambda: self._url.pathname,
            self._url.set_pathname,
            before_set=self.params_before_set,
        )

    @property
    def crs(self) -> str:
        """Coordinate reference system, lowercased, ``wgs84`` if missing."""

        return (self.geo_params.get("crs") or DEFAULT_CRS).lower()

    @crs.setter
    def crs(self, value: str) -> None:
        # The default is kept implicit.
        lc_value = value.lower()
        if lc_value == DEFAULT_CRS:
            self.geo_params.delete("crs")
        else:
            self.geo_params.set("crs", lc_value)

    @property
    def coordinates_string(self) -> str:
        """Coordinates as they appear in the URI, e.g. ``"60,30"``."""

        return self.pathname.partition(";")[0]

    @coordinates_string.setter
    def coordinates_string(self, value: str) -> None:
        check_coordinates_string(value)
        self.coordinates_validator(parse_coordinates_string(value))
        self._write_coordinates_string(value)

    @property
    def coordinates(self) -> list[float]:
        return cast(list[float], parse_coordinates_string(self.coordinates_string))

    @coordinates.setter
    def coordinates(self, value: Sequence[float]) -> None:
        coordinates = list(value)
        self.coordinates_validator(coordinates)
        digits = NumberFormatSettings.from_env().coordinate_digits
        self._write_coordinates_string(
            ",".join(format_number(c, digits) for c in coordinates)
        )

    @property
    def coord_a(self) -> float:
        return self.coordinates[0]

    @coord_a.setter
    def coord_a(self, value: float) -> None:
        self._update_coordinates({0: value})

    @property
    def coord_b(self) -> float:
        return self.coordinates[1]

    @coord_b.setter
    def coord_b(self, value: float) -> None:
        self._update_coordinates({1: value})

    @property
    def coord_c(self) -> float | None:
        coordinates = self.coordinates
        return coordinates[2] if len(coordinates) > 2 else None

    @coord_c.setter
    def coord_c(self, value: float | None) -> None:
        self._update_coordinates({2: value})

    @property
    def u(self) -> float | None:
        """Uncertainty in meters from the ``u`` geo parameter, None if missing."""

        return parse_number(self.geo_params.get("u"))

    @u.setter
    def u(self, value: float | None) -> None:
        if value is None:
            self.geo_params.delete("u")
            return
        digits = NumberFormatSettings.from_env().parameter_digits
        self.geo_params.set("u", format_number(value, digits))

    @property
    def uncertainty(self) -> float | None:
        return self.u

    @uncertainty.setter
    def uncertainty(self, value: float | None) -> None:
        self.u = value

    def _update_coordinates(self, updates: Mapping[int, float | None]) -> None:
        """Replace some coordinate slots, keeping the text of the others.

        Setting the third slot to None removes it.
        """

        tokens = split_coordinates_string(self.coordinates_string)
        coordinates: list[Any] = parse_coordinates_string(self.coordinates_string)
        for index, value in sorted(updates.items()):
            if index == 2 and value is None:
                del tokens[2:]
                del coordinates[2:]
            elif index < len(coordinates):
                coordinates[index] = value
            else:
                coordinates.append(value)

        self.coordinates_validator(coordinates)

        digits = NumberFormatSettings.from_env().coordinate_digits
        for index, value in sorted(updates.items()):
            if value is None:
                continue
            token = format_number(value, digits)
            if index < len(tokens):
                tokens[index] = token
            else:
                tokens.append(token)
        self._write_coordinates_string(",".join(tokens))

    def _write_coordinates_string(self, value: str) -> None:
        _, sep, params = self.pathname.partition(";")
        self._url.set_pathname(f"{value}{sep}{params}")
