from __future__ import annotations

import math
from typing import Any, Sequence

from geouri.domain.algorithms.number import parse_number
from geouri.domain.exceptions import (
    InvalidCoordinateCount,
    InvalidCoordinateValue,
    OutOfRangeCoordinate,
)

_URI_DELIMITERS = (";", "?", "#")


def split_coordinates_string(value: str) -> list[str]:
    return value.split(",")


def check_coordinates_string(value: str) -> None:
    """Reject text that would end the coordinates part of a geo URI."""

    for delimiter in _URI_DELIMITERS:
        if delimiter in value:
            raise InvalidCoordinateValue(
                f"Unexpected {delimiter!r} in coordinates {value!r}"
            )


def validate_coordinates(coordinates: Sequence[Any]) -> None:
    """Check that there are two or three finite numeric coordinates."""

    if len(coordinates) < 2 or len(coordinates) > 3:
        raise InvalidCoordinateCount(
            f"Invalid number of coordinates: {len(coordinates)}"
        )
    for coordinate in coordinates:
        if (
            not isinstance(coordinate, (int, float))
            or isinstance(coordinate, bool)
            or not math.isfinite(coordinate)
        ):
            raise InvalidCoordinateValue(f"Invalid coordinate value: {coordinate!r}")


def validate_wgs84_coordinates(coordinates: Sequence[Any]) -> None:
    validate_coordinates(coordinates)
    lat, lon = coordinates[0], coordinates[1]
    if not (-90.0 <= lat <= 90.0):
        raise OutOfRangeCoordinate(f"Latitude {lat} outside of the allowed range")
    if not (-180.0 <= lon <= 180.0):
        raise OutOfRangeCoordinate(f"Longitude {lon} outside of the allowed range")


def parse_coordinates_string(value: str) -> list[float | None]:
    """Parse comma-separated coordinates without validating them.

    Tokens without a numeric prefix come back as None.
    """

    return [parse_number(token) for token in split_coordinates_string(value)]
