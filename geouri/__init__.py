"""Parse, inspect and edit RFC 5870 geo URIs."""

from geouri.domain.exceptions import (
    GeoURIError,
    InvalidCoordinateCount,
    InvalidCoordinates,
    InvalidCoordinateValue,
    InvalidCRS,
    InvalidScheme,
    InvalidURL,
    MalformedPairInput,
    NonFiniteNumber,
    OutOfRangeCoordinate,
    RejectedParameterWrite,
)
from geouri.domain.models import GeoParams, GeoURL, WGS84GeoURL

__all__ = [
    "GeoParams",
    "GeoURL",
    "WGS84GeoURL",
    "GeoURIError",
    "InvalidURL",
    "InvalidScheme",
    "InvalidCoordinates",
    "InvalidCoordinateCount",
    "InvalidCoordinateValue",
    "OutOfRangeCoordinate",
    "InvalidCRS",
    "RejectedParameterWrite",
    "MalformedPairInput",
    "NonFiniteNumber",
]
