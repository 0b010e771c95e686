from .geo_uri import (
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

__all__ = [
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
