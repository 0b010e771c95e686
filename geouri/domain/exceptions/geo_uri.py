class GeoURIError(ValueError):
    """Base exception for invalid geo URIs and rejected edits."""


class InvalidURL(GeoURIError):
    """Raised when a value can't be parsed or resolved as a URL."""


class InvalidScheme(InvalidURL):
    """Raised when the URL scheme is not ``geo:``."""


class InvalidCoordinates(GeoURIError):
    """Base exception for coordinate validation failures."""


class InvalidCoordinateCount(InvalidCoordinates):
    """Raised when there are fewer than two or more than three coordinates."""


class InvalidCoordinateValue(InvalidCoordinates):
    """Raised when a coordinate is not a finite number."""


class OutOfRangeCoordinate(InvalidCoordinates):
    """Raised when a WGS84 latitude or longitude is outside its range."""


class InvalidCRS(GeoURIError):
    """Raised when a WGS84 geo URI declares a different crs."""


class RejectedParameterWrite(GeoURIError):
    """Raised when a geo parameter write is vetoed before it's applied."""


class MalformedPairInput(GeoURIError):
    """Raised when geo parameters are built from a pair without two items."""


class NonFiniteNumber(GeoURIError):
    """Raised when formatting infinity or NaN."""
