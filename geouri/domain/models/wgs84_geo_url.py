from __future__ import annotations

from typing import Sequence

from geouri.domain.algorithms.coordinates import validate_wgs84_coordinates
from geouri.domain.exceptions import InvalidCRS, RejectedParameterWrite

from .geo_url import DEFAULT_CRS, GeoURL


def require_wgs84_crs(crs: str) -> None:
    if crs != DEFAULT_CRS:
        raise InvalidCRS(f"Unexpected CRS {crs}")


def reject_non_wgs84_crs(name: str, value: str) -> None:
    if name.lower() == "crs" and value.lower() != DEFAULT_CRS:
        raise RejectedParameterWrite(
            f"{value} is not a valid value for crs of WGS84GeoURL"
        )


class WGS84GeoURL(GeoURL):
    """Geo URI in WGS84, read as latitude, longitude and optional altitude.

    That covers almost all geo URIs in practice, since RFC 5870 doesn't
    register any other CRS. Latitude must stay within [-90, 90] and
    longitude within [-180, 180] through every write, and the ``crs``
    parameter can't be set to anything but ``wgs84``, including through
    ``geo_params``.
    """

    __slots__ = ()

    coordinates_validator = staticmethod(validate_wgs84_coordinates)
    crs_validator = staticmethod(require_wgs84_crs)
    params_before_set = staticmethod(reject_non_wgs84_crs)

    @property
    def lat(self) -> float:
        """Latitude in decimal degrees."""

        return self.coord_a

    @lat.setter
    def lat(self, value: float) -> None:
        self.coord_a = value

    @property
    def latitude(self) -> float:
        return self.coord_a

    @latitude.setter
    def latitude(self, value: float) -> None:
        self.coord_a = value

    @property
    def lon(self) -> float:
        """Longitude in decimal degrees."""

        return self.coord_b

    @lon.setter
    def lon(self, value: float) -> None:
        self.coord_b = value

    @property
    def lng(self) -> float:
        return self.coord_b

    @lng.setter
    def lng(self, value: float) -> None:
        self.coord_b = value

    @property
    def longitude(self) -> float:
        return self.coord_b

    @longitude.setter
    def longitude(self, value: float) -> None:
        self.coord_b = value

    @property
    def alt(self) -> float | None:
        """Altitude in meters, None if the URI has two coordinates."""

        return self.coord_c

    @alt.setter
    def alt(self, value: float | None) -> None:
        self.coord_c = value

    @property
    def altitude(self) -> float | None:
        return self.coord_c

    @altitude.setter
    def altitude(self, value: float | None) -> None:
        self.coord_c = value

    @property
    def lat_lon(self) -> tuple[float, float]:
        return (self.lat, self.lon)

    @lat_lon.setter
    def lat_lon(self, value: Sequence[float]) -> None:
        lat, lon = value
        self._update_coordinates({0: lat, 1: lon})

    @property
    def lat_lng(self) -> tuple[float, float]:
        """Same as lat_lon, named the way Leaflet names it."""

        return self.lat_lon

    @lat_lng.setter
    def lat_lng(self, value: Sequence[float]) -> None:
        self.lat_lon = value

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Longitude first, the axis order of GeoJSON and MapLibre."""

        return (self.lon, self.lat)

    @lon_lat.setter
    def lon_lat(self, value: Sequence[float]) -> None:
        lon, lat = value
        self._update_coordinates({0: lat, 1: lon})

    @property
    def lng_lat(self) -> tuple[float, float]:
        return self.lon_lat

    @lng_lat.setter
    def lng_lat(self, value: Sequence[float]) -> None:
        self.lon_lat = value
