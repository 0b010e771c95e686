from __future__ import annotations

from pydantic import BaseModel, Field

from geouri.domain.models import GeoURL, WGS84GeoURL


class GeoURISchema(BaseModel):
    """JSON view of a geo URI in any CRS."""

    uri: str
    crs: str = "wgs84"
    coordinates: list[float] = Field(..., min_length=2, max_length=3)
    u: float | None = None
    z: float | None = None

    @classmethod
    def from_geo_url(cls, url: GeoURL) -> "GeoURISchema":
        return cls(
            uri=url.href,
            crs=url.crs,
            coordinates=url.coordinates,
            u=url.u,
            z=url.z,
        )

    def to_geo_url(self) -> GeoURL:
        """Rebuild the URI from the fields; ``uri`` itself isn't read."""

        url = GeoURL("geo:0,0")
        url.coordinates = self.coordinates
        url.crs = self.crs
        url.u = self.u
        url.z = self.z
        return url


class WGS84PointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)
    alt: float | None = None
    u: float | None = Field(None, ge=0.0)
    z: float | None = None

    @classmethod
    def from_geo_url(cls, url: WGS84GeoURL) -> "WGS84PointSchema":
        return cls(lat=url.lat, lon=url.lon, alt=url.alt, u=url.u, z=url.z)

    def to_geo_url(self) -> WGS84GeoURL:
        """Build a canonical geo URI: coordinates, then ``u``, then ``?z=``."""

        coordinates = [self.lat, self.lon]
        if self.alt is not None:
            coordinates.append(self.alt)

        url = WGS84GeoURL("geo:0,0")
        url.coordinates = coordinates
        url.u = self.u
        url.z = self.z
        return url
