from .geo_params import GeoParams
from .geo_url import GeoURL
from .wgs84_geo_url import WGS84GeoURL

__all__ = [
    "GeoParams",
    "GeoURL",
    "WGS84GeoURL",
]
