from .geo import GeoURISchema, WGS84PointSchema

__all__ = ["GeoURISchema", "WGS84PointSchema"]
