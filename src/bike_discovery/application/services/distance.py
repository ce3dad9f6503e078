"""Great-circle distance between geographic points."""

from math import atan2, cos, radians, sin, sqrt

from bike_discovery.domain.models.geo_point import GeoPoint

EARTH_RADIUS_KM = 6371.0


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Return the haversine distance in kilometers between two points."""
    lat1 = radians(a.latitude)
    lat2 = radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = radians(b.longitude - a.longitude)

    h = sin(d_lat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(d_lon / 2) ** 2
    # Rounding can push h just past 1 for near-antipodal points
    h = min(h, 1.0)
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_KM * c
