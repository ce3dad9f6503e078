"""Domain layer - core models and ports."""

from bike_discovery.domain.exceptions import (
    BikeDiscoveryError,
    InvalidCoordinateError,
    NetworkNotFoundError,
)
from bike_discovery.domain.models import (
    FilterCriteria,
    GeoPoint,
    Network,
    Station,
)
from bike_discovery.domain.ports import NetworkRepository

__all__ = [
    "BikeDiscoveryError",
    "FilterCriteria",
    "GeoPoint",
    "InvalidCoordinateError",
    "Network",
    "NetworkNotFoundError",
    "NetworkRepository",
    "Station",
]
