"""Domain models for bike network discovery."""

from bike_discovery.domain.models.discovery_result import DiscoveryResult
from bike_discovery.domain.models.filter_criteria import FilterCriteria
from bike_discovery.domain.models.geo_point import GeoPoint
from bike_discovery.domain.models.network import Network, NetworkLocation, normalize_operators
from bike_discovery.domain.models.page import Page
from bike_discovery.domain.models.proximity_result import (
    DEFAULT_SEARCH_RADII_KM,
    FALLBACK_RADIUS,
    NO_LOCATION_RADIUS,
    ProximityResult,
)
from bike_discovery.domain.models.sorting import NetworkSortKey, SortDirection, StationSortKey
from bike_discovery.domain.models.station import Station
from bike_discovery.domain.models.viewport import Bounds, ViewportSpec, ZoomConfig

__all__ = [
    "DEFAULT_SEARCH_RADII_KM",
    "FALLBACK_RADIUS",
    "NO_LOCATION_RADIUS",
    "Bounds",
    "DiscoveryResult",
    "FilterCriteria",
    "GeoPoint",
    "Network",
    "NetworkLocation",
    "NetworkSortKey",
    "Page",
    "ProximityResult",
    "SortDirection",
    "Station",
    "StationSortKey",
    "ViewportSpec",
    "ZoomConfig",
    "normalize_operators",
]
