"""Application services - the discovery pipeline stages."""

from bike_discovery.application.services.attribute_filter import filter_by_attributes
from bike_discovery.application.services.discovery_service import DiscoveryService, discover
from bike_discovery.application.services.distance import EARTH_RADIUS_KM, distance_km
from bike_discovery.application.services.geojson import (
    networks_to_feature_collection,
    stations_to_feature_collection,
)
from bike_discovery.application.services.pagination import (
    DOTS,
    normalize_page_number,
    paginate,
    pagination_range,
    sort_by_numeric_key,
    total_pages,
)
from bike_discovery.application.services.proximity_search import (
    find_progressively,
    networks_within_radius,
    rank_by_distance,
)
from bike_discovery.application.services.viewport import (
    compute_bounds,
    estimate_zoom_level,
    network_viewport,
    pad_bounds,
    station_viewport,
    zoom_config,
)

__all__ = [
    "DOTS",
    "EARTH_RADIUS_KM",
    "DiscoveryService",
    "compute_bounds",
    "discover",
    "distance_km",
    "estimate_zoom_level",
    "filter_by_attributes",
    "find_progressively",
    "network_viewport",
    "networks_to_feature_collection",
    "networks_within_radius",
    "normalize_page_number",
    "pad_bounds",
    "paginate",
    "pagination_range",
    "rank_by_distance",
    "sort_by_numeric_key",
    "station_viewport",
    "stations_to_feature_collection",
    "total_pages",
    "zoom_config",
]
