"""Bounding boxes and camera limits for framing a result set on a map."""

import logging
from collections.abc import Iterable

from bike_discovery.domain.models.geo_point import GeoPoint
from bike_discovery.domain.models.network import Network
from bike_discovery.domain.models.proximity_result import FALLBACK_RADIUS
from bike_discovery.domain.models.station import Station
from bike_discovery.domain.models.viewport import Bounds, ViewportSpec, ZoomConfig

logger = logging.getLogger(__name__)

MAX_ZOOM = 15
DEFAULT_PADDING_PX = 50
BOUNDS_PADDING_RATIO = 0.1

# (minimum radius in km, max zoom, padding in px), checked top to bottom
_RADIUS_ZOOM_LADDER: tuple[tuple[float, int, int], ...] = (
    (200, 9, 60),
    (100, 10, 50),
    (50, 11, 40),
    (20, 12, 40),
)
_FALLBACK_ZOOM = ZoomConfig(max_zoom=8, padding_px=60)
_CLOSE_RANGE_ZOOM = ZoomConfig(max_zoom=13, padding_px=30)
_CLOSE_RANGE_KM = 10

# (maximum span in degrees, zoom), checked top to bottom
_SPAN_ZOOM_LADDER: tuple[tuple[float, int], ...] = (
    (0.01, 14),
    (0.05, 13),
    (0.1, 12),
    (0.5, 10),
    (1, 8),
)
_WIDE_SPAN_ZOOM = 6


def _as_point(item: Network | Station | GeoPoint) -> GeoPoint:
    if isinstance(item, Network):
        return item.location
    if isinstance(item, Station):
        return item.position
    return item


def compute_bounds(
    items: Iterable[Network | Station | GeoPoint], user_position: GeoPoint | None = None
) -> Bounds | None:
    """Return the box enclosing every item and the user's position, if given.

    Returns None when there is nothing to enclose. A single point yields a
    zero-area box.
    """
    points = [_as_point(item) for item in items]
    if user_position is not None:
        points.append(user_position)
    if not points:
        return None

    return Bounds(
        min_lon=min(p.longitude for p in points),
        min_lat=min(p.latitude for p in points),
        max_lon=max(p.longitude for p in points),
        max_lat=max(p.latitude for p in points),
    )


def pad_bounds(bounds: Bounds, ratio: float = BOUNDS_PADDING_RATIO) -> Bounds:
    """Grow each axis of the box by ``ratio`` of its span on both sides."""
    lon_padding = (bounds.max_lon - bounds.min_lon) * ratio
    lat_padding = (bounds.max_lat - bounds.min_lat) * ratio
    return Bounds(
        min_lon=bounds.min_lon - lon_padding,
        min_lat=bounds.min_lat - lat_padding,
        max_lon=bounds.max_lon + lon_padding,
        max_lat=bounds.max_lat + lat_padding,
    )


def estimate_zoom_level(bounds: Bounds) -> int:
    """Estimate a zoom level able to show the whole box, from its widest span."""
    max_span = max(bounds.max_lat - bounds.min_lat, bounds.max_lon - bounds.min_lon)
    for span_limit, zoom in _SPAN_ZOOM_LADDER:
        if max_span < span_limit:
            return zoom
    return _WIDE_SPAN_ZOOM


def _single_result_zoom(config: ZoomConfig, result_count: int) -> ZoomConfig:
    if result_count != 1:
        return config
    return ZoomConfig(max_zoom=min(config.max_zoom + 1, MAX_ZOOM), padding_px=config.padding_px)


def zoom_config(search_radius_km: float, result_count: int) -> ZoomConfig:
    """Return camera limits for a result set found at the given search radius.

    Wider radii zoom out further. Radius -1 (no tier matched, everything shown)
    zooms out the most, radius 0 (no geo search) uses the default. A single
    result gets one extra zoom level, capped at the maximum.
    """
    if search_radius_km == FALLBACK_RADIUS:
        config = _FALLBACK_ZOOM
    elif 0 < search_radius_km <= _CLOSE_RANGE_KM:
        config = _CLOSE_RANGE_ZOOM
    else:
        config = ZoomConfig(max_zoom=MAX_ZOOM, padding_px=DEFAULT_PADDING_PX)
        for min_radius, max_zoom, padding_px in _RADIUS_ZOOM_LADDER:
            if search_radius_km >= min_radius:
                config = ZoomConfig(max_zoom=max_zoom, padding_px=padding_px)
                break

    return _single_result_zoom(config, result_count)


def network_viewport(
    networks: Iterable[Network], user_position: GeoPoint | None, search_radius_km: float
) -> ViewportSpec:
    """Frame a network result set and the user's position."""
    networks = list(networks)
    config = zoom_config(search_radius_km, len(networks))
    bounds = compute_bounds(networks, user_position)
    logger.debug(f"Network viewport: bounds={bounds}, zoom={config.max_zoom}")
    return ViewportSpec(bounds=bounds, max_zoom=config.max_zoom, padding_px=config.padding_px)


def station_viewport(stations: Iterable[Station]) -> ViewportSpec:
    """Frame every station of a network, zoomed to fit their spread."""
    stations = list(stations)
    bounds = compute_bounds(stations)
    if bounds is None:
        return ViewportSpec(bounds=None, max_zoom=MAX_ZOOM, padding_px=DEFAULT_PADDING_PX)

    padded = pad_bounds(bounds)
    config = _single_result_zoom(
        ZoomConfig(max_zoom=estimate_zoom_level(padded), padding_px=DEFAULT_PADDING_PX),
        len(stations),
    )
    return ViewportSpec(bounds=padded, max_zoom=config.max_zoom, padding_px=config.padding_px)
