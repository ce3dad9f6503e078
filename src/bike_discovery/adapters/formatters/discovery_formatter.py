"""Formatter for discovery results shown on the command line."""

from dataclasses import asdict
from typing import Any

from bike_discovery.domain.models.discovery_result import DiscoveryResult
from bike_discovery.domain.models.network import Network
from bike_discovery.domain.models.proximity_result import FALLBACK_RADIUS
from bike_discovery.domain.models.station import Station
from bike_discovery.domain.models.viewport import ViewportSpec


class DiscoveryFormatter:
    """Formatter for network and station result pages."""

    def describe_search_radius(self, search_radius_km: float) -> str | None:
        """Describe which radius produced the result, or None when no geo search ran."""
        if search_radius_km == FALLBACK_RADIUS:
            return "Showing all networks (no networks found nearby)"
        if search_radius_km <= 0:
            return None
        return f"Showing networks within {search_radius_km:g}km"

    def format_network(self, network: Network) -> str:
        """Format a network as a single listing line."""
        operators = ", ".join(network.operators) or "Unknown operator"
        line = (
            f"{network.name} ({network.location.city}, {network.location.country_code})"
            f" - {operators} [{network.id}]"
        )
        if network.distance_km is not None:
            line += f" {network.distance_km:.1f}km"
        return line

    def format_station(self, station: Station) -> str:
        """Format a station as a single listing line with its bike and slot counts."""
        free_bikes = "N/A" if station.free_bikes is None else station.free_bikes
        empty_slots = "N/A" if station.empty_slots is None else station.empty_slots
        return f"{station.name}: {free_bikes} bikes, {empty_slots} free slots [{station.id}]"

    def format_viewport(self, viewport: ViewportSpec) -> str:
        """Format the camera parameters."""
        if viewport.bounds is None:
            return f"Viewport: no bounds (max zoom {viewport.max_zoom})"
        min_lon, min_lat, max_lon, max_lat = viewport.bounds.as_tuple()
        return (
            f"Viewport: [{min_lon:.4f}, {min_lat:.4f}] - [{max_lon:.4f}, {max_lat:.4f}]"
            f" (max zoom {viewport.max_zoom}, padding {viewport.padding_px}px)"
        )

    def format_page_strip(self, page_range: list[int | str], current_page: int) -> str:
        """Format a page-number strip, marking the current page."""
        return " ".join(
            f"[{entry}]" if entry == current_page else str(entry) for entry in page_range
        )

    def to_dict(self, result: DiscoveryResult) -> dict[str, Any]:
        """Convert a result into a JSON-serializable dict."""
        return {
            "items": [asdict(item) for item in result.page.items],
            "page_number": result.page.page_number,
            "total_pages": result.page.total_pages,
            "total_items": result.page.total_items,
            "search_radius_km": result.search_radius_km,
            "viewport": result.viewport.model_dump(),
        }
