"""Discovery service composing filtering, proximity search, paging and framing."""

import logging
from collections.abc import Iterable, Sequence

from bike_discovery.application.services.pagination import (
    normalize_page_number,
    paginate,
    sort_by_numeric_key,
    total_pages,
)
from bike_discovery.application.services.proximity_search import find_progressively
from bike_discovery.application.services.viewport import network_viewport, station_viewport
from bike_discovery.domain.models.discovery_result import DiscoveryResult
from bike_discovery.domain.models.filter_criteria import FilterCriteria
from bike_discovery.domain.models.geo_point import GeoPoint
from bike_discovery.domain.models.network import Network
from bike_discovery.domain.models.page import Page
from bike_discovery.domain.models.proximity_result import (
    DEFAULT_SEARCH_RADII_KM,
    NO_LOCATION_RADIUS,
)
from bike_discovery.domain.models.sorting import NetworkSortKey, SortDirection, StationSortKey
from bike_discovery.domain.models.station import Station

logger = logging.getLogger(__name__)


def _page_of(items: Sequence, page_number: int, page_size: int) -> Page:
    return Page(
        items=tuple(paginate(items, page_number, page_size)),
        page_number=normalize_page_number(page_number),
        total_pages=total_pages(len(items), page_size),
        total_items=len(items),
    )


class DiscoveryService:
    """Service turning raw network and station lists into a page plus a camera."""

    def __init__(self, search_radii_km: Iterable[float] = DEFAULT_SEARCH_RADII_KM) -> None:
        """Initialize with the radius ladder used for proximity searches."""
        self._search_radii_km = tuple(search_radii_km)

    @property
    def search_radii_km(self) -> tuple[float, ...]:
        """Radius ladder tried, in kilometers."""
        return self._search_radii_km

    def discover_networks(
        self,
        networks: Sequence[Network],
        criteria: FilterCriteria,
        user_position: GeoPoint | None,
        page_number: int,
        page_size: int,
        sort_key: NetworkSortKey | None = None,
        sort_direction: SortDirection | str = SortDirection.ASC,
    ) -> DiscoveryResult[Network]:
        """Filter, rank and page a network list.

        The viewport frames the whole result set, not only the current page, so
        the map keeps showing every match while the list is paged.
        """
        result = find_progressively(networks, user_position, criteria, self._search_radii_km)
        ordered = sort_by_numeric_key(result.networks, sort_key, sort_direction)

        page = _page_of(ordered, page_number, page_size)
        viewport = network_viewport(ordered, user_position, result.search_radius_km)

        logger.debug(
            f"Discovered {page.total_items} network(s) at radius {result.search_radius_km}, "
            f"page {page.page_number}/{page.total_pages}"
        )
        return DiscoveryResult(
            page=page, viewport=viewport, search_radius_km=result.search_radius_km
        )

    def discover_stations(
        self,
        stations: Sequence[Station],
        page_number: int,
        page_size: int,
        sort_key: StationSortKey | None = None,
        sort_direction: SortDirection | str = SortDirection.DESC,
    ) -> DiscoveryResult[Station]:
        """Sort and page the stations of one network and frame all of them."""
        ordered = sort_by_numeric_key(stations, sort_key, sort_direction)
        page = _page_of(ordered, page_number, page_size)
        return DiscoveryResult(
            page=page,
            viewport=station_viewport(stations),
            search_radius_km=NO_LOCATION_RADIUS,
        )


def discover(
    networks: Sequence[Network],
    stations: Sequence[Station] | None,
    criteria: FilterCriteria,
    user_position: GeoPoint | None,
    page_number: int,
    page_size: int,
    sort_key: NetworkSortKey | StationSortKey | None = None,
    sort_direction: SortDirection | str | None = None,
    search_radii_km: Iterable[float] = DEFAULT_SEARCH_RADII_KM,
) -> DiscoveryResult:
    """Single entry point for the presentation layer.

    When ``stations`` is given the per-network station view is produced, which has
    no geospatial filtering. Otherwise the network list view is produced.
    """
    service = DiscoveryService(search_radii_km)
    if stations is not None:
        return service.discover_stations(
            stations,
            page_number,
            page_size,
            sort_key=sort_key if isinstance(sort_key, StationSortKey) else None,
            sort_direction=sort_direction or SortDirection.DESC,
        )
    return service.discover_networks(
        networks,
        criteria,
        user_position,
        page_number,
        page_size,
        sort_key=sort_key if isinstance(sort_key, NetworkSortKey) else None,
        sort_direction=sort_direction or SortDirection.ASC,
    )
