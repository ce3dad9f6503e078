"""Parsing of URL-style query parameters into discovery inputs."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

from bike_discovery.domain.exceptions import InvalidCoordinateError
from bike_discovery.domain.models.filter_criteria import FilterCriteria
from bike_discovery.domain.models.geo_point import GeoPoint
from bike_discovery.domain.models.sorting import SortDirection, StationSortKey

COUNTRY = "country"
SEARCH = "search"
PAGE = "page"
LAT = "lat"
LNG = "lng"
SORT_KEY = "sort_key"
SORT_DIRECTION = "sort_direction"

# Older station detail links used these names
_SORT_KEY_ALIASES = (SORT_KEY, "sortBy")
_SORT_DIRECTION_ALIASES = (SORT_DIRECTION, "sortDir")


@dataclass(frozen=True)
class DiscoveryQuery:
    """Discovery inputs carried by a page URL."""

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    user_position: GeoPoint | None = None
    page_number: int = 1
    sort_key: StationSortKey | None = None
    sort_direction: SortDirection | None = None


def _first(params: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = params.get(name)
        if value:
            return value
    return None


def parse_page_number(raw: str | None) -> int:
    """Parse a page parameter, falling back to 1 for missing, invalid or < 1 values."""
    try:
        page = int(raw) if raw is not None else 1
    except ValueError:
        return 1
    return page if page >= 1 else 1


def parse_user_position(lat: str | None, lng: str | None) -> GeoPoint | None:
    """Parse a user position. Both coordinates must be present to form a position.

    Raises InvalidCoordinateError for values that are present but unusable.
    """
    if not lat or not lng:
        return None
    try:
        latitude = float(lat)
        longitude = float(lng)
    except ValueError as e:
        raise InvalidCoordinateError(lat, lng, "coordinates must be numeric") from e
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidCoordinateError(lat, lng, "coordinates must be finite")
    return GeoPoint(latitude=latitude, longitude=longitude)


def parse_discovery_query(params: Mapping[str, str]) -> DiscoveryQuery:
    """Build a DiscoveryQuery from query parameters, leniently.

    Unknown sort keys and directions are ignored rather than rejected.
    """
    sort_key_raw = _first(params, _SORT_KEY_ALIASES)
    sort_direction_raw = _first(params, _SORT_DIRECTION_ALIASES)

    sort_key = None
    if sort_key_raw in {k.value for k in StationSortKey}:
        sort_key = StationSortKey(sort_key_raw)

    sort_direction = None
    if sort_direction_raw and sort_direction_raw.lower() in {d.value for d in SortDirection}:
        sort_direction = SortDirection(sort_direction_raw.lower())

    return DiscoveryQuery(
        criteria=FilterCriteria(
            country_code=params.get(COUNTRY) or None,
            search_term=params.get(SEARCH) or None,
        ),
        user_position=parse_user_position(params.get(LAT), params.get(LNG)),
        page_number=parse_page_number(params.get(PAGE)),
        sort_key=sort_key,
        sort_direction=sort_direction,
    )
