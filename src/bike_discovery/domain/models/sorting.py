"""Sort key and direction types."""

from enum import Enum


class SortDirection(str, Enum):
    """Direction of a numeric sort."""

    ASC = "asc"
    DESC = "desc"


class StationSortKey(str, Enum):
    """Numeric station attributes a station list can be sorted by."""

    FREE_BIKES = "free_bikes"
    EMPTY_SLOTS = "empty_slots"


class NetworkSortKey(str, Enum):
    """Numeric network attributes a network list can be sorted by."""

    DISTANCE_KM = "distance_km"
