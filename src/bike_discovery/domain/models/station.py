"""Station domain model."""

from dataclasses import dataclass

from bike_discovery.domain.models.geo_point import GeoPoint


@dataclass(frozen=True)
class Station:
    """Represents a docking station within a bike-sharing network."""

    id: str
    name: str
    position: GeoPoint
    free_bikes: int | None = None
    empty_slots: int | None = None
    timestamp: str | None = None
