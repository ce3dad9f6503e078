"""Proximity search result domain model."""

from dataclasses import dataclass

from bike_discovery.domain.models.network import Network

# Radius reported when no user position was supplied and no geo filtering happened
NO_LOCATION_RADIUS = 0.0
# Radius reported when no ladder tier matched and every network is returned closest first
FALLBACK_RADIUS = -1.0

DEFAULT_SEARCH_RADII_KM: tuple[float, ...] = (10.0, 50.0, 100.0, 200.0)


@dataclass(frozen=True)
class ProximityResult:
    """Networks found by a progressive search and the radius that produced them."""

    networks: tuple[Network, ...]
    search_radius_km: float

    @property
    def is_fallback(self) -> bool:
        """Return True when no radius matched and all networks were returned."""
        return self.search_radius_km == FALLBACK_RADIUS
