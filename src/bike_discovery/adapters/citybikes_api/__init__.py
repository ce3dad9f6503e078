"""CityBikes API adapters."""

from bike_discovery.adapters.citybikes_api.citybikes_network_repository import (
    CityBikesNetworkRepository,
)

__all__ = ["CityBikesNetworkRepository"]
