"""Adapters layer - external system integrations."""

from bike_discovery.adapters.citybikes_api import CityBikesNetworkRepository
from bike_discovery.adapters.config import AppConfig

__all__ = [
    "AppConfig",
    "CityBikesNetworkRepository",
]
