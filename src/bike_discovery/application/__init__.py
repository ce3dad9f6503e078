"""Application layer - pure discovery pipeline over in-memory data."""

from bike_discovery.application.services import DiscoveryService, discover

__all__ = ["DiscoveryService", "discover"]
