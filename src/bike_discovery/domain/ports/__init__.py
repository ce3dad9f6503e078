"""Ports (interfaces) for the ports-and-adapters architecture."""

from bike_discovery.domain.ports.network_repository import NetworkRepository

__all__ = [
    "NetworkRepository",
]
