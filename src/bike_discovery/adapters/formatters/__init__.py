"""Formatters for presenting discovery results."""

from bike_discovery.adapters.formatters.discovery_formatter import DiscoveryFormatter

__all__ = ["DiscoveryFormatter"]
