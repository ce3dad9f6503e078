"""Network repository port."""

from typing import Protocol

from bike_discovery.domain.models.network import Network
from bike_discovery.domain.models.station import Station


class NetworkRepository(Protocol):
    """Port for retrieving bike-sharing networks and their stations."""

    async def list_networks(self) -> list[Network]:
        """Return every known network. An unavailable source yields an empty list."""
        ...

    async def get_network_stations(self, network_id: str) -> list[Station] | None:
        """Return the stations of a network, or None if the network is unavailable."""
        ...
