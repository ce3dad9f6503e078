"""CityBikes network repository adapter."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import aiohttp

from bike_discovery.adapters.citybikes_api.constants import (
    CITYBIKES_BASE_URL,
    NETWORKS_PATH,
    network_detail_path,
)
from bike_discovery.adapters.citybikes_api.network_parser import (
    parse_network_stations,
    parse_networks,
)
from bike_discovery.domain.models.network import Network
from bike_discovery.domain.models.station import Station
from bike_discovery.domain.ports.network_repository import NetworkRepository

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


class CityBikesNetworkRepository(NetworkRepository):
    """Adapter fetching networks and stations from the CityBikes v2 API.

    Failures are logged and reported as "no data": an empty network list or
    None for a network's stations.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = CITYBIKES_BASE_URL,
        timeout_seconds: int = 10,
        fields: Sequence[str] | None = None,
    ) -> None:
        """Initialize with optional aiohttp session and a field projection for list calls."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._fields = tuple(fields) if fields else ()

    async def _get_json(self, path: str, params: dict[str, str] | None = None) -> Any | None:
        """GET a JSON document, returning None on any HTTP or transport failure."""
        if not self._session:
            return None

        url = f"{self._base_url}{path}"
        try:
            async with self._session.get(url, params=params, timeout=self._timeout) as response:
                return await self._handle_response(response, url)
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Error requesting CityBikes API {url}: {e}")
            return None

    async def _handle_response(self, response: "ClientResponse", url: str) -> Any | None:
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"CityBikes API returned status {response.status} for {url}: {response_text[:200]}"
            )
            return None
        try:
            return await response.json()
        except (aiohttp.ContentTypeError, ValueError) as e:
            logger.warning(f"CityBikes API returned invalid JSON for {url}: {e}")
            return None

    async def list_networks(self) -> list[Network]:
        """Return every network known to CityBikes."""
        params = {"fields": ",".join(self._fields)} if self._fields else None
        payload = await self._get_json(NETWORKS_PATH, params=params)
        if payload is None:
            return []

        networks = parse_networks(payload)
        logger.info(f"Fetched {len(networks)} network(s) from CityBikes")
        return networks

    async def get_network_stations(self, network_id: str) -> list[Station] | None:
        """Return the stations of a network, or None if the network is unavailable."""
        payload = await self._get_json(network_detail_path(network_id))
        if payload is None:
            return None
        return parse_network_stations(payload)
