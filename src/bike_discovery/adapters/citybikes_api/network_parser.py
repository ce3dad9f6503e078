"""Parsing of CityBikes API payloads into domain models."""

import logging
from typing import Any

from bike_discovery.domain.exceptions import InvalidCoordinateError
from bike_discovery.domain.models.geo_point import GeoPoint
from bike_discovery.domain.models.network import Network, NetworkLocation, normalize_operators
from bike_discovery.domain.models.station import Station

logger = logging.getLogger(__name__)


def _optional_count(value: Any) -> int | None:
    """Return a non-negative int count, or None when missing or unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        count = int(value)
    except (TypeError, ValueError):
        return None
    return count if count >= 0 else None


def parse_network(data: Any) -> Network | None:
    """Parse one network summary, or return None if it is unusable."""
    if not isinstance(data, dict):
        return None

    network_id = str(data.get("id") or "")
    if not network_id:
        logger.warning("Skipping network without id")
        return None

    location = data.get("location") or {}
    try:
        network_location = NetworkLocation(
            latitude=float(location["latitude"]),
            longitude=float(location["longitude"]),
            city=location.get("city") or "",
            country_code=location.get("country") or "",
        )
    except (KeyError, TypeError, InvalidCoordinateError, ValueError) as e:
        logger.warning(f"Skipping network {network_id} with unusable location: {e}")
        return None

    return Network(
        id=network_id,
        name=data.get("name") or network_id,
        operators=normalize_operators(data.get("company")),
        location=network_location,
        href=data.get("href"),
    )


def parse_networks(payload: Any) -> list[Network]:
    """Parse the /networks response body."""
    raw_networks = payload.get("networks", []) if isinstance(payload, dict) else []
    if not isinstance(raw_networks, list):
        return []

    networks = []
    for raw in raw_networks:
        network = parse_network(raw)
        if network is not None:
            networks.append(network)

    skipped = len(raw_networks) - len(networks)
    if skipped:
        logger.warning(f"Skipped {skipped} unusable network(s) out of {len(raw_networks)}")
    return networks


def parse_station(data: Any) -> Station | None:
    """Parse one station, or return None if it is unusable."""
    if not isinstance(data, dict):
        return None

    station_id = str(data.get("id") or "")
    if not station_id:
        return None

    try:
        position = GeoPoint(
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
        )
    except (KeyError, TypeError, InvalidCoordinateError, ValueError) as e:
        logger.warning(f"Skipping station {station_id} with unusable position: {e}")
        return None

    return Station(
        id=station_id,
        name=data.get("name") or station_id,
        position=position,
        free_bikes=_optional_count(data.get("free_bikes")),
        empty_slots=_optional_count(data.get("empty_slots")),
        timestamp=data.get("timestamp"),
    )


def parse_network_stations(payload: Any) -> list[Station] | None:
    """Parse the /networks/:id response body into its stations.

    Returns None when the payload holds no network at all.
    """
    network = payload.get("network") if isinstance(payload, dict) else None
    if not isinstance(network, dict):
        return None

    raw_stations = network.get("stations") or []
    stations = [s for s in (parse_station(raw) for raw in raw_stations) if s is not None]
    logger.debug(f"Parsed {len(stations)} station(s) for network {network.get('id')}")
    return stations
