"""GeoJSON feature collections for map sources."""

from collections.abc import Iterable
from typing import Any

from bike_discovery.domain.models.network import Network
from bike_discovery.domain.models.station import Station


def _point(longitude: float, latitude: float) -> dict[str, Any]:
    return {"type": "Point", "coordinates": [longitude, latitude]}


def networks_to_feature_collection(networks: Iterable[Network]) -> dict[str, Any]:
    """Build a FeatureCollection with one point per network."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": _point(network.location.longitude, network.location.latitude),
                "properties": {
                    "id": network.id,
                    "name": network.name,
                    "city": network.location.city,
                    "country": network.location.country_code,
                },
            }
            for network in networks
        ],
    }


def stations_to_feature_collection(stations: Iterable[Station] | None) -> dict[str, Any]:
    """Build a FeatureCollection with one point per station, keyed by station id."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": station.id,
                "geometry": _point(station.position.longitude, station.position.latitude),
                "properties": {
                    "id": station.id,
                    "name": station.name,
                    "free_bikes": station.free_bikes,
                    "empty_slots": station.empty_slots,
                },
            }
            for station in stations or ()
        ],
    }
