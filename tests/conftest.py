"""Shared fixtures for discovery tests."""

import math
from collections.abc import Callable

import pytest

from bike_discovery.application.services.distance import EARTH_RADIUS_KM
from bike_discovery.domain.models import GeoPoint, Network, NetworkLocation, Station

PARIS = GeoPoint(latitude=48.85, longitude=2.35)

# Kilometers per degree of latitude along a meridian on the haversine sphere
KM_PER_DEGREE_LAT = EARTH_RADIUS_KM * math.pi / 180


def point_north_of(origin: GeoPoint, km: float) -> GeoPoint:
    """Return the point km kilometers due north of origin."""
    return GeoPoint(latitude=origin.latitude + km / KM_PER_DEGREE_LAT, longitude=origin.longitude)


@pytest.fixture
def north_of_paris() -> Callable[[float], GeoPoint]:
    """Factory for points a given number of kilometers north of Paris."""
    return lambda km: point_north_of(PARIS, km)


@pytest.fixture
def paris() -> GeoPoint:
    """User position in central Paris."""
    return PARIS


@pytest.fixture
def make_network() -> Callable[..., Network]:
    """Factory for networks with sensible defaults."""

    def _make(
        network_id: str,
        name: str | None = None,
        operators: tuple[str, ...] = (),
        country_code: str = "FR",
        city: str = "Paris",
        position: GeoPoint = PARIS,
    ) -> Network:
        return Network(
            id=network_id,
            name=name or network_id,
            operators=operators,
            location=NetworkLocation(
                latitude=position.latitude,
                longitude=position.longitude,
                city=city,
                country_code=country_code,
            ),
        )

    return _make


@pytest.fixture
def make_station() -> Callable[..., Station]:
    """Factory for stations with sensible defaults."""

    def _make(
        station_id: str,
        free_bikes: int | None = 0,
        empty_slots: int | None = 0,
        position: GeoPoint = PARIS,
    ) -> Station:
        return Station(
            id=station_id,
            name=f"Station {station_id}",
            position=position,
            free_bikes=free_bikes,
            empty_slots=empty_slots,
        )

    return _make
