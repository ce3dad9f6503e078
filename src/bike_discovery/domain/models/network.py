"""Network domain model."""

from collections.abc import Iterable
from dataclasses import dataclass

from bike_discovery.domain.models.geo_point import GeoPoint


def normalize_operators(raw: str | Iterable[str | None] | None) -> tuple[str, ...]:
    """Normalize an operator field that may be a single name or a list of names.

    Falsy entries are dropped, so ``None``, ``""`` and ``[None, ""]`` all become ``()``.
    """
    if not raw:
        return ()
    if isinstance(raw, str):
        return (raw,)
    return tuple(str(name) for name in raw if name)


@dataclass(frozen=True)
class NetworkLocation(GeoPoint):
    """Primary location of a bike-sharing network."""

    city: str = ""
    country_code: str = ""  # As delivered by the data source (e.g. "FR", "US")


@dataclass(frozen=True)
class Network:
    """Represents a bike-sharing system in one city or region."""

    id: str
    name: str
    operators: tuple[str, ...]  # Canonical shape, see normalize_operators
    location: NetworkLocation
    href: str | None = None
    distance_km: float | None = None  # Only set on copies ranked by the proximity search
