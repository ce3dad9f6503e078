"""Expanding-radius search for networks around a user position."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from bike_discovery.application.services.attribute_filter import filter_by_attributes
from bike_discovery.application.services.distance import distance_km
from bike_discovery.domain.models.filter_criteria import FilterCriteria
from bike_discovery.domain.models.geo_point import GeoPoint
from bike_discovery.domain.models.network import Network
from bike_discovery.domain.models.proximity_result import (
    FALLBACK_RADIUS,
    NO_LOCATION_RADIUS,
    ProximityResult,
)

logger = logging.getLogger(__name__)


def rank_by_distance(networks: Sequence[Network], user_position: GeoPoint) -> list[Network]:
    """Return copies of the networks carrying ``distance_km``, closest first.

    Networks at the same distance keep their input order.
    """
    ranked = [
        replace(network, distance_km=distance_km(user_position, network.location))
        for network in networks
    ]
    ranked.sort(key=lambda n: n.distance_km)
    return ranked


def networks_within_radius(ranked: Sequence[Network], radius_km: float) -> list[Network]:
    """Return the ranked networks whose distance is at most ``radius_km`` (inclusive)."""
    return [n for n in ranked if n.distance_km is not None and n.distance_km <= radius_km]


def _ascending_ladder(radii_km: Iterable[float]) -> list[float]:
    # 0 and -1 are reserved result markers, never valid tiers
    return sorted(r for r in radii_km if r > 0)


def find_progressively(
    networks: Sequence[Network],
    user_position: GeoPoint | None,
    criteria: FilterCriteria,
    radii_km: Iterable[float],
) -> ProximityResult:
    """Find networks near a position, widening the radius until something matches.

    The attribute filter is applied first. Without a position the filtered list is
    returned unranked with radius 0. Otherwise the first radius of the ascending
    ladder that contains at least one network wins. When no radius matches, every
    filtered network is returned closest first with radius -1, so a non-empty
    filtered list never produces an empty result.
    """
    base = filter_by_attributes(networks, criteria)

    if user_position is None:
        return ProximityResult(networks=tuple(base), search_radius_km=NO_LOCATION_RADIUS)

    ranked = rank_by_distance(base, user_position)

    for radius in _ascending_ladder(radii_km):
        nearby = networks_within_radius(ranked, radius)
        if nearby:
            logger.debug(f"Found {len(nearby)} network(s) within {radius}km")
            return ProximityResult(networks=tuple(nearby), search_radius_km=radius)

    logger.debug(
        f"No network within any search radius, falling back to all {len(ranked)} by distance"
    )
    return ProximityResult(networks=tuple(ranked), search_radius_km=FALLBACK_RADIUS)
