"""Country and free-text filtering of network lists."""

import logging
from collections.abc import Sequence

from bike_discovery.domain.models.filter_criteria import FilterCriteria
from bike_discovery.domain.models.network import Network, normalize_operators

logger = logging.getLogger(__name__)


def _matches_country(network: Network, country_code: str) -> bool:
    return network.location.country_code.upper() == country_code.upper()


def _matches_search_term(network: Network, search_term: str) -> bool:
    if search_term in network.name.lower():
        return True
    operators = normalize_operators(network.operators)
    return any(search_term in operator.lower() for operator in operators)


def filter_by_attributes(networks: Sequence[Network], criteria: FilterCriteria) -> list[Network]:
    """Filter networks by country code and a search term over name and operators.

    Both filters are case-insensitive and ANDed. The relative order of surviving
    networks is kept. A new list is always returned, the input is never modified.
    """
    country_code = (criteria.country_code or "").strip()
    search_term = (criteria.search_term or "").strip().lower()

    if not country_code and not search_term:
        return list(networks)

    result = list(networks)
    if country_code:
        result = [n for n in result if _matches_country(n, country_code)]
    if search_term:
        result = [n for n in result if _matches_search_term(n, search_term)]

    logger.debug(
        f"Attribute filter kept {len(result)} of {len(networks)} networks "
        f"(country={country_code or '-'}, search={search_term or '-'})"
    )
    return result
