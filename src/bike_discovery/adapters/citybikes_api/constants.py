"""Constants for the CityBikes API adapter.

Uses the CityBikes v2 public API.
API Documentation: https://api.citybik.es/v2/

No authentication required.
"""

CITYBIKES_BASE_URL = "https://api.citybik.es/v2"
NETWORKS_PATH = "/networks"  # GET /networks?fields=...


def network_detail_path(network_id: str) -> str:
    """Return the path of a network detail resource (GET /networks/:id)."""
    return f"{NETWORKS_PATH}/{network_id}"
