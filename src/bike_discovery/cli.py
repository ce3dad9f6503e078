"""Command line interface for discovering bike-sharing networks and stations."""

import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from bike_discovery.adapters.citybikes_api import CityBikesNetworkRepository
from bike_discovery.adapters.config import AppConfig
from bike_discovery.adapters.formatters import DiscoveryFormatter
from bike_discovery.adapters.query_params import parse_page_number, parse_user_position
from bike_discovery.application.services import (
    DiscoveryService,
    networks_to_feature_collection,
    pagination_range,
    stations_to_feature_collection,
)
from bike_discovery.domain.exceptions import BikeDiscoveryError, NetworkNotFoundError
from bike_discovery.domain.models import (
    DiscoveryResult,
    FilterCriteria,
    GeoPoint,
    SortDirection,
    Station,
    StationSortKey,
)
from bike_discovery.domain.ports import NetworkRepository

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def page_feature_collection(result: DiscoveryResult) -> dict[str, Any]:
    """Return the items of the current page as a GeoJSON FeatureCollection."""
    items = result.page.items
    if items and isinstance(items[0], Station):
        return stations_to_feature_collection(items)
    return networks_to_feature_collection(items)


def print_result(
    result: DiscoveryResult, formatter: DiscoveryFormatter, format_json: bool
) -> None:
    """Print a result page as text or JSON."""
    if format_json:
        print(json.dumps(formatter.to_dict(result), indent=2, ensure_ascii=False))
        return

    page = result.page
    radius_text = formatter.describe_search_radius(result.search_radius_km)
    if radius_text:
        print(radius_text)
    print(
        f"\nFound {page.total_items} result(s), page {page.page_number} of {page.total_pages}:\n"
    )
    for item in page.items:
        if isinstance(item, Station):
            print(f"  {formatter.format_station(item)}")
        else:
            print(f"  {formatter.format_network(item)}")
    if page.total_pages > 1:
        page_range = pagination_range(page.page_number, page.total_pages)
        print(f"\nPages: {formatter.format_page_strip(page_range, page.page_number)}")
    print(formatter.format_viewport(result.viewport))


async def discover_networks(
    repository: NetworkRepository,
    service: DiscoveryService,
    criteria: FilterCriteria,
    user_position: GeoPoint | None,
    page_number: int,
    page_size: int,
) -> DiscoveryResult:
    """Fetch all networks and run the network discovery pipeline over them."""
    networks = await repository.list_networks()
    if not networks:
        logger.warning("No network data available")
    return service.discover_networks(networks, criteria, user_position, page_number, page_size)


async def discover_stations(
    repository: NetworkRepository,
    service: DiscoveryService,
    network_id: str,
    page_number: int,
    page_size: int,
    sort_key: StationSortKey | None,
    sort_direction: SortDirection,
) -> DiscoveryResult:
    """Fetch a network's stations and run the station pipeline over them."""
    stations = await repository.get_network_stations(network_id)
    if stations is None:
        raise NetworkNotFoundError(network_id)
    return service.discover_stations(stations, page_number, page_size, sort_key, sort_direction)


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Bike-sharing network discovery",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List French networks matching "velib"
  bike-discovery networks --country FR --search velib

  # Networks closest to Paris
  bike-discovery networks --lat 48.85 --lng 2.35

  # Stations of a network with the most free bikes first
  bike-discovery stations velib --sort-key free_bikes --sort-direction desc
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    networks_parser = subparsers.add_parser("networks", help="List networks")
    networks_parser.add_argument("--country", help="Country code filter (e.g., FR)")
    networks_parser.add_argument("--search", help="Search term over name and operators")
    networks_parser.add_argument("--lat", help="Your latitude for a nearby search")
    networks_parser.add_argument("--lng", help="Your longitude for a nearby search")
    networks_parser.add_argument("--page", default="1", help="Page number (default: 1)")
    networks_parser.add_argument("--page-size", type=int, help="Networks per page")
    networks_parser.add_argument("--json", action="store_true", help="Output as JSON")
    networks_parser.add_argument(
        "--geojson", action="store_true", help="Output the page as a GeoJSON FeatureCollection"
    )

    stations_parser = subparsers.add_parser("stations", help="List stations of a network")
    stations_parser.add_argument("network_id", help="Network ID (e.g., velib)")
    stations_parser.add_argument(
        "--sort-key", choices=[k.value for k in StationSortKey], help="Sort stations by"
    )
    stations_parser.add_argument(
        "--sort-direction", choices=[d.value for d in SortDirection], help="Sort direction"
    )
    stations_parser.add_argument("--page", default="1", help="Page number (default: 1)")
    stations_parser.add_argument("--page-size", type=int, help="Stations per page")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")
    stations_parser.add_argument(
        "--geojson", action="store_true", help="Output the page as a GeoJSON FeatureCollection"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        config.load_toml_overrides()
        configure_logging(config.log_level)

        service = DiscoveryService(config.search_radii_km)
        formatter = DiscoveryFormatter()
        page_number = parse_page_number(args.page)

        async with aiohttp.ClientSession() as session:
            repository = CityBikesNetworkRepository(
                session=session,
                base_url=config.citybikes_api_url,
                timeout_seconds=config.api_timeout_seconds,
            )

            if args.command == "networks":
                result = await discover_networks(
                    repository,
                    service,
                    FilterCriteria(country_code=args.country, search_term=args.search),
                    parse_user_position(args.lat, args.lng),
                    page_number,
                    args.page_size or config.networks_per_page,
                )
            else:
                result = await discover_stations(
                    repository,
                    service,
                    args.network_id,
                    page_number,
                    args.page_size or config.stations_per_page,
                    StationSortKey(args.sort_key) if args.sort_key else None,
                    SortDirection(args.sort_direction or config.default_station_sort_direction),
                )

        if args.geojson:
            print(json.dumps(page_feature_collection(result), indent=2, ensure_ascii=False))
        else:
            print_result(result, formatter, format_json=args.json)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (BikeDiscoveryError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
