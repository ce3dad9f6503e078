"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # CityBikes API configuration
    citybikes_api_url: str = Field(
        default="https://api.citybik.es/v2",
        description="Base URL of the CityBikes v2 API",
    )
    api_timeout_seconds: int = Field(
        default=10, description="Timeout for CityBikes API requests in seconds"
    )

    # Proximity search configuration
    search_radii_km: list[float] = Field(
        default_factory=lambda: [10.0, 50.0, 100.0, 200.0],
        description="Search radii in km tried in ascending order until networks are found",
    )

    # Display configuration
    networks_per_page: int = Field(default=15, description="Networks shown per list page")
    stations_per_page: int = Field(default=15, description="Stations shown per list page")
    default_station_sort_direction: str = Field(
        default="desc",
        description="Sort direction for station lists when none is requested: 'asc' or 'desc'",
    )

    log_level: str = Field(default="INFO", description="Logging level name (e.g. DEBUG, INFO)")

    # TOML config file path, optional
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [api], [search] and [display] sections",
    )

    @field_validator("search_radii_km")
    @classmethod
    def validate_search_radii(cls, v: list[float]) -> list[float]:
        """Validate the radius ladder is non-empty and strictly positive."""
        if not v:
            raise ValueError("search_radii_km must contain at least one radius")
        if any(r <= 0 for r in v):
            raise ValueError("search_radii_km must only contain positive radii")
        return sorted(v)

    @field_validator("networks_per_page", "stations_per_page")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Validate page sizes are positive."""
        if v <= 0:
            raise ValueError("page sizes must be positive")
        return v

    @field_validator("default_station_sort_direction")
    @classmethod
    def validate_sort_direction(cls, v: str) -> str:
        """Validate sort direction is either 'asc' or 'desc'."""
        if v.lower() not in ("asc", "desc"):
            raise ValueError("default_station_sort_direction must be either 'asc' or 'desc'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got '{v}'")
        return level

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its settings on top of env/defaults.

        Returns the parsed TOML data. Does nothing when no config_file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api = toml_data.get("api", {})
        if "citybikes_api_url" in api:
            self.citybikes_api_url = api["citybikes_api_url"]
        if "api_timeout_seconds" in api:
            self.api_timeout_seconds = api["api_timeout_seconds"]

        search = toml_data.get("search", {})
        if "search_radii_km" in search:
            self.search_radii_km = self.validate_search_radii(
                [float(r) for r in search["search_radii_km"]]
            )

        display = toml_data.get("display", {})
        if "networks_per_page" in display:
            self.networks_per_page = self.validate_page_size(display["networks_per_page"])
        if "stations_per_page" in display:
            self.stations_per_page = self.validate_page_size(display["stations_per_page"])
        if "default_station_sort_direction" in display:
            self.default_station_sort_direction = self.validate_sort_direction(
                display["default_station_sort_direction"]
            )

        return toml_data
