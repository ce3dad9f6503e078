"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from bike_discovery.adapters.config import AppConfig


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.citybikes_api_url == "https://api.citybik.es/v2"
    assert config.search_radii_km == [10.0, 50.0, 100.0, 200.0]
    assert config.networks_per_page == 15
    assert config.stations_per_page == 15
    assert config.default_station_sort_direction == "desc"
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("CITYBIKES_API_URL", "http://localhost:8080/v2")
    monkeypatch.setenv("NETWORKS_PER_PAGE", "25")
    monkeypatch.setenv("SEARCH_RADII_KM", "[100, 5]")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.citybikes_api_url == "http://localhost:8080/v2"
    assert config.networks_per_page == 25
    assert config.search_radii_km == [5.0, 100.0]
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("env_name", "value", "message"),
    [
        ("SEARCH_RADII_KM", "[]", "at least one radius"),
        ("SEARCH_RADII_KM", "[10, -1]", "positive radii"),
        ("STATIONS_PER_PAGE", "0", "page sizes must be positive"),
        ("DEFAULT_STATION_SORT_DIRECTION", "sideways", "either 'asc' or 'desc'"),
        ("LOG_LEVEL", "chatty", "logging level name"),
    ],
)
def test_config_validates_values(
    monkeypatch: pytest.MonkeyPatch, env_name: str, value: str, message: str
) -> None:
    """Given an invalid value, when loading config, then validation error is raised."""
    monkeypatch.setenv(env_name, value)

    with pytest.raises(ValueError, match=message):
        AppConfig()


def test_config_applies_toml_overrides() -> None:
    """Given a TOML config file, when loading overrides, then its sections are applied."""
    toml_content = """
[api]
citybikes_api_url = "https://bikes.example.org/v2"

[search]
search_radii_km = [25, 5]

[display]
networks_per_page = 20
default_station_sort_direction = "ASC"
"""
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(toml_content)
        temp_path = f.name

    try:
        config = AppConfig(config_file=temp_path)
        data = config.load_toml_overrides()

        assert data["display"]["networks_per_page"] == 20
        assert config.citybikes_api_url == "https://bikes.example.org/v2"
        assert config.search_radii_km == [5.0, 25.0]
        assert config.networks_per_page == 20
        assert config.stations_per_page == 15
        assert config.default_station_sort_direction == "asc"
    finally:
        Path(temp_path).unlink()


def test_config_rejects_invalid_toml_radii() -> None:
    """Given a TOML file with a zero radius, when loading overrides, then ValueError is raised."""
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write("[search]\nsearch_radii_km = [0, 10]\n")
        temp_path = f.name

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="positive radii"):
            config.load_toml_overrides()
    finally:
        Path(temp_path).unlink()


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading overrides, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml_overrides()


def test_config_without_file_has_no_overrides() -> None:
    """Given config_file is None, when loading overrides, then nothing changes."""
    config = AppConfig(config_file=None)

    assert config.load_toml_overrides() == {}
    assert config.networks_per_page == 15
