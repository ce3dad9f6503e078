"""Configuration adapters."""

from bike_discovery.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
