"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .generator import DEFAULT_CITY_GENERATOR_URL, CityGeneratorConfig, get_city_generator_config
from .logging import configure_logging
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config

__all__ = [
    "DEFAULT_CITY_GENERATOR_URL",
    "CityGeneratorConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "StorageConfig",
    "configure_logging",
    "get_city_generator_config",
    "get_database_config",
    "get_storage_config",
    "optional_env_var",
]
