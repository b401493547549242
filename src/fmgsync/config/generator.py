"""Settings for the external city generator that burg URLs point at."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final
from urllib.parse import urlsplit

from .env import optional_env_var
from .errors import ConfigurationError

DEFAULT_CITY_GENERATOR_URL: Final[str] = "http://fantasycities.watabou.ru/"


@dataclass(frozen=True, slots=True)
class CityGeneratorConfig:
    """Base URL of the procedural city generator."""

    base_url: str = DEFAULT_CITY_GENERATOR_URL

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url)
        if not parts.scheme or not parts.netloc:
            raise ConfigurationError(f"Invalid city generator URL: {self.base_url!r}")
        if parts.query or parts.fragment:
            raise ConfigurationError(
                f"City generator URL must not carry a query or fragment: {self.base_url!r}"
            )


def get_city_generator_config(*, base_url: str | None = None) -> CityGeneratorConfig:
    """Return the generator config, preferring ``base_url`` over the environment."""

    resolved = base_url or optional_env_var("FMGSYNC_CITY_GENERATOR_URL")
    if resolved is None:
        return CityGeneratorConfig()
    return CityGeneratorConfig(base_url=resolved)
