from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest

from fmgsync.config import (
    DEFAULT_CITY_GENERATOR_URL,
    CityGeneratorConfig,
    ConfigurationError,
    StorageConfig,
    get_city_generator_config,
    get_database_config,
    get_storage_config,
    optional_env_var,
)
from fmgsync.config.storage import DEFAULT_DB_FILENAME


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FMGSYNC_TEST_VALUE", "   ")

    assert optional_env_var("FMGSYNC_TEST_VALUE") is None


def test_storage_prefers_explicit_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("FMGSYNC_DATA_DIR", str(custom))

    assert get_storage_config().resolve_data_dir() == custom.resolve()


def test_database_uri_uses_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")

    assert get_database_config().uri == "sqlite:///override.db"


def test_database_uri_creates_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    storage = StorageConfig(data_dir=tmp_path / "data-dir")

    uri = get_database_config(storage=storage).uri

    expected_path = (tmp_path / "data-dir" / DEFAULT_DB_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert expected_path.parent.exists()


def test_generator_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FMGSYNC_CITY_GENERATOR_URL", raising=False)

    assert get_city_generator_config().base_url == DEFAULT_CITY_GENERATOR_URL


def test_generator_argument_beats_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FMGSYNC_CITY_GENERATOR_URL", "https://env.example/")

    assert get_city_generator_config().base_url == "https://env.example/"
    assert (
        get_city_generator_config(base_url="https://cli.example/").base_url
        == "https://cli.example/"
    )


@pytest.mark.parametrize(
    "url",
    ["fantasycities", "http://", "http://host/?random=1", "http://host/#map"],
)
def test_generator_rejects_invalid_urls(url: str) -> None:
    with pytest.raises(ConfigurationError):
        CityGeneratorConfig(base_url=url)
