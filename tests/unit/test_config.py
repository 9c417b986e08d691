from pathlib import Path

import pytest

from punks_remaster.config import RemasterConfig
from punks_remaster.logging_config import (
    LOGGER_NAME,
    get_log_level,
    get_logging_config,
)


def test_for_data_dir_layout() -> None:
    config = RemasterConfig.for_data_dir("/srv/punks")
    assert config.data_dir == Path("/srv/punks")
    assert config.sprite_sheet_path == Path(
        "/srv/punks/cryptopunks-assets/punks/config/punks-24x24.png"
    )
    assert config.composite_path == Path("/srv/punks/punks.png")
    assert config.attributes_path == Path(
        "/srv/punks/punks-attributes/original/cryptopunks.csv"
    )
    assert config.eligible_path == Path("/srv/punks/all-eligible-punks.json")
    assert config.min_output_size == 24
    assert config.max_output_size == 1024


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PUNKS_REMASTER_DATA_DIR",
        "PUNKS_REMASTER_SPRITE_SHEET",
        "PUNKS_REMASTER_COMPOSITE",
        "PUNKS_REMASTER_ATTRIBUTES",
        "PUNKS_REMASTER_ELIGIBLE",
        "PUNKS_REMASTER_MIN_SIZE",
        "PUNKS_REMASTER_MAX_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    assert RemasterConfig.from_env() == RemasterConfig.for_data_dir("data")


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUNKS_REMASTER_DATA_DIR", "/data")
    monkeypatch.setenv("PUNKS_REMASTER_ELIGIBLE", "/elsewhere/ids.json")
    monkeypatch.setenv("PUNKS_REMASTER_MAX_SIZE", "480")
    monkeypatch.delenv("PUNKS_REMASTER_SPRITE_SHEET", raising=False)
    config = RemasterConfig.from_env()
    assert config.data_dir == Path("/data")
    assert config.eligible_path == Path("/elsewhere/ids.json")
    assert config.sprite_sheet_path == Path(
        "/data/cryptopunks-assets/punks/config/punks-24x24.png"
    )
    assert config.max_output_size == 480


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
    config = get_logging_config()
    assert config["loggers"][LOGGER_NAME]["level"] == "DEBUG"
    assert config["handlers"]["console"]["level"] == "DEBUG"
    assert config["handlers"]["error_console"]["level"] == "ERROR"


def test_log_level_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert get_log_level() == "INFO"
