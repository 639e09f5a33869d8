"""Tests for board configuration."""

import pytest
from fleetsetup.config import SetupConfig
from pydantic import ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FLEETSETUP_BOARD_WIDTH", raising=False)
    monkeypatch.delenv("FLEETSETUP_BOARD_HEIGHT", raising=False)


def test_defaults_to_ten_by_ten() -> None:
    config = SetupConfig.from_env()
    assert (config.width, config.height) == (10, 10)


def test_env_overrides_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLEETSETUP_BOARD_WIDTH", "12")
    monkeypatch.setenv("FLEETSETUP_BOARD_HEIGHT", " 8 ")
    config = SetupConfig.from_env()
    assert (config.width, config.height) == (12, 8)


def test_explicit_values_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLEETSETUP_BOARD_WIDTH", "12")
    config = SetupConfig.from_env(width=7, height=None)
    assert (config.width, config.height) == (7, 10)


@pytest.mark.parametrize("overrides", [{"width": 0}, {"height": -2}])
def test_rejects_non_positive_dimensions(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        SetupConfig.from_env(**overrides)
