from __future__ import annotations

import math
from datetime import timedelta

import pytest

from pyvss.config import ProcessorConfig
from pyvss.exceptions import VssConfigError
from pyvss.ingestion.normalize import (
    is_placeholder,
    normalize_timestamp_seconds,
    safe_float,
    safe_int,
)


def test_placeholders() -> None:
    assert is_placeholder(None)
    assert is_placeholder("--")
    assert is_placeholder("  ")
    assert is_placeholder(math.nan)
    assert not is_placeholder(0)
    assert not is_placeholder("0")


def test_safe_float() -> None:
    assert safe_float("42.5") == 42.5
    assert safe_float(7) == 7.0
    assert safe_float("--") is None
    assert safe_float("abc") is None
    assert safe_float(True) is None


def test_safe_int() -> None:
    assert safe_int("12.9") == 12
    assert safe_int(math.inf) is None
    assert safe_int("--") is None


def test_normalize_timestamp_seconds_and_milliseconds() -> None:
    assert normalize_timestamp_seconds(1_745_053_200) == 1_745_053_200
    assert normalize_timestamp_seconds(1_745_053_200_500) == pytest.approx(1_745_053_200.5)
    assert normalize_timestamp_seconds(0) is None
    assert normalize_timestamp_seconds("") is None


def test_config_defaults() -> None:
    config = ProcessorConfig()

    assert config.location_gap == timedelta(milliseconds=500)
    assert config.future_skew == timedelta(minutes=5)


def test_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("PYVSS_LOCATION_GAP_SECONDS", "0.25")
    monkeypatch.setenv("PYVSS_FUTURE_SKEW_SECONDS", "60")

    config = ProcessorConfig.from_env()

    assert config.location_gap_seconds == 0.25
    assert config.future_skew == timedelta(minutes=1)


def test_config_overrides_win_over_env(monkeypatch) -> None:
    monkeypatch.setenv("PYVSS_LOCATION_GAP_SECONDS", "not-a-number")

    config = ProcessorConfig.from_env(location_gap_seconds=1.0)

    assert config.location_gap_seconds == 1.0


def test_config_invalid_env_rejected(monkeypatch) -> None:
    monkeypatch.setenv("PYVSS_FUTURE_SKEW_SECONDS", "soon")

    with pytest.raises(VssConfigError, match="PYVSS_FUTURE_SKEW_SECONDS"):
        ProcessorConfig.from_env()


@pytest.mark.parametrize("value", [-1, math.inf, math.nan, "0.5", True])
def test_config_rejects_bad_values(value: object) -> None:
    with pytest.raises(VssConfigError):
        ProcessorConfig(location_gap_seconds=value)  # type: ignore[arg-type]
