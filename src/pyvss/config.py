"""Processor configuration for pyvss."""

from __future__ import annotations

import dataclasses
import math
import os
from datetime import timedelta
from typing import Any

from pyvss._constants import DEFAULT_FUTURE_SKEW_SECONDS, DEFAULT_LOCATION_GAP_SECONDS
from pyvss.exceptions import VssConfigError


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as exc:
        raise VssConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class ProcessorConfig:
    """Signal processing configuration.

    Both values are plain thresholds.

    Parameters
    ----------
    location_gap_seconds : float
        Largest spread, in seconds, between the first member of a
        latitude/longitude/HDOP triple and a later one for them to count
        as the same GPS fix. Defaults to 500 ms.
    future_skew_seconds : float
        How far ahead of the reference clock a signal timestamp may be
        before the signal is dropped. Defaults to 5 minutes.
    """

    location_gap_seconds: float = DEFAULT_LOCATION_GAP_SECONDS
    future_skew_seconds: float = DEFAULT_FUTURE_SKEW_SECONDS

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise VssConfigError(f"{field.name} must be a number, got {value!r}")
            if not math.isfinite(value) or value < 0:
                raise VssConfigError(f"{field.name} must be a finite non-negative number, got {value!r}")

    @property
    def location_gap(self) -> timedelta:
        return timedelta(seconds=self.location_gap_seconds)

    @property
    def future_skew(self) -> timedelta:
        return timedelta(seconds=self.future_skew_seconds)

    @classmethod
    def from_env(cls, **overrides: Any) -> ProcessorConfig:
        """Create configuration from environment variables.

        Reads ``PYVSS_LOCATION_GAP_SECONDS`` and ``PYVSS_FUTURE_SKEW_SECONDS``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ProcessorConfig
            Populated configuration.

        Raises
        ------
        VssConfigError
            If an environment value is not a number or is out of range.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PYVSS_LOCATION_GAP_SECONDS": "location_gap_seconds",
            "PYVSS_FUTURE_SKEW_SECONDS": "future_skew_seconds",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_float(env_key, val)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
