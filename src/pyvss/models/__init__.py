"""Data models for telemetry signals."""

from pyvss.models._base import VssBaseModel, VssTimestamp, parse_vss_timestamp
from pyvss.models.signal import Location, Signal

__all__ = [
    "Location",
    "Signal",
    "VssBaseModel",
    "VssTimestamp",
    "parse_vss_timestamp",
]
