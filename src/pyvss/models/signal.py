"""Signal and location models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from pyvss._constants import LOCATION_COMPONENTS
from pyvss.ingestion.normalize import safe_float, safe_int
from pyvss.models._base import VssBaseModel, VssTimestamp


class Location(VssBaseModel):
    """One GPS fix.

    Parameters
    ----------
    latitude : float
        Latitude in degrees.
    longitude : float
        Longitude in degrees.
    hdop : float
        Horizontal dilution of precision. ``0.0`` means absent.
    """

    latitude: float = 0.0
    longitude: float = 0.0
    hdop: float = Field(default=0.0, validation_alias=AliasChoices("hdop", "HDOP"))

    @field_validator("latitude", "longitude", "hdop", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float:
        parsed = safe_float(value)
        return 0.0 if parsed is None else parsed

    @property
    def has_hdop(self) -> bool:
        return self.hdop != 0.0


class Signal(VssBaseModel):
    """A single timestamped, named telemetry value for one vehicle.

    Parameters
    ----------
    token_id : int
        Vehicle identifier.
    timestamp : datetime
        When the value was observed (aware, UTC).
    name : str
        Signal name, e.g. ``currentLocationLatitude``.
    value_number : float
        Scalar value for numeric signals.
    value_string : str
        Value for string signals.
    value_location : Location or None
        Value for location signals.
    source, producer, cloud_event_id : str
        Passthrough provenance fields.
    """

    token_id: int
    timestamp: VssTimestamp
    name: str
    value_number: float = 0.0
    value_string: str = ""
    value_location: Location | None = None
    source: str = ""
    producer: str = ""
    cloud_event_id: str = Field(default="", validation_alias=AliasChoices("cloudEventId", "cloud_event_id", "cloudEventID"))

    @field_validator("token_id", mode="before")
    @classmethod
    def _coerce_token_id(cls, value: Any) -> Any:
        parsed = safe_int(value)
        return value if parsed is None else parsed

    @field_validator("value_number", mode="before")
    @classmethod
    def _coerce_value_number(cls, value: Any) -> Any:
        parsed = safe_float(value)
        return value if parsed is None else parsed

    @property
    def is_location_component(self) -> bool:
        """Whether this signal is a latitude, longitude or HDOP reading."""
        return self.name in LOCATION_COMPONENTS
