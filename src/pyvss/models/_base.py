"""Base model for pyvss records.

Every record model inherits from :class:`VssBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase payload keys map
  automatically to snake_case fields.
* A ``model_validator(mode="before")`` that strips placeholder
  values (``""``, ``"--"``, NaN) so the field default is used.
* Immutability, so records can be shared between the input and output
  of a processing pass without being mutated.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from pyvss.ingestion.normalize import is_placeholder, to_utc_datetime


def parse_vss_timestamp(value: Any) -> datetime:
    """Convert an epoch timestamp (seconds **or** milliseconds), ISO string or datetime to UTC.

    Raises :class:`ValueError` when the value cannot be interpreted.
    """
    parsed = to_utc_datetime(value)
    if parsed is None:
        raise ValueError(f"invalid timestamp: {value!r}")
    return parsed


VssTimestamp = Annotated[datetime, BeforeValidator(parse_vss_timestamp)]
"""Annotated type that coerces epoch numbers (seconds or ms) and ISO strings to UTC datetimes."""


class VssBaseModel(BaseModel):
    """Base for pyvss record models.

    Handles:
    * camelCase → snake_case via ``alias_generator=to_camel``
    * placeholder values (``""``, ``"--"``, NaN) → dropped so
      the field default is used instead
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _strip_placeholders(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if not is_placeholder(value)}
