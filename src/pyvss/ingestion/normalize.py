"""Normalization helpers.

Centralizes defensive parsing of raw signal payload values.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta
from typing import Any

from pyvss._constants import MS_THRESHOLD

# Placeholder strings upstream producers use for "not available".
PLACEHOLDERS = frozenset({"", "--", "NaN", "nan"})

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def is_placeholder(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and value.strip() in PLACEHOLDERS:
        return True
    return isinstance(value, float) and math.isnan(value)


def safe_float(value: Any) -> float | None:
    if is_placeholder(value) or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None or math.isinf(parsed):
        return None
    return int(parsed)


def normalize_timestamp_seconds(value: Any) -> float | None:
    """Normalize epoch timestamps to seconds.

    - Empty/missing -> None
    - <= 0 -> None
    - Milliseconds (> 1e11) -> seconds, keeping the fraction
    """

    ts = safe_float(value)
    if ts is None or math.isinf(ts) or ts <= 0:
        return None
    if ts > MS_THRESHOLD:
        ts /= 1000.0
    return ts


def to_utc_datetime(value: Any) -> datetime | None:
    """Coerce a datetime, ISO-8601 string or epoch number to an aware UTC datetime.

    Naive datetimes are assumed to already be UTC. Returns ``None`` when the
    value cannot be interpreted.
    """

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    if isinstance(value, str) and safe_float(value) is None:
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        return to_utc_datetime(parsed)
    # Integer milliseconds stay exact; float seconds round to the microsecond.
    if isinstance(value, int) and not isinstance(value, bool) and value > MS_THRESHOLD:
        return _EPOCH + timedelta(milliseconds=value)
    seconds = normalize_timestamp_seconds(value)
    if seconds is None:
        return None
    return _EPOCH + timedelta(seconds=seconds)
