"""Custom exception hierarchy for pyvss."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime


def format_time(value: datetime) -> str:
    """Format *value* per RFC 3339 in UTC, for use in diagnostics."""
    return value.astimezone(UTC).isoformat(timespec="seconds").replace("+00:00", "Z")


class VssError(Exception):
    """Base exception for all pyvss errors."""


class VssConfigError(VssError):
    """Invalid or missing configuration."""


class MixedEntityError(VssError):
    """A batch handed to the processor holds signals for more than one vehicle.

    Processing always works on one entity's records at a time; callers must
    split mixed batches before calling in.
    """

    def __init__(self, token_ids: Sequence[int]) -> None:
        self.token_ids = tuple(token_ids)
        super().__init__(f"signals belong to more than one vehicle: {sorted(self.token_ids)}")


class SignalIssue(VssError):
    """A non-fatal anomaly found while processing a batch.

    Issues are collected and returned, never raised by the processor.
    """

    def __init__(self, message: str, *, timestamp: datetime) -> None:
        self.timestamp = timestamp
        super().__init__(message)


class OriginCoordinateError(SignalIssue):
    """Latitude and longitude were both exactly zero."""

    def __init__(self, timestamp: datetime) -> None:
        super().__init__(f"latitude and longitude at origin at time {format_time(timestamp)}", timestamp=timestamp)


class UnpairedLatitudeError(SignalIssue):
    """A latitude arrived without a longitude close enough in time."""

    def __init__(self, timestamp: datetime) -> None:
        super().__init__(f"unpaired latitude at time {format_time(timestamp)}", timestamp=timestamp)


class UnpairedLongitudeError(SignalIssue):
    """A longitude arrived without a latitude close enough in time."""

    def __init__(self, timestamp: datetime) -> None:
        super().__init__(f"unpaired longitude at time {format_time(timestamp)}", timestamp=timestamp)


class FutureTimestampError(SignalIssue):
    """A signal was timestamped too far ahead of the reference time."""

    def __init__(self, name: str, timestamp: datetime) -> None:
        self.name = name
        super().__init__(
            f"signal {name} has future timestamp {format_time(timestamp)}",
            timestamp=timestamp,
        )


class SignalIssuesError(VssError):
    """All issues raised while processing one batch, in occurrence order.

    This is returned alongside the processed signals; the signals are usable
    even when it is present.
    """

    def __init__(self, issues: Sequence[SignalIssue]) -> None:
        self.issues: tuple[SignalIssue, ...] = tuple(issues)
        super().__init__("\n".join(str(issue) for issue in self.issues))

    def __len__(self) -> int:
        return len(self.issues)
