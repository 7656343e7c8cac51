"""Location reconciliation.

Latitude, longitude and HDOP arrive as separate scalar signals. This module
finds the ones that belong to the same GPS fix, merges them into a single
``currentLocationCoordinates`` signal and drops records that cannot be
trusted:

- exact duplicates (same name and timestamp) beyond the first,
- signals timestamped too far into the future,
- latitudes or longitudes without a partner,
- latitude/longitude pairs at the origin (0, 0).

The whole batch is handled in one pass over the time-sorted signals. At most
one latitude/longitude/HDOP triple is under construction at any time; it is
flushed when the next signal is too far away in time, when a slot would be
filled twice, or at the end of the batch.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import NamedTuple

from pyvss._constants import SignalName
from pyvss.config import ProcessorConfig
from pyvss.exceptions import (
    FutureTimestampError,
    MixedEntityError,
    OriginCoordinateError,
    SignalIssue,
    SignalIssuesError,
    UnpairedLatitudeError,
    UnpairedLongitudeError,
)
from pyvss.models.signal import Location, Signal
from pyvss.processing.ordering import sort_signals

_logger = logging.getLogger(__name__)

# Signal name -> triple slot it fills.
_SLOTS: dict[str, str] = {
    SignalName.LATITUDE: "latitude",
    SignalName.LONGITUDE: "longitude",
    SignalName.HDOP: "hdop",
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ProcessedSignals(NamedTuple):
    """Result of processing one batch.

    ``signals`` holds the retained input signals in sorted order followed by
    the created location signals. ``dropped`` holds every input signal that
    was removed. ``error`` aggregates the anomalies found; it is ``None`` when
    there were none and never makes ``signals`` unusable.
    """

    signals: list[Signal]
    dropped: list[Signal]
    error: SignalIssuesError | None


@dataclasses.dataclass
class _Triple:
    """Positions of the signals making up the location under construction."""

    latitude: int | None = None
    longitude: int | None = None
    hdop: int | None = None
    # Timestamp of the first member; None exactly when no slot is filled.
    timestamp: datetime | None = None

    def clear(self) -> None:
        self.latitude = None
        self.longitude = None
        self.hdop = None
        self.timestamp = None


class LocationReconciler:
    """Single-pass reconciler for one vehicle's batch of signals.

    Note that processing sorts the given list in place.
    """

    def __init__(
        self,
        signals: list[Signal],
        *,
        config: ProcessorConfig | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._signals = signals
        self._config = config or ProcessorConfig()
        self._clock = clock
        self._reset()

    def _reset(self) -> None:
        self._triple = _Triple()
        self._dropped = [False] * len(self._signals)
        self._created: list[Signal] = []
        self._issues: list[SignalIssue] = []

    def process(self) -> ProcessedSignals:
        """Process the batch.

        Raises
        ------
        MixedEntityError
            If the signals belong to more than one vehicle.
        """
        if not self._signals:
            return ProcessedSignals([], [], None)

        token_ids = {signal.token_id for signal in self._signals}
        if len(token_ids) > 1:
            raise MixedEntityError(list(token_ids))

        sort_signals(self._signals)
        self._reset()

        deadline = self._clock() + self._config.future_skew
        for index in range(len(self._signals)):
            self._process_signal(index, deadline)

        # The last triple may still be under construction.
        self._flush()

        retained = [sig for sig, dropped in zip(self._signals, self._dropped) if not dropped]
        dropped = [sig for sig, dropped in zip(self._signals, self._dropped) if dropped]
        error = SignalIssuesError(self._issues) if self._issues else None

        _logger.debug(
            "Processed %d signals for token %s: %d dropped, %d locations created, %d issues",
            len(self._signals),
            self._signals[0].token_id,
            len(dropped),
            len(self._created),
            len(self._issues),
        )
        return ProcessedSignals(retained + self._created, dropped, error)

    def _process_signal(self, index: int, deadline: datetime) -> None:
        sig = self._signals[index]

        # Input is time-sorted, so once this triggers it holds for the rest of the batch.
        if sig.timestamp > deadline:
            self._drop(index, FutureTimestampError(sig.name, sig.timestamp))
            return

        if index > 0:
            prev = self._signals[index - 1]
            if prev.name == sig.name and prev.timestamp == sig.timestamp:
                # Duplicates are not reported.
                self._drop(index)
                return

        triple = self._triple
        if triple.timestamp is not None and sig.timestamp - triple.timestamp > self._config.location_gap:
            self._flush()

        slot = _SLOTS.get(sig.name)
        if slot is None:
            return

        if getattr(triple, slot) is not None:
            # Start a new triple, but see if what's already tracked yields a location.
            self._flush()
        setattr(triple, slot, index)
        if triple.timestamp is None:
            triple.timestamp = sig.timestamp

    def _drop(self, index: int, issue: SignalIssue | None = None) -> None:
        self._dropped[index] = True
        if issue is not None:
            _logger.debug("Dropping %s: %s", self._signals[index].name, issue)
            self._issues.append(issue)

    def _flush(self) -> None:
        """Finish the triple under construction.

        Only call this when forced: a triple that could still be completed by
        the next signal would be discarded as incomplete.
        """
        triple = self._triple
        timestamp = triple.timestamp
        if timestamp is None:
            return

        values: dict[str, float] = {}

        if triple.latitude is not None and triple.longitude is not None:
            lat = self._signals[triple.latitude].value_number
            lon = self._signals[triple.longitude].value_number
            if lat == 0 and lon == 0:
                self._drop(triple.latitude, OriginCoordinateError(timestamp))
                self._drop(triple.longitude)
            else:
                values["latitude"] = lat
                values["longitude"] = lon
        elif triple.latitude is not None:
            self._drop(triple.latitude, UnpairedLatitudeError(timestamp))
        elif triple.longitude is not None:
            self._drop(triple.longitude, UnpairedLongitudeError(timestamp))

        if triple.hdop is not None:
            values["hdop"] = self._signals[triple.hdop].value_number

        if values:
            self._created.append(self._location_signal(Location(**values), timestamp))

        triple.clear()

    def _location_signal(self, location: Location, timestamp: datetime) -> Signal:
        # The batch holds a single vehicle, so any record can serve as template.
        template = self._signals[0]
        _logger.debug("Created location at %s: %s", timestamp.isoformat(), location)
        return Signal(
            token_id=template.token_id,
            timestamp=timestamp,
            name=SignalName.COORDINATES.value,
            value_location=location,
            source=template.source,
            producer=template.producer,
            cloud_event_id=template.cloud_event_id,
        )


def process_signals(
    signals: Iterable[Signal],
    *,
    config: ProcessorConfig | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ProcessedSignals:
    """Clean one vehicle's batch of signals and merge location components.

    - If there are multiple signals with the same name and timestamp, keep
      only the first.
    - Drop signals timestamped more than ``config.future_skew`` ahead of
      ``clock()``.
    - For each latitude/longitude/HDOP triple with sufficiently close
      timestamps, emit a ``currentLocationCoordinates`` signal combining them.
    - Drop unpaired latitudes and longitudes, and pairs at the origin.

    When *signals* is a list it is sorted in place. The returned signals are
    always meaningful, even if an error is also returned.

    Raises
    ------
    MixedEntityError
        If the signals belong to more than one vehicle.
    """
    batch = signals if isinstance(signals, list) else list(signals)
    reconciler = LocationReconciler(batch, config=config, clock=clock or _utcnow)
    return reconciler.process()
