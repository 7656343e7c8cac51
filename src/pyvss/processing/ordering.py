"""Deterministic ordering of signal batches."""

from __future__ import annotations

from pyvss.models.signal import Signal


def signal_sort_key(signal: Signal) -> tuple:
    return (signal.timestamp, signal.name)


def sort_signals(signals: list[Signal]) -> list[Signal]:
    """Sort *signals* in place by timestamp, then name, and return the same list.

    Sorting by time makes members of the same GPS fix adjacent and turns
    duplicate detection into a neighbour comparison. The name key only
    makes the order total for equal timestamps.
    """
    signals.sort(key=signal_sort_key)
    return signals


def is_sorted(signals: list[Signal]) -> bool:
    return all(signal_sort_key(a) <= signal_sort_key(b) for a, b in zip(signals, signals[1:]))
