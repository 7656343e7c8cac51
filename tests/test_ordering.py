from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pyvss._constants import SignalName
from pyvss.models.signal import Signal
from pyvss.processing.ordering import is_sorted, sort_signals

T0 = datetime(2025, 4, 19, 9, 0, 0, tzinfo=UTC)


def _sig(ts: datetime, name: str, value: float = 1.0) -> Signal:
    return Signal(token_id=3, timestamp=ts, name=name, value_number=value)


def test_sorts_by_timestamp_then_name() -> None:
    a = _sig(T0, SignalName.LONGITUDE)
    b = _sig(T0, SignalName.LATITUDE)
    c = _sig(T0 - timedelta(seconds=1), SignalName.SPEED)
    signals = [a, b, c]

    result = sort_signals(signals)

    assert result is signals
    assert signals == [c, b, a]
    assert is_sorted(signals)


def test_sort_is_stable_for_equal_keys() -> None:
    first = _sig(T0, SignalName.SPEED, 1)
    second = _sig(T0, SignalName.SPEED, 2)

    assert sort_signals([first, second]) == [first, second]
    assert sort_signals([second, first]) == [second, first]


def test_sorting_sorted_output_is_noop() -> None:
    signals = [
        _sig(T0 + timedelta(milliseconds=5), SignalName.HDOP),
        _sig(T0, SignalName.TRAVELLED_DISTANCE),
        _sig(T0, SignalName.LATITUDE),
    ]
    once = list(sort_signals(signals))

    assert sort_signals(signals) == once


def test_sub_millisecond_precision_orders() -> None:
    later = _sig(T0 + timedelta(microseconds=10), SignalName.LATITUDE)
    earlier = _sig(T0, SignalName.LONGITUDE)

    assert sort_signals([later, earlier]) == [earlier, later]


def test_is_sorted_empty_and_single() -> None:
    assert is_sorted([])
    assert is_sorted([_sig(T0, SignalName.SPEED)])
    assert not is_sorted([_sig(T0 + timedelta(seconds=1), SignalName.SPEED), _sig(T0, SignalName.SPEED)])
