"""Signal batch ingestion + parsing."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from pyvss.config import ProcessorConfig
from pyvss.models.signal import Signal
from pyvss.processing.locations import ProcessedSignals, process_signals

_logger = logging.getLogger(__name__)

_SIGNAL_ADAPTER = TypeAdapter(Signal)


def parse_signals(payload: Any) -> list[Signal]:
    """Parse a raw list of signal dicts.

    Keys may be camelCase (``tokenId``, ``valueNumber``) or snake_case.
    Entries that fail validation are skipped; a payload that is not a list
    yields an empty batch.
    """
    if not isinstance(payload, list):
        _logger.debug("Signal payload is not a list: %s", type(payload).__name__)
        return []

    signals: list[Signal] = []
    for position, item in enumerate(payload):
        try:
            signals.append(_SIGNAL_ADAPTER.validate_python(item))
        except ValidationError as exc:
            _logger.debug("Skipping invalid signal at position %d: %s", position, exc.errors(include_url=False))
    return signals


def process_payload(
    payload: Any,
    *,
    config: ProcessorConfig | None = None,
    clock: Callable[[], datetime] | None = None,
) -> ProcessedSignals:
    """Parse one vehicle's raw batch and process it."""
    return process_signals(parse_signals(payload), config=config, clock=clock)
