"""pyvss - Reconcile vehicle telemetry signal batches."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyvss")
except PackageNotFoundError:
    __version__ = "0+local"
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
    VssConfigError,
    VssError,
)
from pyvss.ingestion.signals import parse_signals, process_payload
from pyvss.models import Location, Signal
from pyvss.processing import LocationReconciler, ProcessedSignals, process_signals, sort_signals

__all__ = [
    "__version__",
    "FutureTimestampError",
    "Location",
    "LocationReconciler",
    "MixedEntityError",
    "OriginCoordinateError",
    "ProcessedSignals",
    "ProcessorConfig",
    "Signal",
    "SignalIssue",
    "SignalIssuesError",
    "SignalName",
    "UnpairedLatitudeError",
    "UnpairedLongitudeError",
    "VssConfigError",
    "VssError",
    "parse_signals",
    "process_payload",
    "process_signals",
    "sort_signals",
]
