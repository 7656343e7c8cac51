"""Signal processing.

Turns one vehicle's raw batch of signals into a cleaned batch: duplicates and
untrustworthy records removed, latitude/longitude/HDOP merged into location
signals.
"""

from pyvss.processing.locations import LocationReconciler, ProcessedSignals, process_signals
from pyvss.processing.ordering import sort_signals

__all__ = [
    "LocationReconciler",
    "ProcessedSignals",
    "process_signals",
    "sort_signals",
]
