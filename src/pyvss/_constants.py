"""Internal constants shared across the library."""

from enum import StrEnum


class SignalName(StrEnum):
    """Signal names the library knows about.

    Signals may carry any name; only the location members are interpreted.
    """

    LATITUDE = "currentLocationLatitude"
    LONGITUDE = "currentLocationLongitude"
    HDOP = "dimoAftermarketHDOP"
    COORDINATES = "currentLocationCoordinates"
    SPEED = "speed"
    TRAVELLED_DISTANCE = "powertrainTransmissionTravelledDistance"


LOCATION_COMPONENTS: frozenset[str] = frozenset({SignalName.LATITUDE, SignalName.LONGITUDE, SignalName.HDOP})

DEFAULT_LOCATION_GAP_SECONDS = 0.5
DEFAULT_FUTURE_SKEW_SECONDS = 5 * 60.0

# Threshold to distinguish seconds from milliseconds.
MS_THRESHOLD = 1e11
