"""Domain enumerations and state-transition rules."""

import enum


class LocationStatus(str, enum.Enum):
    IDLE = "IDLE"
    LOADING = "LOADING"
    LOCATED = "LOCATED"
    DENIED = "DENIED"
    UNAVAILABLE = "UNAVAILABLE"


class LookupStatus(str, enum.Enum):
    IDLE = "IDLE"
    PENDING = "PENDING"
    RESOLVED = "RESOLVED"
    FAILED = "FAILED"


# State machine: maps current status -> set of valid next statuses
LOCATION_TRANSITIONS: dict[LocationStatus, set[LocationStatus]] = {
    LocationStatus.IDLE: {LocationStatus.LOADING},
    LocationStatus.LOADING: {
        LocationStatus.LOCATED,
        LocationStatus.DENIED,
        LocationStatus.UNAVAILABLE,
    },
    LocationStatus.LOCATED: {LocationStatus.LOADING},
    LocationStatus.DENIED: {LocationStatus.LOADING},
    LocationStatus.UNAVAILABLE: {LocationStatus.LOADING},
}

LOOKUP_TRANSITIONS: dict[LookupStatus, set[LookupStatus]] = {
    LookupStatus.IDLE: {LookupStatus.PENDING},
    LookupStatus.PENDING: {LookupStatus.RESOLVED, LookupStatus.FAILED},
    LookupStatus.RESOLVED: {LookupStatus.PENDING},
    LookupStatus.FAILED: {LookupStatus.PENDING},
}


class PinColor(str, enum.Enum):
    RED = "red"
    BLUE = "blue"
