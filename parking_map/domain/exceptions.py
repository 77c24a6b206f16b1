"""Error taxonomy.  None of these is fatal except ``DatasetError`` at startup."""


class ParkingMapError(Exception):
    """Base class for every error raised by the parking map."""


class InvalidStateTransition(ParkingMapError):
    """Raised when a view status change violates the state machine."""


class InvalidReferenceCoordinate(ParkingMapError):
    """Raised when nearest-parking selection has no usable reference point."""


class LocationPermissionDenied(ParkingMapError):
    """Raised by the location fetch when the user refuses permission."""


class UnresolvableAddress(ParkingMapError):
    """Raised by an address resolver that cannot geocode the given text."""

    def __init__(self, address: str, reason: str = "address could not be resolved"):
        super().__init__(f"{reason}: {address!r}")
        self.address = address
        self.reason = reason


class DatasetError(ParkingMapError):
    """Raised when the bundled parking dataset is missing or malformed."""
