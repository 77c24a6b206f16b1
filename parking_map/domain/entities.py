"""
Domain entities.

``Coordinate`` and ``ParkingRecord`` are immutable value objects: the
parking collection is loaded once and shared read-only for the lifetime of
the process.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .enums import PinColor


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """True when both values are finite and within degree ranges."""
        return (
            math.isfinite(self.latitude)
            and math.isfinite(self.longitude)
            and -90.0 <= self.latitude <= 90.0
            and -180.0 <= self.longitude <= 180.0
        )


@dataclass(frozen=True)
class ParkingRecord:
    name: str
    address: str
    position: Coordinate


@dataclass(frozen=True)
class MarkerDescriptor:
    """One pin handed to the map renderer."""

    position: Coordinate
    title: str
    description: str | None = None
    pin_color: PinColor = PinColor.RED


@dataclass(frozen=True)
class MapRegion:
    center: Coordinate
    latitude_delta: float
    longitude_delta: float
