"""
Nearest-Parking Selection
=========================

Order the parking collection by ascending great-circle distance from a
reference coordinate and keep the first ``limit`` records.

* The input collection is never reordered: ``sorted`` builds a new list,
  so repeated calls with different references are independent.
* Equal distances are broken by parking name so the output is
  deterministic.
* A missing or invalid reference raises ``InvalidReferenceCoordinate``
  instead of producing NaN distances.

Complexity: O(N log N) for N parkings.
"""

from __future__ import annotations

from typing import Iterable, Optional

from .distance import distance_km
from .entities import Coordinate, ParkingRecord
from .exceptions import InvalidReferenceCoordinate

DEFAULT_LIMIT = 3


def check_reference(reference: Optional[Coordinate]) -> Coordinate:
    if reference is None:
        raise InvalidReferenceCoordinate("no reference coordinate available")
    if not reference.is_valid():
        raise InvalidReferenceCoordinate(
            f"reference coordinate out of range: "
            f"({reference.latitude}, {reference.longitude})"
        )
    return reference


def rank_parkings(
    reference: Optional[Coordinate],
    parkings: Iterable[ParkingRecord],
) -> list[tuple[ParkingRecord, float]]:
    """Return ``(parking, distance_km)`` pairs, nearest first."""
    reference = check_reference(reference)
    ranked = [(p, distance_km(reference, p.position)) for p in parkings]
    return sorted(ranked, key=lambda pair: (pair[1], pair[0].name))


def nearest_parkings(
    reference: Optional[Coordinate],
    parkings: Iterable[ParkingRecord],
    limit: int = DEFAULT_LIMIT,
) -> list[ParkingRecord]:
    """The ``limit`` parkings closest to *reference*, nearest first."""
    ranked = rank_parkings(reference, parkings)
    return [p for p, _ in ranked[: max(0, limit)]]
