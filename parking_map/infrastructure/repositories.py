"""Read-only parking repository, loaded once at startup."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from parking_map.domain.entities import ParkingRecord

from .dataset import load_parkings


class ParkingRepository:
    """Owns the parking collection.  Its content never changes after load."""

    def __init__(self, parkings: Iterable[ParkingRecord]):
        self._parkings: tuple[ParkingRecord, ...] = tuple(parkings)

    @classmethod
    def from_file(cls, path: str | Path) -> "ParkingRepository":
        return cls(load_parkings(path))

    def all(self) -> tuple[ParkingRecord, ...]:
        return self._parkings

    def __len__(self) -> int:
        return len(self._parkings)

    def __iter__(self) -> Iterator[ParkingRecord]:
        return iter(self._parkings)
