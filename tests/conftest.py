"""
Shared test fixtures.

The four-parking scenario sits around Bordeaux centre: A is a few hundred
metres from the default reference, B and C a little further north-west and
D far to the south-east.
"""

import pytest

from parking_map.domain.entities import Coordinate, ParkingRecord
from parking_map.domain.view import ViewSession
from parking_map.infrastructure.repositories import ParkingRepository

BORDEAUX = Coordinate(44.8378, -0.5792)


def make_parking(name: str, lat: float, lon: float) -> ParkingRecord:
    return ParkingRecord(
        name=name, address=f"{name} street, Bordeaux", position=Coordinate(lat, lon)
    )


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def reference() -> Coordinate:
    return BORDEAUX


@pytest.fixture
def parkings() -> list[ParkingRecord]:
    return [
        make_parking("A", 44.84, -0.58),
        make_parking("B", 44.90, -0.60),
        make_parking("C", 45.00, -0.70),
        make_parking("D", 44.20, -0.10),
    ]


@pytest.fixture
def repository(parkings) -> ParkingRepository:
    return ParkingRepository(parkings)


@pytest.fixture
def view_session(repository) -> ViewSession:
    return ViewSession(repository, default_center=BORDEAUX)
