"""
Bundled parking dataset loader.

The file is a JSON array of records shaped like the Bordeaux open-data
export::

    {"nom": "...", "adresse": "...", "geo_point_2d": {"lat": 44.8, "lon": -0.5}}

Extra fields are ignored.  Every record must carry ``nom``, ``adresse`` and
a finite, in-range numeric ``lat`` / ``lon`` (booleans and numeric strings
are not coerced): a bad record fails the whole load instead of letting
bogus distances through later.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from parking_map.domain.entities import Coordinate, ParkingRecord
from parking_map.domain.exceptions import DatasetError

logger = logging.getLogger(__name__)


class GeoPoint2D(BaseModel):
    # strict: booleans and numeric strings are rejected, ints still load
    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False, strict=True)
    lon: float = Field(..., ge=-180, le=180, allow_inf_nan=False, strict=True)


class RawParkingRecord(BaseModel):
    nom: str
    adresse: str
    geo_point_2d: GeoPoint2D

    model_config = {"extra": "ignore"}

    def to_entity(self) -> ParkingRecord:
        return ParkingRecord(
            name=self.nom,
            address=self.adresse,
            position=Coordinate(self.geo_point_2d.lat, self.geo_point_2d.lon),
        )


def parse_parkings(raw: Any) -> list[ParkingRecord]:
    """Validate already-decoded JSON and convert it to entities."""
    if not isinstance(raw, list):
        raise DatasetError(
            f"Expected a JSON array of parkings, got {type(raw).__name__}"
        )

    parkings: list[ParkingRecord] = []
    for idx, row in enumerate(raw):
        try:
            parkings.append(RawParkingRecord.model_validate(row).to_entity())
        except ValidationError as exc:
            raise DatasetError(f"Invalid parking record #{idx}: {exc}") from exc
    return parkings


def load_parkings(path: str | Path) -> list[ParkingRecord]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as exc:
        raise DatasetError(f"Parking dataset not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Parking dataset is not valid JSON: {path}: {exc}") from exc

    parkings = parse_parkings(raw)
    logger.info("Loaded %d parkings from %s", len(parkings), path)
    return parkings
