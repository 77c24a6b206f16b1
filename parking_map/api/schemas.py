"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from parking_map.domain.distance import distance_km
from parking_map.domain.entities import (
    Coordinate,
    MapRegion,
    MarkerDescriptor,
    ParkingRecord,
)
from parking_map.domain.view import ViewState


# ── Requests ──────────────────────────────────────────────────────────


class CoordinateRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    def to_coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


class NearestRequest(CoordinateRequest):
    limit: int = Field(3, ge=0, le=50)


class AddressLookupRequest(BaseModel):
    address: str = Field(
        ...,
        max_length=256,
        description="Free-text address; resolved by the configured geocoder.",
    )


class VisibilityRequest(BaseModel):
    show: bool


# ── Responses ─────────────────────────────────────────────────────────


class CoordinateResponse(BaseModel):
    latitude: float
    longitude: float

    @classmethod
    def from_entity(cls, c: Coordinate) -> CoordinateResponse:
        return cls(latitude=c.latitude, longitude=c.longitude)


class ParkingResponse(BaseModel):
    name: str
    address: str
    latitude: float
    longitude: float
    distance_km: Optional[float] = None

    @classmethod
    def from_entity(
        cls, p: ParkingRecord, distance_km: Optional[float] = None
    ) -> ParkingResponse:
        return cls(
            name=p.name,
            address=p.address,
            latitude=p.position.latitude,
            longitude=p.position.longitude,
            distance_km=distance_km,
        )


class SelectionResponse(BaseModel):
    reference: Optional[CoordinateResponse] = None
    parkings: list[ParkingResponse] = []

    @classmethod
    def from_state(cls, state: ViewState) -> SelectionResponse:
        ref = state.reference
        return cls(
            reference=(
                CoordinateResponse.from_entity(ref) if ref is not None else None
            ),
            parkings=[
                ParkingResponse.from_entity(
                    p, distance_km(ref, p.position) if ref is not None else None
                )
                for p in state.selection
            ],
        )


class ViewStateResponse(BaseModel):
    location_status: str
    lookup_status: str
    show_parkings: bool
    user_location: Optional[CoordinateResponse] = None
    last_address: Optional[str] = None
    last_error: Optional[str] = None
    selection: SelectionResponse

    @classmethod
    def from_state(cls, state: ViewState) -> ViewStateResponse:
        return cls(
            location_status=state.location_status.value,
            lookup_status=state.lookup_status.value,
            show_parkings=state.show_parkings,
            user_location=(
                CoordinateResponse.from_entity(state.user_location)
                if state.user_location is not None
                else None
            ),
            last_address=state.last_address,
            last_error=state.last_error,
            selection=SelectionResponse.from_state(state),
        )


class MarkerResponse(BaseModel):
    latitude: float
    longitude: float
    title: str
    description: Optional[str] = None
    pin_color: str

    @classmethod
    def from_entity(cls, m: MarkerDescriptor) -> MarkerResponse:
        return cls(
            latitude=m.position.latitude,
            longitude=m.position.longitude,
            title=m.title,
            description=m.description,
            pin_color=m.pin_color.value,
        )


class RegionResponse(BaseModel):
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float

    @classmethod
    def from_entity(cls, r: MapRegion) -> RegionResponse:
        return cls(
            latitude=r.center.latitude,
            longitude=r.center.longitude,
            latitude_delta=r.latitude_delta,
            longitude_delta=r.longitude_delta,
        )


class MapResponse(BaseModel):
    region: RegionResponse
    markers: list[MarkerResponse] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    parkings_loaded: int = 0
    location_status: Optional[str] = None


class ErrorResponse(BaseModel):
    detail: str
