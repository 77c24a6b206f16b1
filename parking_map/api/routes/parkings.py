"""
Parking endpoints
=================

GET  /api/v1/parkings         -- the whole bundled collection
POST /api/v1/parkings/nearest -- nearest parkings to an explicit coordinate
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from parking_map.api.dependencies import get_repository
from parking_map.api.middleware import limiter
from parking_map.api.schemas import NearestRequest, ParkingResponse
from parking_map.config import settings
from parking_map.domain.selection import rank_parkings
from parking_map.infrastructure.repositories import ParkingRepository

router = APIRouter(prefix="/parkings", tags=["parkings"])


@router.get(
    "",
    response_model=list[ParkingResponse],
    summary="List every parking in the dataset",
)
@limiter.limit(settings.rate_limit)
async def list_parkings(
    request: Request,
    repo: ParkingRepository = Depends(get_repository),
):
    return [ParkingResponse.from_entity(p) for p in repo.all()]


@router.post(
    "/nearest",
    response_model=list[ParkingResponse],
    summary="Nearest parkings to a coordinate",
    description=(
        "Stateless access to the selector: does not change what the map "
        "view displays."
    ),
)
@limiter.limit(settings.rate_limit)
async def nearest(
    request: Request,
    body: NearestRequest,
    repo: ParkingRepository = Depends(get_repository),
):
    ranked = rank_parkings(body.to_coordinate(), repo.all())
    return [
        ParkingResponse.from_entity(p, distance_km=d)
        for p, d in ranked[: body.limit]
    ]
