"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health -- health check with dataset and location status
"""

from fastapi import APIRouter, Depends

from parking_map.api.dependencies import get_repository, get_view_session
from parking_map.api.schemas import HealthResponse
from parking_map.domain.view import ViewSession
from parking_map.infrastructure.repositories import ParkingRepository

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(
    repo: ParkingRepository = Depends(get_repository),
    session: ViewSession = Depends(get_view_session),
):
    return HealthResponse(
        parkings_loaded=len(repo),
        location_status=session.state.location_status.value,
    )
