"""
Device location endpoints
=========================

PUT    /api/v1/location -- the device reports a position fix
DELETE /api/v1/location -- the device reports a refused / revoked permission
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from parking_map.api.dependencies import get_view_session
from parking_map.api.middleware import limiter
from parking_map.api.schemas import CoordinateRequest, ViewStateResponse
from parking_map.config import settings
from parking_map.domain.view import ViewSession

router = APIRouter(prefix="/location", tags=["location"])


@router.put("", response_model=ViewStateResponse, summary="Report a location fix")
@limiter.limit(settings.rate_limit)
async def report_location(
    request: Request,
    body: CoordinateRequest,
    session: ViewSession = Depends(get_view_session),
):
    session.report_location(body.to_coordinate())
    return ViewStateResponse.from_state(session.state)


@router.delete(
    "",
    response_model=ViewStateResponse,
    summary="Report that location permission was refused",
)
@limiter.limit(settings.rate_limit)
async def revoke_location(
    request: Request,
    session: ViewSession = Depends(get_view_session),
):
    session.revoke_location()
    return ViewStateResponse.from_state(session.state)
