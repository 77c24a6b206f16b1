"""
Map view endpoints
==================

GET   /api/v1/view                     -- current view state
POST  /api/v1/view/nearest-to-me       -- 3 nearest to the user's position
POST  /api/v1/view/nearest-to-address  -- 3 nearest to a resolved address
POST  /api/v1/view/show-all            -- display the whole collection
PATCH /api/v1/view/visibility          -- show / hide parking markers
GET   /api/v1/view/map                 -- region + marker descriptors
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from parking_map.api.dependencies import get_address_resolver, get_view_session
from parking_map.api.middleware import limiter
from parking_map.api.schemas import (
    AddressLookupRequest,
    MapResponse,
    MarkerResponse,
    RegionResponse,
    SelectionResponse,
    ViewStateResponse,
    VisibilityRequest,
)
from parking_map.config import settings
from parking_map.domain.exceptions import (
    InvalidReferenceCoordinate,
    InvalidStateTransition,
    UnresolvableAddress,
)
from parking_map.domain.view import ViewSession
from parking_map.infrastructure.geocoding import AddressResolver

router = APIRouter(prefix="/view", tags=["view"])


@router.get("", response_model=ViewStateResponse, summary="Current view state")
@limiter.limit(settings.rate_limit)
async def get_view(
    request: Request,
    session: ViewSession = Depends(get_view_session),
):
    return ViewStateResponse.from_state(session.state)


@router.post(
    "/nearest-to-me",
    response_model=SelectionResponse,
    summary="Nearest parkings to the user's position",
    responses={409: {"description": "No location fix available."}},
)
@limiter.limit(settings.rate_limit)
async def nearest_to_me(
    request: Request,
    session: ViewSession = Depends(get_view_session),
):
    try:
        session.nearest_to_me(settings.nearest_limit)
    except InvalidReferenceCoordinate as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return SelectionResponse.from_state(session.state)


@router.post(
    "/nearest-to-address",
    response_model=SelectionResponse,
    summary="Nearest parkings to an address",
    responses={
        409: {"description": "Another lookup is still pending."},
        422: {"description": "The address could not be resolved."},
    },
)
@limiter.limit(settings.rate_limit)
async def nearest_to_address(
    request: Request,
    body: AddressLookupRequest,
    session: ViewSession = Depends(get_view_session),
    resolver: AddressResolver = Depends(get_address_resolver),
):
    try:
        await session.nearest_to_address(
            body.address, resolver, settings.nearest_limit
        )
    except (UnresolvableAddress, InvalidReferenceCoordinate) as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except InvalidStateTransition as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return SelectionResponse.from_state(session.state)


@router.post(
    "/show-all",
    response_model=SelectionResponse,
    summary="Display every parking",
)
@limiter.limit(settings.rate_limit)
async def show_all(
    request: Request,
    session: ViewSession = Depends(get_view_session),
):
    session.show_all()
    return SelectionResponse.from_state(session.state)


@router.patch(
    "/visibility",
    response_model=ViewStateResponse,
    summary="Show or hide parking markers",
)
@limiter.limit(settings.rate_limit)
async def set_visibility(
    request: Request,
    body: VisibilityRequest,
    session: ViewSession = Depends(get_view_session),
):
    session.set_visibility(body.show)
    return ViewStateResponse.from_state(session.state)


@router.get(
    "/map",
    response_model=MapResponse,
    summary="Region framing and markers to render",
)
@limiter.limit(settings.rate_limit)
async def get_map(
    request: Request,
    session: ViewSession = Depends(get_view_session),
):
    return MapResponse(
        region=RegionResponse.from_entity(session.region()),
        markers=[MarkerResponse.from_entity(m) for m in session.markers()],
    )
