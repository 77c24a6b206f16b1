"""
Startup Location Fetch
======================

Runs once when the app starts: ask the geolocation provider for permission,
then for a position fix, under an explicit timeout
(``LOCATION_TIMEOUT_SECONDS``, default 10 s).

Outcomes
--------
* fix received        -> LOCATED, the map is framed on the user.
* permission refused  -> DENIED, "nearest to me" is rejected until a fix
  is reported.
* timeout / failure   -> UNAVAILABLE, the map stays framed on the default
  coordinate.

Nothing here raises to the caller: every failure becomes view state.
"""

from __future__ import annotations

import asyncio
import logging

from parking_map.domain.entities import Coordinate
from parking_map.domain.enums import LocationStatus
from parking_map.domain.exceptions import (
    InvalidReferenceCoordinate,
    LocationPermissionDenied,
)
from parking_map.domain.view import ViewSession
from parking_map.infrastructure.geolocation import GeolocationProvider

logger = logging.getLogger(__name__)

_task: asyncio.Task | None = None


# ── Public API ────────────────────────────────────────────────────────


async def start_location_fetch(
    session: ViewSession, provider: GeolocationProvider, timeout: float
) -> None:
    global _task
    _task = asyncio.create_task(locate(session, provider, timeout))
    logger.info("Location fetch started (timeout=%.1fs)", timeout)


async def stop_location_fetch() -> None:
    global _task
    if _task and not _task.done():
        _task.cancel()
        try:
            await _task
        except asyncio.CancelledError:
            pass
    _task = None


async def locate(
    session: ViewSession, provider: GeolocationProvider, timeout: float
) -> None:
    """Run one location fetch and record its outcome on *session*."""
    session.begin_locating()
    try:
        position = await asyncio.wait_for(_fetch(provider), timeout=timeout)
    except asyncio.CancelledError:
        if _still_loading(session):
            session.location_unavailable("location fetch cancelled")
        raise
    except Exception as exc:
        if not _still_loading(session):
            logger.info(
                "Location already settled, dropping startup fetch error: %s", exc
            )
            return
        if isinstance(exc, LocationPermissionDenied):
            session.location_denied()
        elif isinstance(exc, asyncio.TimeoutError):
            session.location_unavailable(f"no fix within {timeout:g}s")
        elif isinstance(exc, InvalidReferenceCoordinate):
            session.location_unavailable(str(exc))
        else:
            logger.exception("Geolocation provider failed")
            session.location_unavailable(str(exc) or type(exc).__name__)
    else:
        if _still_loading(session):
            session.location_found(position)
        else:
            logger.info("Location already settled, dropping startup fetch result")


# ── Internals ─────────────────────────────────────────────────────────


def _still_loading(session: ViewSession) -> bool:
    # A fix pushed by the device while we waited wins over this fetch.
    return session.state.location_status == LocationStatus.LOADING


async def _fetch(provider: GeolocationProvider) -> Coordinate:
    if not await provider.request_permission():
        raise LocationPermissionDenied("foreground location permission refused")
    position = await provider.current_position()
    if not position.is_valid():
        raise InvalidReferenceCoordinate(
            f"provider returned an invalid position: "
            f"({position.latitude}, {position.longitude})"
        )
    return position
