"""
Startup location fetch tests.

Demonstrates:
1. Permission refusal and timeouts become observable view state.
2. A fix pushed by the device while the fetch is pending is kept.
3. Stopping the worker cancels a pending fetch.
"""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock

import pytest

from parking_map.config import Settings
from parking_map.domain.entities import Coordinate
from parking_map.domain.enums import LocationStatus
from parking_map.infrastructure.geolocation import (
    GeolocationProvider,
    StaticGeolocationProvider,
    build_geolocation_provider,
)
from parking_map.workers import locator


class _SlowProvider(GeolocationProvider):
    def __init__(self, position: Coordinate, release: asyncio.Event | None = None):
        self.position = position
        self.release = release

    async def request_permission(self) -> bool:
        return True

    async def current_position(self) -> Coordinate:
        if self.release is None:
            await asyncio.sleep(10)
        else:
            await self.release.wait()
        return self.position


class TestLocate:
    @pytest.mark.asyncio
    async def test_granted_permission_locates(self, view_session, reference):
        provider = StaticGeolocationProvider(reference, granted=True)
        await locator.locate(view_session, provider, timeout=1.0)
        assert view_session.state.location_status == LocationStatus.LOCATED
        assert view_session.state.user_location == reference

    @pytest.mark.asyncio
    async def test_refused_permission_is_denied(self, view_session, reference):
        provider = StaticGeolocationProvider(reference, granted=False)
        await locator.locate(view_session, provider, timeout=1.0)
        assert view_session.state.location_status == LocationStatus.DENIED
        assert view_session.state.user_location is None

    @pytest.mark.asyncio
    async def test_position_not_requested_when_denied(self, view_session):
        provider = AsyncMock(spec=GeolocationProvider)
        provider.request_permission = AsyncMock(return_value=False)
        await locator.locate(view_session, provider, timeout=1.0)
        provider.current_position.assert_not_called()

    @pytest.mark.asyncio
    async def test_timeout_is_unavailable(self, view_session, reference):
        provider = _SlowProvider(reference)
        await locator.locate(view_session, provider, timeout=0.05)
        assert view_session.state.location_status == LocationStatus.UNAVAILABLE
        assert "no fix within" in view_session.state.last_error
        # map stays framed on the default coordinate
        assert view_session.region().center == reference

    @pytest.mark.asyncio
    async def test_provider_failure_is_unavailable(self, view_session):
        provider = AsyncMock(spec=GeolocationProvider)
        provider.request_permission = AsyncMock(return_value=True)
        provider.current_position = AsyncMock(side_effect=OSError("GPS off"))
        await locator.locate(view_session, provider, timeout=1.0)
        assert view_session.state.location_status == LocationStatus.UNAVAILABLE
        assert view_session.state.last_error == "location unavailable: GPS off"

    @pytest.mark.asyncio
    async def test_invalid_fix_is_unavailable(self, view_session):
        provider = StaticGeolocationProvider(Coordinate(120.0, 0.0))
        await locator.locate(view_session, provider, timeout=1.0)
        assert view_session.state.location_status == LocationStatus.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_device_fix_wins_over_pending_fetch(self, view_session, caplog):
        caplog.set_level(logging.INFO, logger="parking_map.workers.locator")
        release = asyncio.Event()
        provider = _SlowProvider(Coordinate(44.20, -0.10), release)
        task = asyncio.create_task(locator.locate(view_session, provider, timeout=1.0))
        await asyncio.sleep(0)

        pushed = Coordinate(44.84, -0.58)
        view_session.report_location(pushed)
        release.set()
        await task

        assert view_session.state.location_status == LocationStatus.LOCATED
        assert view_session.state.user_location == pushed
        assert "dropping startup fetch result" in caplog.text


class TestWorkerLifecycle:
    @pytest.mark.asyncio
    async def test_start_then_stop_cancels(self, view_session, reference, caplog):
        caplog.set_level(logging.INFO, logger="parking_map.workers.locator")
        await locator.start_location_fetch(
            view_session, _SlowProvider(reference), timeout=5.0
        )
        await asyncio.sleep(0)
        await locator.stop_location_fetch()
        assert view_session.state.location_status == LocationStatus.UNAVAILABLE
        assert "dropping" not in caplog.text

    @pytest.mark.asyncio
    async def test_stop_after_completion_is_noop(self, view_session, reference):
        await locator.start_location_fetch(
            view_session, StaticGeolocationProvider(reference), timeout=1.0
        )
        await asyncio.sleep(0.05)
        await locator.stop_location_fetch()
        assert view_session.state.location_status == LocationStatus.LOCATED


class TestBuildGeolocationProvider:
    @pytest.mark.asyncio
    async def test_no_configured_position_refuses(self):
        provider = build_geolocation_provider(Settings())
        assert await provider.request_permission() is False

    @pytest.mark.asyncio
    async def test_configured_position(self):
        provider = build_geolocation_provider(
            Settings(device_latitude=44.84, device_longitude=-0.58)
        )
        assert await provider.request_permission() is True
        assert await provider.current_position() == Coordinate(44.84, -0.58)
