"""
Device geolocation collaborator.

The provider first asks for foreground location permission, then returns a
single position fix.  ``StaticGeolocationProvider`` serves a configured
position; devices can also push fixes through the API.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from parking_map.config import Settings
from parking_map.domain.entities import Coordinate


class GeolocationProvider(ABC):
    @abstractmethod
    async def request_permission(self) -> bool: ...

    @abstractmethod
    async def current_position(self) -> Coordinate: ...


class StaticGeolocationProvider(GeolocationProvider):
    def __init__(self, position: Optional[Coordinate], granted: bool = True):
        self.position = position
        self.granted = granted

    async def request_permission(self) -> bool:
        # No configured fix behaves like a refused permission.
        return self.granted and self.position is not None

    async def current_position(self) -> Coordinate:
        if self.position is None:
            raise RuntimeError("No position configured")
        return self.position


def build_geolocation_provider(settings: Settings) -> GeolocationProvider:
    position = None
    if settings.device_latitude is not None and settings.device_longitude is not None:
        position = Coordinate(settings.device_latitude, settings.device_longitude)
    return StaticGeolocationProvider(
        position, granted=settings.location_permission_granted
    )
