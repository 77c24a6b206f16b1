"""
Map view state.

Patterns used
-------------
- **State Pattern** on ``ViewState``: two small status machines enforce the
  location lifecycle (IDLE -> LOADING -> LOCATED | DENIED | UNAVAILABLE)
  and the address lookup lifecycle (IDLE -> PENDING -> RESOLVED | FAILED).
- ``ViewSession`` owns one ``ViewState`` and is the only writer of the
  display selection, which it replaces wholesale on every lookup.

Collaborator failures (permission refused, unresolvable address) are turned
into state here and never reach the selector.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .entities import Coordinate, MapRegion, MarkerDescriptor, ParkingRecord
from .enums import (
    LOCATION_TRANSITIONS,
    LOOKUP_TRANSITIONS,
    LocationStatus,
    LookupStatus,
    PinColor,
)
from .exceptions import InvalidReferenceCoordinate, InvalidStateTransition
from .selection import DEFAULT_LIMIT, check_reference, nearest_parkings

if TYPE_CHECKING:
    from parking_map.infrastructure.geocoding import AddressResolver
    from parking_map.infrastructure.repositories import ParkingRepository

logger = logging.getLogger(__name__)

USER_MARKER_TITLE = "Your position"


@dataclass
class ViewState:
    location_status: LocationStatus = LocationStatus.IDLE
    lookup_status: LookupStatus = LookupStatus.IDLE
    show_parkings: bool = True
    user_location: Optional[Coordinate] = None
    reference: Optional[Coordinate] = None
    selection: tuple[ParkingRecord, ...] = field(default_factory=tuple)
    last_address: Optional[str] = None
    last_error: Optional[str] = None

    def transition_location(self, new_status: LocationStatus) -> None:
        allowed = LOCATION_TRANSITIONS.get(self.location_status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition location from {self.location_status.value} "
                f"to {new_status.value}"
            )
        self.location_status = new_status

    def transition_lookup(self, new_status: LookupStatus) -> None:
        allowed = LOOKUP_TRANSITIONS.get(self.lookup_status, set())
        if new_status not in allowed:
            raise InvalidStateTransition(
                f"Cannot transition lookup from {self.lookup_status.value} "
                f"to {new_status.value}"
            )
        self.lookup_status = new_status


class ViewSession:
    """The app shell: what the map currently shows and why."""

    def __init__(
        self,
        repository: ParkingRepository,
        default_center: Coordinate,
        latitude_delta: float = 0.0922,
        longitude_delta: float = 0.0421,
    ):
        self.repository = repository
        self.default_center = default_center
        self.latitude_delta = latitude_delta
        self.longitude_delta = longitude_delta
        self.state = ViewState(selection=repository.all())

    # ── Location lifecycle ────────────────────────────────────────────

    def begin_locating(self) -> None:
        self.state.transition_location(LocationStatus.LOADING)

    def location_found(self, position: Coordinate) -> None:
        if not position.is_valid():
            raise InvalidReferenceCoordinate(
                f"device reported an invalid position: "
                f"({position.latitude}, {position.longitude})"
            )
        self.state.transition_location(LocationStatus.LOCATED)
        self.state.user_location = position
        self.state.last_error = None
        logger.info(
            "Location fix at (%.5f, %.5f)", position.latitude, position.longitude
        )

    def location_denied(self) -> None:
        self.state.transition_location(LocationStatus.DENIED)
        self.state.user_location = None
        self.state.last_error = "location permission denied"
        logger.info("Location permission denied")

    def location_unavailable(self, reason: str) -> None:
        self.state.transition_location(LocationStatus.UNAVAILABLE)
        self.state.user_location = None
        self.state.last_error = f"location unavailable: {reason}"
        logger.warning("Location unavailable: %s", reason)

    def report_location(self, position: Coordinate) -> None:
        """A fresh fix pushed by the device, whatever the current status."""
        if self.state.location_status != LocationStatus.LOADING:
            self.begin_locating()
        self.location_found(position)

    def revoke_location(self) -> None:
        if self.state.location_status != LocationStatus.LOADING:
            self.begin_locating()
        self.location_denied()

    # ── Lookups ───────────────────────────────────────────────────────

    def nearest_to_me(self, limit: int = DEFAULT_LIMIT) -> list[ParkingRecord]:
        if self.state.location_status != LocationStatus.LOCATED:
            raise InvalidReferenceCoordinate(
                f"location unavailable ({self.state.location_status.value})"
            )
        return self._select(self.state.user_location, limit)

    async def nearest_to_address(
        self,
        address: str,
        resolver: AddressResolver,
        limit: int = DEFAULT_LIMIT,
    ) -> list[ParkingRecord]:
        self.state.transition_lookup(LookupStatus.PENDING)
        self.state.last_address = address
        try:
            reference = check_reference(await resolver.resolve(address))
        except asyncio.CancelledError:
            self.state.transition_lookup(LookupStatus.FAILED)
            self.state.last_error = "address lookup cancelled"
            logger.info("Address lookup cancelled: %r", address)
            raise
        except Exception as exc:
            self.state.transition_lookup(LookupStatus.FAILED)
            self.state.last_error = str(exc)
            logger.info("Address lookup failed: %s", exc)
            raise
        self.state.transition_lookup(LookupStatus.RESOLVED)
        self.state.last_error = None
        return self._select(reference, limit)

    def show_all(self) -> list[ParkingRecord]:
        self.state.reference = None
        self.state.selection = self.repository.all()
        return list(self.state.selection)

    def set_visibility(self, show: bool) -> None:
        self.state.show_parkings = show

    def _select(
        self, reference: Optional[Coordinate], limit: int
    ) -> list[ParkingRecord]:
        selected = nearest_parkings(reference, self.repository.all(), limit)
        self.state.reference = reference
        self.state.selection = tuple(selected)
        return selected

    # ── Rendering descriptors ─────────────────────────────────────────

    def region(self) -> MapRegion:
        center = self.state.user_location or self.default_center
        return MapRegion(
            center=center,
            latitude_delta=self.latitude_delta,
            longitude_delta=self.longitude_delta,
        )

    def markers(self) -> list[MarkerDescriptor]:
        markers: list[MarkerDescriptor] = []
        if self.state.show_parkings:
            markers.extend(
                MarkerDescriptor(
                    position=p.position, title=p.name, description=p.address
                )
                for p in self.state.selection
            )
        if self.state.user_location is not None:
            markers.append(
                MarkerDescriptor(
                    position=self.state.user_location,
                    title=USER_MARKER_TITLE,
                    pin_color=PinColor.BLUE,
                )
            )
        return markers
