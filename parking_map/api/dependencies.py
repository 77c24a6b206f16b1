"""FastAPI dependency injection helpers.

Each collaborator is built once per process; tests swap them through
``app.dependency_overrides``.
"""

from functools import lru_cache

from parking_map.config import settings
from parking_map.domain.entities import Coordinate
from parking_map.domain.view import ViewSession
from parking_map.infrastructure.geocoding import (
    AddressResolver,
    build_address_resolver,
)
from parking_map.infrastructure.geolocation import (
    GeolocationProvider,
    build_geolocation_provider,
)
from parking_map.infrastructure.repositories import ParkingRepository


@lru_cache
def get_repository() -> ParkingRepository:
    """Load the bundled dataset on first use; raises ``DatasetError``."""
    return ParkingRepository.from_file(settings.dataset_path)


@lru_cache
def get_address_resolver() -> AddressResolver:
    return build_address_resolver(settings)


@lru_cache
def get_geolocation_provider() -> GeolocationProvider:
    return build_geolocation_provider(settings)


@lru_cache
def get_view_session() -> ViewSession:
    return ViewSession(
        get_repository(),
        default_center=Coordinate(settings.default_latitude, settings.default_longitude),
        latitude_delta=settings.region_latitude_delta,
        longitude_delta=settings.region_longitude_delta,
    )
