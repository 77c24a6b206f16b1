"""
Address resolution.

Real geocoding is out of scope: ``StaticAddressResolver`` is the
placeholder the map ships with and answers every non-blank address with one
configured coordinate.  ``GazetteerAddressResolver`` answers from a fixed
table.  Both satisfy ``AddressResolver`` and are injected into the API, so a
real geocoding client can replace them without touching the selector.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from parking_map.config import Settings
from parking_map.domain.entities import Coordinate
from parking_map.domain.exceptions import UnresolvableAddress


def normalize_address(address: str) -> str:
    return " ".join(address.split()).casefold()


class AddressResolver(ABC):
    @abstractmethod
    async def resolve(self, address: str) -> Coordinate: ...


class StaticAddressResolver(AddressResolver):
    def __init__(self, coordinate: Coordinate):
        self.coordinate = coordinate

    async def resolve(self, address: str) -> Coordinate:
        if not address.strip():
            raise UnresolvableAddress(address, "empty address")
        return self.coordinate


class GazetteerAddressResolver(AddressResolver):
    def __init__(self, entries: Mapping[str, Coordinate]):
        self.entries = {normalize_address(k): v for k, v in entries.items()}

    async def resolve(self, address: str) -> Coordinate:
        key = normalize_address(address)
        if not key:
            raise UnresolvableAddress(address, "empty address")
        try:
            return self.entries[key]
        except KeyError:
            raise UnresolvableAddress(address, "unknown address") from None


def build_address_resolver(settings: Settings) -> AddressResolver:
    if settings.address_gazetteer:
        return GazetteerAddressResolver(
            {
                address: Coordinate(lat, lon)
                for address, (lat, lon) in settings.address_gazetteer.items()
            }
        )
    return StaticAddressResolver(
        Coordinate(settings.geocoder_latitude, settings.geocoder_longitude)
    )
