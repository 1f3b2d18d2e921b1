from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Location


class LocationRepository(Protocol):
    def get_by_id(self, location_id: int) -> Optional[Location]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Location]:
        raise NotImplementedError

    def create(self, *, name: str, latitude: float, longitude: float, radius_meters: float) -> int:
        raise NotImplementedError

    def update(self, *, location_id: int, name: str, latitude: float, longitude: float, radius_meters: float) -> bool:
        raise NotImplementedError
