from __future__ import annotations

from typing import Optional, Protocol

from location.domain.location import LocationDomain


class LocationRepositoryPort(Protocol):
    def exists(self, location_id: int) -> bool: ...

    def get_by_id(self, location_id: int) -> Optional[LocationDomain]: ...

    def list_all(self) -> list[LocationDomain]: ...

    def insert(
        self,
        *,
        title: str,
        city: str,
        state: str,
        country: str,
        zip_code: str,
    ) -> LocationDomain: ...

    def update(self, location: LocationDomain) -> LocationDomain: ...
