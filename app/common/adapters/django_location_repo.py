from __future__ import annotations

from typing import Optional

from django.db import transaction
from location.domain.location import LocationDomain
from location.models import Location


def to_location_domain(obj: Location) -> LocationDomain:
    return LocationDomain(
        id=int(obj.id),
        title=obj.title,
        city=obj.city,
        state=obj.state,
        country=obj.country,
        zip_code=obj.zip_code,
    )


class DjangoLocationRepository:
    def exists(self, location_id: int) -> bool:
        return Location.objects.filter(id=location_id).exists()

    def get_by_id(self, location_id: int) -> Optional[LocationDomain]:
        obj = Location.objects.filter(id=location_id).first()
        return to_location_domain(obj) if obj is not None else None

    def list_all(self) -> list[LocationDomain]:
        return [to_location_domain(obj) for obj in Location.objects.order_by("id")]

    def insert(
        self,
        *,
        title: str,
        city: str,
        state: str,
        country: str,
        zip_code: str,
    ) -> LocationDomain:
        with transaction.atomic():
            obj = Location.objects.create(
                title=title,
                city=city,
                state=state,
                country=country,
                zip_code=zip_code,
            )
        return to_location_domain(obj)

    def update(self, location: LocationDomain) -> LocationDomain:
        with transaction.atomic():
            Location.objects.filter(id=location.id).update(
                title=location.title,
                city=location.city,
                state=location.state,
                country=location.country,
                zip_code=location.zip_code,
            )
        return location
