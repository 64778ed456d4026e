from __future__ import annotations

from common.adapters.django_location_repo import DjangoLocationRepository
from common.ports.location_repo import LocationRepositoryPort


def build_location_repository() -> LocationRepositoryPort:
    return DjangoLocationRepository()
