from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LocationDomain:
    id: int
    title: str
    city: str
    state: str
    country: str
    zip_code: str
