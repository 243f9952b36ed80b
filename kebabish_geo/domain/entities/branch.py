"""Branch entity — a restaurant outlet with an optional GPS location."""

from dataclasses import dataclass

from kebabish_geo.domain.value_objects.geo_point import GeoPoint


@dataclass
class Branch:
    id: str
    name: str
    city: str
    address: str | None = None
    location: GeoPoint | None = None
    is_active: bool = True
