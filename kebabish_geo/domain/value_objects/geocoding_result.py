"""GeocodingResult value object — a resolved address."""

from dataclasses import dataclass

from kebabish_geo.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class GeocodingResult:
    latitude: float
    longitude: float
    display_name: str

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)
