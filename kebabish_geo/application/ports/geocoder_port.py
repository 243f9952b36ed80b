"""Port interface for geocoding addresses to coordinates."""

from abc import ABC, abstractmethod

from kebabish_geo.domain.value_objects.geocoding_result import GeocodingResult


class GeocoderPort(ABC):
    @abstractmethod
    async def geocode(self, address: str) -> GeocodingResult | None:
        """Convert address string to lat/lon coordinates.

        Returns None if the address cannot be resolved, the lookup was
        rate-limited, or the provider failed. Never raises.
        """
        ...
