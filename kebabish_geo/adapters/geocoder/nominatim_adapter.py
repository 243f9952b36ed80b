"""Nominatim geocoder adapter — implements GeocoderPort."""

from __future__ import annotations

import asyncio
import functools
import logging

import httpx

from kebabish_geo.adapters.geocoder.rate_limiter import AddressRateLimiter
from kebabish_geo.adapters.geocoder.result_cache import GeocodeCache
from kebabish_geo.adapters.geocoder.schemas import NominatimPlace
from kebabish_geo.application.ports.geocoder_port import GeocoderPort
from kebabish_geo.config import settings
from kebabish_geo.domain.value_objects.address import normalize_address
from kebabish_geo.domain.value_objects.geocoding_result import GeocodingResult

logger = logging.getLogger(__name__)


class NominatimAdapter(GeocoderPort):
    """Nominatim geocoding with a result cache and a per-address rate limit.

    One instance is built at application start and shared; the cache, the
    rate limiter and the in-flight registry live on the instance.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        base_url: str | None = None,
        cache: GeocodeCache | None = None,
        rate_limiter: AddressRateLimiter | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout
        self._base_url = base_url or settings.geocoder_base_url
        self._cache = cache if cache is not None else GeocodeCache(
            max_size=settings.geocoder_cache_max_size,
            ttl_seconds=settings.geocoder_cache_ttl_seconds,
        )
        self._rate_limiter = rate_limiter if rate_limiter is not None else AddressRateLimiter(
            max_requests=settings.geocoder_rate_limit_max_requests,
            window_seconds=settings.geocoder_rate_limit_window_seconds,
        )
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()
        self._in_flight: dict[str, asyncio.Task[GeocodingResult | None]] = {}

    @property
    def cache(self) -> GeocodeCache:
        return self._cache

    @property
    def rate_limiter(self) -> AddressRateLimiter:
        return self._rate_limiter

    async def geocode(self, address: str) -> GeocodingResult | None:
        """Geocode an address string.

        Strategy:
        1. Check in-memory cache (negative results included)
        2. Join an identical lookup already in flight
        3. Check the per-address rate limit
        4. Query Nominatim and cache the outcome
        """
        cache_key = normalize_address(address)

        cached = self._cache.get(cache_key)
        if cached is not None:
            logger.debug("Cache hit for '%s'", address)
            return cached.result

        task = self._in_flight.get(cache_key)
        if task is None:
            if not self._rate_limiter.is_allowed(cache_key):
                logger.warning("Geocoding rate limit exceeded for address: %s", cache_key[:20])
                return None

            task = asyncio.ensure_future(self._nominatim_lookup(address, cache_key))
            self._in_flight[cache_key] = task
            task.add_done_callback(functools.partial(self._forget_in_flight, cache_key))
        else:
            logger.debug("Joining in-flight lookup for '%s'", address)

        # Shielded so one cancelled caller does not abort the lookup for the others
        return await asyncio.shield(task)

    async def _nominatim_lookup(self, address: str, cache_key: str) -> GeocodingResult | None:
        """Query Nominatim. Transient failures are logged and never cached."""
        try:
            response = await self._client.get(
                self._base_url,
                params={
                    "q": address,
                    "format": "json",
                    "limit": 1,
                },
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )

            if not response.is_success:
                logger.error(
                    "Geocoding API error for '%s': %s %s",
                    address,
                    response.status_code,
                    response.reason_phrase,
                )
                return None

            results = response.json()

            if not results:
                logger.warning("No geocoding results for address: %s", address)
                self._cache.put(cache_key, None)
                return None

            place = NominatimPlace.model_validate(results[0])
            result = GeocodingResult(
                latitude=place.lat,
                longitude=place.lon,
                display_name=place.display_name,
            )
            logger.info(
                "Nominatim resolved '%s' → (%f, %f)", address, result.latitude, result.longitude
            )

            self._cache.put(cache_key, result)
            self._rate_limiter.record(cache_key)
            return result

        except Exception:
            logger.exception("Geocoding error for '%s'", address)
            return None

    def _forget_in_flight(self, cache_key: str, task: asyncio.Task) -> None:
        if self._in_flight.get(cache_key) is task:
            del self._in_flight[cache_key]

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
