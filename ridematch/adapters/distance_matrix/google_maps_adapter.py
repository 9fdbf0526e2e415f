"""Google Maps Distance Matrix adapter — implements DistanceMatrixPort."""

from __future__ import annotations

import logging
import time
from collections import OrderedDict

import httpx

from ridematch.application.ports.distance_matrix_port import (
    DistanceMatrixError,
    DistanceMatrixPort,
    InvalidCoordinatesError,
    RateLimitedError,
    ServiceUnavailableError,
)
from ridematch.config import settings
from ridematch.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

GOOGLE_DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"

# Top-level "status" values of a Distance Matrix response
_RATE_LIMIT_STATUSES = {"OVER_QUERY_LIMIT", "OVER_DAILY_LIMIT", "MAX_ELEMENTS_EXCEEDED"}
_UNAVAILABLE_STATUSES = {"UNKNOWN_ERROR"}
_INVALID_STATUSES = {"INVALID_REQUEST", "MAX_DIMENSIONS_EXCEEDED"}

# Per-element "status" values meaning the pair cannot be routed
_UNROUTABLE_ELEMENT_STATUSES = {"NOT_FOUND", "ZERO_RESULTS", "MAX_ROUTE_LENGTH_EXCEEDED"}


class GoogleMapsDistanceMatrixAdapter(DistanceMatrixPort):
    """Google Maps implementation of DistanceMatrixPort.

    Retryable failures (timeouts, 5xx, throttling) are retried up to
    ``max_retries`` times with exponential backoff starting at ``backoff_s``,
    then re-raised. Fatal failures raise at once. At most ``cache_size``
    distances are kept, least recently used evicted first.
    """

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_s: float | None = None,
        cache_size: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._api_key = api_key or settings.google_maps_api_key
        if not self._api_key:
            raise ValueError("Google Maps API key is not set. Set GOOGLE_MAPS_API_KEY in the .env file.")
        self._timeout = timeout if timeout is not None else settings.distance_matrix_timeout
        self._max_retries = max_retries if max_retries is not None else settings.distance_matrix_max_retries
        self._backoff_s = backoff_s if backoff_s is not None else settings.distance_matrix_backoff_s
        self._cache_size = cache_size if cache_size is not None else settings.distance_matrix_cache_size
        self._client = httpx.Client(timeout=self._timeout, transport=transport)
        self._cache: OrderedDict[tuple[float, float, float, float], float] = OrderedDict()

    def close(self) -> None:
        self._client.close()

    def distance_km(self, origin: GeoPoint, destination: GeoPoint) -> float:
        """Road distance in km between two points (cached per pair)."""
        cache_key = (origin.latitude, origin.longitude, destination.latitude, destination.longitude)
        if cache_key in self._cache:
            logger.debug("Cache hit for %s → %s", origin, destination)
            self._cache.move_to_end(cache_key)
            return self._cache[cache_key]

        attempt = 0
        while True:
            try:
                distance = self._request(origin, destination)
                break
            except DistanceMatrixError as e:
                if not e.retryable or attempt >= self._max_retries:
                    raise
                attempt += 1
                delay = self._backoff_s * 2 ** (attempt - 1)
                logger.warning(
                    "Distance matrix lookup %s → %s failed (%s), retry %d/%d in %.2fs",
                    origin, destination, e, attempt, self._max_retries, delay,
                )
                time.sleep(delay)

        self._cache[cache_key] = distance
        if len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)
        return distance

    def _request(self, origin: GeoPoint, destination: GeoPoint) -> float:
        try:
            response = self._client.get(
                GOOGLE_DISTANCE_MATRIX_URL,
                params={
                    "origins": f"{origin.latitude},{origin.longitude}",
                    "destinations": f"{destination.latitude},{destination.longitude}",
                    "units": "metric",
                    "key": self._api_key,
                },
            )
        except httpx.TimeoutException as e:
            raise ServiceUnavailableError(f"Distance matrix request timed out: {e}") from e
        except httpx.TransportError as e:
            raise ServiceUnavailableError(f"Distance matrix transport error: {e}") from e

        if response.status_code == 429:
            raise RateLimitedError("Distance matrix rate limit hit (HTTP 429)")
        if response.status_code >= 500:
            raise ServiceUnavailableError(f"Distance matrix service error (HTTP {response.status_code})")
        if response.status_code >= 400:
            raise DistanceMatrixError(f"Distance matrix request rejected (HTTP {response.status_code})")

        data = response.json()
        return self._parse(data, origin, destination)

    @staticmethod
    def _parse(data: dict, origin: GeoPoint, destination: GeoPoint) -> float:
        """Extract the single element distance (metres → km) or raise a classified error."""
        status = data.get("status")
        message = data.get("error_message", status)
        if status != "OK":
            if status in _RATE_LIMIT_STATUSES:
                raise RateLimitedError(f"Distance matrix rate limited: {message}")
            if status in _UNAVAILABLE_STATUSES:
                raise ServiceUnavailableError(f"Distance matrix unavailable: {message}")
            if status in _INVALID_STATUSES:
                raise InvalidCoordinatesError(f"Distance matrix rejected {origin} → {destination}: {message}")
            raise DistanceMatrixError(f"Distance matrix error: {message}")

        try:
            element = data["rows"][0]["elements"][0]
        except (KeyError, IndexError) as e:
            raise DistanceMatrixError("Distance matrix response has no elements") from e

        element_status = element.get("status")
        if element_status in _UNROUTABLE_ELEMENT_STATUSES:
            raise InvalidCoordinatesError(f"No route {origin} → {destination}: {element_status}")
        if element_status != "OK":
            raise DistanceMatrixError(f"Distance matrix element error: {element_status}")

        distance_km = element["distance"]["value"] / 1000.0
        logger.info("Google Maps distance %s → %s = %.3f km", origin, destination, distance_km)
        return distance_km
