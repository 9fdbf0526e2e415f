"""Port interface for an external road distance-matrix service."""

from abc import ABC, abstractmethod

from ridematch.domain.value_objects.geo_point import GeoPoint


class DistanceMatrixError(Exception):
    """Base error of a distance-matrix lookup.

    ``retryable`` tells the caller whether repeating the same request may
    succeed (timeouts, throttling) or is pointless (bad coordinates, denied key).
    """

    retryable: bool = False


class ServiceUnavailableError(DistanceMatrixError):
    retryable = True


class RateLimitedError(DistanceMatrixError):
    retryable = True


class InvalidCoordinatesError(DistanceMatrixError):
    retryable = False


class DistanceMatrixPort(ABC):
    @abstractmethod
    def distance_km(self, origin: GeoPoint, destination: GeoPoint) -> float:
        """Return the road distance in km from origin to destination.

        Raises:
            ServiceUnavailableError: service timed out or failed (retryable).
            RateLimitedError: request quota exceeded (retryable).
            InvalidCoordinatesError: service cannot route these points (fatal).
            DistanceMatrixError: any other fatal failure.
        """
        ...

    def close(self) -> None:
        """Release held connections. No-op by default."""
        return None
