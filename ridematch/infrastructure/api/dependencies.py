"""Dependency wiring — builds the measure policy and use case from settings."""

from __future__ import annotations

import logging

from ridematch.adapters.distance_matrix.google_maps_adapter import GoogleMapsDistanceMatrixAdapter
from ridematch.application.ports.distance_matrix_port import DistanceMatrixPort
from ridematch.application.use_cases.suggest_drivers import SuggestDriversUseCase
from ridematch.config import Settings, settings
from ridematch.domain.policies.measure_policy import MeasurePolicy

logger = logging.getLogger(__name__)


def build_distance_matrix(config: Settings) -> DistanceMatrixPort | None:
    """Return a distance-matrix client when enabled, else None.

    Raises:
        ValueError: if the distance matrix is enabled without an API key.
    """
    if not config.distance_matrix_enabled:
        return None
    logger.info("Using Google Maps distance matrix for all measures")
    return GoogleMapsDistanceMatrixAdapter(
        api_key=config.google_maps_api_key,
        timeout=config.distance_matrix_timeout,
        max_retries=config.distance_matrix_max_retries,
        backoff_s=config.distance_matrix_backoff_s,
        cache_size=config.distance_matrix_cache_size,
    )


def build_measure_policy(
    config: Settings,
    distance_matrix: DistanceMatrixPort | None = None,
) -> MeasurePolicy:
    return MeasurePolicy(
        departure=config.departure_point(),
        constants=config.measure_constants(),
        distance_matrix=distance_matrix.distance_km if distance_matrix else None,
    )


# Process-wide singletons, built on first request and released on shutdown
_distance_matrix: DistanceMatrixPort | None = None
_policy: MeasurePolicy | None = None


def get_measure_policy() -> MeasurePolicy:
    global _distance_matrix, _policy
    if _policy is None:
        _distance_matrix = build_distance_matrix(settings)
        _policy = build_measure_policy(settings, _distance_matrix)
    return _policy


def close_dependencies() -> None:
    """Close the distance-matrix client of the default policy, if one was built."""
    global _distance_matrix, _policy
    if _distance_matrix is not None:
        _distance_matrix.close()
        logger.info("Distance matrix client closed")
    _distance_matrix = None
    _policy = None


def get_suggest_drivers_uc() -> SuggestDriversUseCase:
    return SuggestDriversUseCase(policy=get_measure_policy())
