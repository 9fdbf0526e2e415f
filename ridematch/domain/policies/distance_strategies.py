"""DistanceStrategy — interchangeable "distance between two points" functions.

All strategies take two GeoPoints in degrees and return kilometres.
"""

from __future__ import annotations

import math
from functools import partial
from typing import Callable

from ridematch.domain.value_objects.enums import DistanceStrategyKind
from ridematch.domain.value_objects.geo_point import GeoPoint
from ridematch.domain.value_objects.measure_constants import (
    EARTH_RADIUS_KM,
    LAT_COEF_KM,
    LNG_COEF_KM,
    MeasureConstants,
)

DistanceStrategy = Callable[[GeoPoint, GeoPoint], float]


def orthodromic_distance(
    a: GeoPoint,
    b: GeoPoint,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> float:
    """Great-circle distance in km using the Haversine formula."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push h just past 1 for near-antipodal points
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return earth_radius_km * c


def flat_distance(
    a: GeoPoint,
    b: GeoPoint,
    lat_coef_km: float = LAT_COEF_KM,
    lng_coef_km: float = LNG_COEF_KM,
) -> float:
    """Euclidean distance in km on a local flat projection.

    Only meaningful for short hops near the latitude the coefficients were
    calibrated for.
    """
    dy = (b.latitude - a.latitude) * lat_coef_km
    dx = (b.longitude - a.longitude) * lng_coef_km
    return math.sqrt(dy * dy + dx * dx)


def build_strategy(
    kind: DistanceStrategyKind,
    constants: MeasureConstants,
    distance_matrix: DistanceStrategy | None = None,
) -> DistanceStrategy:
    """Bind a strategy kind to a concrete distance function.

    ``distance_matrix`` is the bound lookup of a distance-matrix client, e.g.
    ``adapter.distance_km``.

    Raises:
        ValueError: if the distance-matrix strategy is requested without one.
    """
    if kind == DistanceStrategyKind.ORTHODROMIC:
        return partial(orthodromic_distance, earth_radius_km=constants.earth_radius_km)
    if kind == DistanceStrategyKind.FLAT:
        return partial(
            flat_distance,
            lat_coef_km=constants.lat_coef_km,
            lng_coef_km=constants.lng_coef_km,
        )
    if kind == DistanceStrategyKind.DISTANCE_MATRIX:
        if distance_matrix is None:
            raise ValueError("Distance matrix strategy requested but no distance matrix is configured")
        return distance_matrix
    raise ValueError(f"Unknown distance strategy: {kind!r}")
