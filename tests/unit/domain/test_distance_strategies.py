"""Tests for the distance strategies."""

import math

import pytest

from ridematch.domain.policies.distance_strategies import (
    build_strategy,
    flat_distance,
    orthodromic_distance,
)
from ridematch.domain.value_objects.enums import DistanceStrategyKind
from ridematch.domain.value_objects.geo_point import GeoPoint
from ridematch.domain.value_objects.measure_constants import MeasureConstants

SPB = GeoPoint(latitude=59.981557, longitude=30.214507)
CENTER = GeoPoint(latitude=59.93, longitude=30.30)
MOSCOW = GeoPoint(latitude=55.755826, longitude=37.617300)


# ─── orthodromic ────────────────────────────────────────────────────


def test_orthodromic_same_point():
    """Distance from a point to itself should be 0."""
    assert orthodromic_distance(SPB, SPB) == 0.0


def test_orthodromic_one_degree_of_latitude():
    d = orthodromic_distance(GeoPoint(latitude=0.0, longitude=0.0), GeoPoint(latitude=1.0, longitude=0.0))
    assert d == pytest.approx(111.1951, abs=1e-3)


def test_orthodromic_spb_to_moscow():
    """Saint Petersburg to Moscow is roughly 635 km in a straight line."""
    assert 600 < orthodromic_distance(SPB, MOSCOW) < 670


def test_orthodromic_is_symmetric():
    assert orthodromic_distance(SPB, MOSCOW) == pytest.approx(orthodromic_distance(MOSCOW, SPB))


def test_orthodromic_custom_radius_scales_linearly():
    d = orthodromic_distance(SPB, CENTER)
    assert orthodromic_distance(SPB, CENTER, earth_radius_km=2 * 6371.007177356707) == pytest.approx(2 * d)


# ─── flat ───────────────────────────────────────────────────────────


def test_flat_same_point():
    assert flat_distance(CENTER, CENTER) == 0.0


def test_flat_axis_aligned_offsets():
    origin = GeoPoint(latitude=60.0, longitude=30.0)
    assert flat_distance(origin, GeoPoint(latitude=61.0, longitude=30.0)) == pytest.approx(111.412)
    assert flat_distance(origin, GeoPoint(latitude=60.0, longitude=31.0)) == pytest.approx(55.8)


def test_flat_is_symmetric():
    assert flat_distance(SPB, CENTER) == pytest.approx(flat_distance(CENTER, SPB))


def test_flat_close_to_orthodromic_near_calibration_latitude():
    """Within the city both strategies should agree to a few percent."""
    flat = flat_distance(SPB, CENTER)
    ortho = orthodromic_distance(SPB, CENTER)
    assert flat == pytest.approx(ortho, rel=0.03)


def test_flat_custom_coefficients():
    origin = GeoPoint(latitude=0.0, longitude=0.0)
    target = GeoPoint(latitude=3.0, longitude=4.0)
    assert flat_distance(origin, target, lat_coef_km=1.0, lng_coef_km=1.0) == pytest.approx(5.0)


# ─── build_strategy ─────────────────────────────────────────────────


def test_build_orthodromic_uses_constants():
    constants = MeasureConstants(earth_radius_km=1.0)
    strategy = build_strategy(DistanceStrategyKind.ORTHODROMIC, constants)
    assert strategy(SPB, CENTER) == pytest.approx(orthodromic_distance(SPB, CENTER, earth_radius_km=1.0))


def test_build_flat_uses_constants():
    constants = MeasureConstants(lat_coef_km=1.0, lng_coef_km=1.0)
    strategy = build_strategy(DistanceStrategyKind.FLAT, constants)
    origin = GeoPoint(latitude=0.0, longitude=0.0)
    assert strategy(origin, GeoPoint(latitude=3.0, longitude=4.0)) == pytest.approx(5.0)


def test_build_distance_matrix_returns_given_lookup():
    def lookup(a, b):
        return 42.0

    strategy = build_strategy(DistanceStrategyKind.DISTANCE_MATRIX, MeasureConstants(), lookup)
    assert strategy(SPB, CENTER) == 42.0


def test_build_distance_matrix_without_lookup_raises():
    with pytest.raises(ValueError, match="no distance matrix is configured"):
        build_strategy(DistanceStrategyKind.DISTANCE_MATRIX, MeasureConstants())


# ─── Antipodal points ───────────────────────────────────────────────


def test_orthodromic_antipodal_sweep():
    """Rounding near h == 1 must not break the square root; result is half the circumference."""
    half_circumference = math.pi * 6371.007177356707
    for step in range(-180, 181):
        lat = step * 0.5
        d = orthodromic_distance(GeoPoint(latitude=lat, longitude=0.0), GeoPoint(latitude=-lat, longitude=180.0))
        assert d == pytest.approx(half_circumference, rel=1e-6), lat
