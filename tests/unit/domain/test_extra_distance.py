"""Tests for the extra distance formula."""

import pytest

from ridematch.domain.policies.distance_strategies import flat_distance, orthodromic_distance
from ridematch.domain.policies.extra_distance import extra_distance
from ridematch.domain.value_objects.geo_point import GeoPoint

DEPARTURE = GeoPoint(latitude=59.981557, longitude=30.214507)
PASSENGER = GeoPoint(latitude=59.93, longitude=30.30)
DRIVER = GeoPoint(latitude=59.95, longitude=30.25)


@pytest.mark.parametrize("strategy", [flat_distance, orthodromic_distance])
def test_extra_distance_matches_formula(strategy):
    expected = (
        strategy(DEPARTURE, PASSENGER)
        + strategy(PASSENGER, DRIVER)
        - strategy(DEPARTURE, DRIVER)
    )
    assert extra_distance(DEPARTURE, PASSENGER, DRIVER, strategy) == expected


def test_extra_distance_zero_when_driver_goes_to_passenger_destination():
    assert extra_distance(DEPARTURE, PASSENGER, PASSENGER, flat_distance) == pytest.approx(0.0)


def test_extra_distance_all_points_identical():
    assert extra_distance(DEPARTURE, DEPARTURE, DEPARTURE, orthodromic_distance) == 0.0


def test_extra_distance_can_be_negative():
    """An asymmetric (road-like) strategy may make the detour cheaper."""
    costs = {
        (DEPARTURE, PASSENGER): 1.0,
        (PASSENGER, DRIVER): 1.0,
        (DEPARTURE, DRIVER): 5.0,
    }

    def strategy(a, b):
        return costs[(a, b)]

    assert extra_distance(DEPARTURE, PASSENGER, DRIVER, strategy) == -3.0


def test_extra_distance_calls_strategy_in_order():
    calls = []

    def strategy(a, b):
        calls.append((a, b))
        return 0.0

    extra_distance(DEPARTURE, PASSENGER, DRIVER, strategy)
    assert calls == [(DEPARTURE, PASSENGER), (PASSENGER, DRIVER), (DEPARTURE, DRIVER)]
