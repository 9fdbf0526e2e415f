"""Pytest configuration and shared fixtures."""

import pytest

from ridematch.domain.entities.person import Person
from ridematch.domain.policies.measure_policy import MeasurePolicy
from ridematch.domain.value_objects.geo_point import GeoPoint


@pytest.fixture
def departure():
    """Saint Petersburg departure point used across the sample data."""
    return GeoPoint(latitude=59.981557, longitude=30.214507)


@pytest.fixture
def policy(departure):
    return MeasurePolicy(departure=departure)


@pytest.fixture
def passenger():
    return Person(destination=GeoPoint(latitude=59.93, longitude=30.30), id="passenger-1")


@pytest.fixture
def near_driver():
    return Person(destination=GeoPoint(latitude=59.95, longitude=30.25), id="driver-near")


@pytest.fixture
def far_driver():
    return Person(destination=GeoPoint(latitude=60.50, longitude=31.00), id="driver-far")
