"""MeasurePolicy — choose a distance strategy per passenger/driver pair and measure the detour."""

from __future__ import annotations

from dataclasses import dataclass, field

from ridematch.domain.entities.person import Person
from ridematch.domain.policies.distance_strategies import DistanceStrategy, build_strategy
from ridematch.domain.policies.extra_distance import extra_distance
from ridematch.domain.value_objects.enums import DistanceStrategyKind
from ridematch.domain.value_objects.geo_point import GeoPoint
from ridematch.domain.value_objects.measure_constants import MeasureConstants


@dataclass(frozen=True)
class DriverMeasure:
    """Result of measuring one driver against a passenger."""

    driver: Person
    value: float  # extra km, lower is better
    strategy: DistanceStrategyKind


@dataclass(frozen=True)
class MeasurePolicy:
    """Stateless detour measure bound to a departure point and constants.

    When ``distance_matrix`` is given (the lookup of an external distance-matrix
    client) every pair is measured with it. Otherwise the accumulated latitude
    gap decides between the flat projection and the great-circle formula.
    """

    departure: GeoPoint
    constants: MeasureConstants = field(default_factory=MeasureConstants)
    distance_matrix: DistanceStrategy | None = None

    @property
    def distance_matrix_available(self) -> bool:
        return self.distance_matrix is not None

    def accumulated_latitude_difference(self, passenger: Person, driver: Person) -> float:
        """|departure - passenger| + |passenger - driver| in degrees of latitude."""
        passenger_lat = passenger.destination.latitude
        return (
            abs(self.departure.latitude - passenger_lat)
            + abs(passenger_lat - driver.destination.latitude)
        )

    def select_strategy(self, passenger: Person, driver: Person) -> DistanceStrategyKind:
        """Pick the strategy for one pair.

        1. External distance matrix, if one is configured.
        2. Great-circle when the accumulated latitude gap is strictly above
           the threshold.
        3. Flat projection otherwise (the threshold itself included).
        """
        if self.distance_matrix_available:
            return DistanceStrategyKind.DISTANCE_MATRIX

        accumulated = self.accumulated_latitude_difference(passenger, driver)
        if accumulated > self.constants.max_accumulated_difference_deg:
            return DistanceStrategyKind.ORTHODROMIC
        return DistanceStrategyKind.FLAT

    def evaluate(self, passenger: Person, driver: Person) -> DriverMeasure:
        kind = self.select_strategy(passenger, driver)
        strategy = build_strategy(kind, self.constants, self.distance_matrix)
        value = extra_distance(
            self.departure,
            passenger.destination,
            driver.destination,
            strategy,
        )
        return DriverMeasure(driver=driver, value=value, strategy=kind)

    def measure(self, passenger: Person, driver: Person) -> float:
        return self.evaluate(passenger, driver).value
