"""DriverRanking — order drivers by detour measure for a passenger."""

from __future__ import annotations

from collections.abc import Iterable

from ridematch.domain.entities.person import Person
from ridematch.domain.policies.measure_policy import DriverMeasure, MeasurePolicy


def score_drivers(
    passenger: Person,
    drivers: Iterable[Person],
    policy: MeasurePolicy,
) -> list[DriverMeasure]:
    """Measure every driver once and sort ascending by measure.

    ``sorted`` is stable, so drivers with equal measures keep their input
    order. Errors raised while measuring (e.g. by an external distance
    matrix) propagate; a driver is never ranked with a made-up value.

    Args:
        passenger: the passenger to be served.
        drivers: candidate drivers; not modified.
        policy: measure policy bound to the departure point.

    Returns:
        A new list of DriverMeasure, best (lowest) first. Empty input gives
        an empty list.
    """
    measures = [policy.evaluate(passenger, driver) for driver in drivers]
    return sorted(measures, key=lambda m: m.value)


def rank_drivers(
    passenger: Person,
    drivers: Iterable[Person],
    policy: MeasurePolicy,
) -> list[Person]:
    """Drivers only, in the order of :func:`score_drivers`."""
    return [m.driver for m in score_drivers(passenger, drivers, policy)]
