"""ExtraDistance — marginal detour a driver takes to serve a passenger."""

from ridematch.domain.policies.distance_strategies import DistanceStrategy
from ridematch.domain.value_objects.geo_point import GeoPoint


def extra_distance(
    departure: GeoPoint,
    passenger_destination: GeoPoint,
    driver_destination: GeoPoint,
    strategy: DistanceStrategy,
) -> float:
    """Extra km of departure → passenger → driver over departure → driver.

    Lower is better. A negative value is legitimate: it means the detour
    happens to be cheaper under the chosen strategy.
    """
    return (
        strategy(departure, passenger_destination)
        + strategy(passenger_destination, driver_destination)
        - strategy(departure, driver_destination)
    )
