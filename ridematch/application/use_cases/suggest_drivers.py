"""SuggestDriversUseCase — rank the driver pool for each passenger."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ridematch.domain.entities.person import Person
from ridematch.domain.policies.driver_ranking import score_drivers
from ridematch.domain.policies.measure_policy import DriverMeasure, MeasurePolicy

logger = logging.getLogger(__name__)


@dataclass
class Suggestion:
    """Drivers suggested for one passenger, best first."""

    passenger: Person
    ranked: list[DriverMeasure]

    @property
    def drivers(self) -> list[Person]:
        return [m.driver for m in self.ranked]


class SuggestDriversUseCase:
    """Orchestrates driver ranking for one or many passengers."""

    def __init__(self, policy: MeasurePolicy):
        self._policy = policy

    def execute(self, passenger: Person, drivers: Sequence[Person]) -> Suggestion:
        """Rank all drivers for a single passenger.

        Distance-matrix failures are logged and re-raised.
        """
        try:
            ranked = score_drivers(passenger, drivers, self._policy)
        except Exception:
            logger.exception("Passenger %s: ranking failed", passenger.id)
            raise

        if ranked:
            best = ranked[0]
            logger.info(
                "Passenger %s: ranked %d drivers, best=%s (%.3f km, %s)",
                passenger.id, len(ranked), best.driver.id, best.value, best.strategy.value,
            )
        else:
            logger.info("Passenger %s: no drivers to rank", passenger.id)
        return Suggestion(passenger=passenger, ranked=ranked)

    def execute_batch(
        self,
        passengers: Sequence[Person],
        drivers: Sequence[Person],
    ) -> list[Suggestion]:
        """Rank the same driver pool independently for every passenger."""
        suggestions = [self.execute(passenger, drivers) for passenger in passengers]
        logger.info("Ranked drivers for %d passengers", len(suggestions))
        return suggestions
