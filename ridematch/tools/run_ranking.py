"""Rank drivers for randomly sampled passengers from the points dataset.

Usage:
    python -m ridematch.tools.run_ranking
    python -m ridematch.tools.run_ranking --points data/latlons
    python -m ridematch.tools.run_ranking --passengers 5 --drivers 8 --seed 42
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from ridematch.adapters.points_loader.loader import load_points, sample_people
from ridematch.application.ports.distance_matrix_port import DistanceMatrixError
from ridematch.application.use_cases.suggest_drivers import Suggestion, SuggestDriversUseCase
from ridematch.config import settings
from ridematch.infrastructure.api.dependencies import build_distance_matrix, build_measure_policy

logger = logging.getLogger(__name__)


def format_suggestion(suggestion: Suggestion) -> list[str]:
    """One ``lat, lon`` line per ranked driver, best first."""
    return [str(driver.destination) for driver in suggestion.drivers]


def run(
    points_path: Path,
    passenger_count: int,
    driver_count: int,
    seed: int | None = None,
) -> list[Suggestion]:
    points = load_points(points_path)
    people = sample_people(points, passenger_count, driver_count, rng=random.Random(seed))

    distance_matrix = build_distance_matrix(settings)
    try:
        policy = build_measure_policy(settings, distance_matrix)
        return SuggestDriversUseCase(policy).execute_batch(people.passengers, people.drivers)
    finally:
        if distance_matrix is not None:
            distance_matrix.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Rank drivers by extra distance for sampled passengers")
    parser.add_argument("--points", type=Path, default=Path(settings.points_path), help="Points file (lat, lon per line)")
    parser.add_argument("--passengers", type=int, default=settings.passenger_count, help="Number of passengers to sample")
    parser.add_argument("--drivers", type=int, default=settings.driver_count, help="Number of drivers to sample")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible sampling")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s | %(message)s")

    if not args.points.exists():
        logger.error("Points file not found: %s", args.points)
        return 1

    try:
        suggestions = run(args.points, args.passengers, args.drivers, args.seed)
    except (ValueError, DistanceMatrixError) as e:
        logger.error("Ranking failed: %s", e)
        return 1

    for suggestion in suggestions:
        print(f"Passenger {suggestion.passenger.id} → {suggestion.passenger.destination}")
        for line in format_suggestion(suggestion):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
