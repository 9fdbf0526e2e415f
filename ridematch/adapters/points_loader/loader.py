"""Points loader — reads the lat/lon dataset and splits it into passengers and drivers."""

from __future__ import annotations

import csv
import logging
import random
from dataclasses import dataclass
from pathlib import Path

from ridematch.domain.entities.person import Person
from ridematch.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampledPeople:
    passengers: list[Person]
    drivers: list[Person]


def load_points(file_path: Path, encoding: str = "utf-8-sig") -> list[GeoPoint]:
    """Read one ``latitude, longitude`` pair per line.

    Blank lines are skipped. A malformed line is not recovered: the error
    names the file and line so the dataset can be fixed.

    Args:
        file_path: path to the points file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        Points in file order.

    Raises:
        ValueError: on a malformed or out-of-range coordinate pair.
    """
    points: list[GeoPoint] = []
    with open(file_path, encoding=encoding, newline="") as f:
        reader = csv.reader(f, skipinitialspace=True)
        for line_no, row in enumerate(reader, start=1):
            if not row or not any(cell.strip() for cell in row):
                continue
            try:
                points.append(GeoPoint.parse(",".join(row)))
            except ValueError as e:
                raise ValueError(f"{file_path.name}:{line_no}: {e}") from e

    logger.info("Loaded %d points from %s", len(points), file_path.name)
    return points


def sample_people(
    points: list[GeoPoint],
    passenger_count: int = 10,
    driver_count: int = 10,
    rng: random.Random | None = None,
) -> SampledPeople:
    """Shuffle the points and cut them into passengers and drivers.

    The first ``passenger_count`` shuffled points become passenger
    destinations, the next ``driver_count`` driver destinations.

    Raises:
        ValueError: if there are fewer points than requested people.
    """
    if passenger_count < 0 or driver_count < 0:
        raise ValueError("Passenger and driver counts must be non-negative")
    needed = passenger_count + driver_count
    if len(points) < needed:
        raise ValueError(f"Need {needed} points, dataset has only {len(points)}")

    shuffled = list(points)
    (rng or random.Random()).shuffle(shuffled)

    passengers = [Person(destination=p) for p in shuffled[:passenger_count]]
    drivers = [Person(destination=p) for p in shuffled[passenger_count:needed]]
    logger.info("Sampled %d passengers and %d drivers", len(passengers), len(drivers))
    return SampledPeople(passengers=passengers, drivers=drivers)
