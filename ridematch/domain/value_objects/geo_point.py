"""GeoPoint value object — immutable (lat, lon) pair."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """Coordinates in degrees, stored as Python floats (double, not float32)."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            raise ValueError(f"Coordinates must be finite: ({self.latitude}, {self.longitude})")
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range [-90, 90]: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range [-180, 180]: {self.longitude}")

    @classmethod
    def parse(cls, raw: str) -> GeoPoint:
        """Parse a dataset line of the form ``"59.93, 30.30"``.

        Raises:
            ValueError: if the text is not exactly two comma-separated numbers
                or the numbers are out of range.
        """
        parts = [p.strip() for p in raw.split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Expected 'latitude, longitude', got {raw!r}")
        try:
            latitude, longitude = float(parts[0]), float(parts[1])
        except ValueError:
            raise ValueError(f"Non-numeric coordinates in {raw!r}") from None
        return cls(latitude=latitude, longitude=longitude)

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"
