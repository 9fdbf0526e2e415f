"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class DistanceStrategyKind(str, Enum):
    ORTHODROMIC = "orthodromic"
    FLAT = "flat"
    DISTANCE_MATRIX = "distance_matrix"
