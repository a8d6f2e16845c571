"""Small geometric types and numeric helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point2D:
    """A point in the plane."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Point3D:
    """A point in space."""

    x: float
    y: float
    z: float


def interpolate(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b at parameter t."""
    return a + (b - a) * t


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit value to the range [minimum, maximum]."""
    return min(max(value, minimum), maximum)


def map_range(
    value: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Linearly map value from one range onto another."""
    return (value - in_min) / (in_max - in_min) * (out_max - out_min) + out_min


def manhattan_distance(start: Sequence[int], end: Sequence[int]) -> float:
    """Manhattan distance between two (x, y) grid positions."""
    (x0, y0), (x1, y1) = start, end
    return float(abs(x0 - x1) + abs(y0 - y1))