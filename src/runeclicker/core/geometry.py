"""Planar vector helpers used by movement and targeting."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    x: float
    y: float


def distance(a: Position, b: Position) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def normalize(dx: float, dy: float) -> tuple[float, float]:
    """Return the unit vector for (dx, dy), or (0, 0) for a zero-length vector."""
    length = math.hypot(dx, dy)
    if length == 0:
        return 0.0, 0.0
    return dx / length, dy / length


def point_on_circle(center: Position, radius: float, angle: float) -> Position:
    return Position(
        x=center.x + math.cos(angle) * radius,
        y=center.y + math.sin(angle) * radius,
    )
