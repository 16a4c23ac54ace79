"""Enemy runtime models."""
from __future__ import annotations

from dataclasses import dataclass

from runeclicker.core.geometry import Position


@dataclass(frozen=True, slots=True)
class Enemy:
    """Represents a spawned enemy walking toward the player."""

    id: str
    position: Position
    hp: float
    max_hp: float
    speed: float
    damage: float
    color: str
    level: int
    experience_value: int
