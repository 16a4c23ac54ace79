"""Player runtime model."""
from __future__ import annotations

from dataclasses import dataclass

from runeclicker.core.geometry import Position


@dataclass(frozen=True, slots=True)
class Player:
    """The stationary player character at the centre of the arena."""

    position: Position
    hp: float
    max_hp: float
    damage: float
    attack_speed: float
    last_attack_time: float = 0.0
    level: int = 1
    experience: float = 0.0
    experience_to_next: int = 100
    passive_points: int = 0
    is_holding_attack: bool = False
    last_dot_time: float | None = None
    id: str = "player"
