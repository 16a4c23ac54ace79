"""Structured engine events delivered to listeners."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EngineEvent:
    """Base engine event."""


@dataclass(frozen=True, slots=True)
class EnemySpawnedEvent(EngineEvent):
    enemy_id: str


@dataclass(frozen=True, slots=True)
class EnemyDamagedEvent(EngineEvent):
    enemy_id: str
    amount: int
    is_critical: bool = False


@dataclass(frozen=True, slots=True)
class EnemyKilledEvent(EngineEvent):
    enemy_id: str
    experience: float


@dataclass(frozen=True, slots=True)
class PlayerDamagedEvent(EngineEvent):
    amount: float
    hp: float


@dataclass(frozen=True, slots=True)
class PlayerLeveledUpEvent(EngineEvent):
    level: int


@dataclass(frozen=True, slots=True)
class WaveAdvancedEvent(EngineEvent):
    wave: int


@dataclass(frozen=True, slots=True)
class GameOverEvent(EngineEvent):
    score: int
    wave: int
