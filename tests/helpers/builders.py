from __future__ import annotations

from typing import Dict, Iterable, Sequence

from runeclicker.core.geometry import Position
from runeclicker.domain.config import PLAYER_START
from runeclicker.domain.defs import (
    PassiveNodeDef,
    RuneActiveDef,
    RuneBaseStats,
    RuneSupportDef,
    SupportEffect,
)
from runeclicker.domain.entities import Enemy, Player


class ScriptedRNG:
    """RNG stand-in that replays fixed ``random()`` draws."""

    def __init__(self, draws: Sequence[float] = (), angle: float = 0.0) -> None:
        self._draws = list(draws)
        self._angle = angle
        self.random_calls = 0
        self._ids = 0

    def random(self) -> float:
        self.random_calls += 1
        if not self._draws:
            return 0.99
        return self._draws.pop(0)

    def angle(self) -> float:
        return self._angle

    def randint(self, a: int, b: int) -> int:
        self._ids += 1
        return a + self._ids

    def choice(self, seq):
        return seq[0]


def make_node(
    node_id: str,
    *,
    cost: int = 1,
    kind: str = "small",
    grants: Dict[str, float] | None = None,
    requires: Iterable[str] = (),
    links: Iterable[str] = (),
) -> PassiveNodeDef:
    return PassiveNodeDef(
        id=node_id,
        kind=kind,  # type: ignore[arg-type]
        cost=cost,
        grants=dict(grants or {}),
        requires=frozenset(requires),
        links=frozenset(links),
    )


def make_active(
    rune_id: str = "r_test",
    *,
    dps: float = 100,
    elem: str = "phys",
    cast_ms: float = 500,
    tags: Sequence[str] = (),
) -> RuneActiveDef:
    return RuneActiveDef(
        id=rune_id,
        name=rune_id.title(),
        base=RuneBaseStats(hit=dps / 2, dps=dps, elem=elem, cast_ms=cast_ms),  # type: ignore[arg-type]
        tags=tuple(tags),  # type: ignore[arg-type]
    )


def make_support(
    support_id: str = "s_test",
    *,
    more: Dict[str, float] | None = None,
    add: Dict[str, float] | None = None,
    chains: int = 0,
    allow_tags: Sequence[str] = (),
    forbid_tags: Sequence[str] = (),
) -> RuneSupportDef:
    return RuneSupportDef(
        id=support_id,
        name=support_id.title(),
        effect=SupportEffect(more=dict(more or {}), add=dict(add or {}), chains=chains),
        allow_tags=tuple(allow_tags),  # type: ignore[arg-type]
        forbid_tags=tuple(forbid_tags),  # type: ignore[arg-type]
    )


def make_player(**overrides) -> Player:
    values = dict(position=PLAYER_START, hp=1000.0, max_hp=1000.0, damage=50.0, attack_speed=1.5)
    values.update(overrides)
    return Player(**values)


def make_enemy(
    enemy_id: str,
    *,
    offset: tuple[float, float] = (100.0, 0.0),
    hp: float = 100.0,
    damage: float = 10.0,
    speed: float = 0.5,
    experience_value: int = 10,
) -> Enemy:
    return Enemy(
        id=enemy_id,
        position=Position(PLAYER_START.x + offset[0], PLAYER_START.y + offset[1]),
        hp=hp,
        max_hp=hp,
        speed=speed,
        damage=damage,
        color="#ff4444",
        level=1,
        experience_value=experience_value,
    )


def sample_tree_nodes() -> tuple[PassiveNodeDef, ...]:
    """start_str -> a -> b (requires chain), start_str links c, d linked from c."""
    return (
        make_node("start_str", cost=0, kind="notable", links=("c",)),
        make_node("a", requires=("start_str",), grants={"damage_pct": 10}),
        make_node("b", requires=("a",), grants={"damage_pct": 5, "crit_chance": 20}),
        make_node("c", grants={"attack_speed_pct": 50}, links=("d",)),
        make_node("d", cost=2, kind="cornerstone", grants={"crit_multi": 50}),
        make_node("island", grants={"damage_pct": 100}),
    )
