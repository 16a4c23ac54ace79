"""Rune build composition and DPS calculation."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, Tuple

from runeclicker.domain.defs import RuneActiveDef, RuneSupportDef

MAX_SUPPORTS = 3
# Diminishing returns on "more" multipliers: m = 1 - (1 - v) ** MORE_EXPONENT.
MORE_EXPONENT = 0.7
HIT_MORE_STATS = ("hit", "damage")
INCREASE_STAT = "damage_pct"
BEAM_RUNE_ID = "r_beam"


@dataclass(frozen=True, slots=True)
class RuneBuild:
    active: RuneActiveDef | None = None
    supports: Tuple[RuneSupportDef, ...] = ()

    def has_support(self, support_id: str) -> bool:
        return any(support.id == support_id for support in self.supports)


def create_empty_build() -> RuneBuild:
    return RuneBuild()


def can_link(active: RuneActiveDef, support: RuneSupportDef) -> bool:
    """Apply the support's allow/forbid tag gates to ``active``."""
    tags = set(active.tags)
    if support.allow_tags and not tags.intersection(support.allow_tags):
        return False
    if support.forbid_tags and tags.intersection(support.forbid_tags):
        return False
    return True


def set_active(build: RuneBuild, rune: RuneActiveDef | None) -> RuneBuild:
    """Replace the active rune. Supports are rune-specific and always cleared."""
    return RuneBuild(active=rune, supports=())


def toggle_support(build: RuneBuild, support: RuneSupportDef) -> RuneBuild:
    if build.has_support(support.id):
        return replace(build, supports=tuple(s for s in build.supports if s.id != support.id))
    if build.active is None or not can_link(build.active, support):
        return build
    if len(build.supports) >= MAX_SUPPORTS:
        return build
    return replace(build, supports=build.supports + (support,))


def effective_more(value: float) -> float:
    # Values at or above 1 saturate at a doubling.
    return 1 - math.pow(max(0.0, 1 - value), MORE_EXPONENT)


def compute_dps(build: RuneBuild) -> int:
    """floor(base_dps * (1 + total_increase) * prod(1 + more_eff))."""
    if build.active is None:
        return 0
    total_increase = 0.0
    total_more = 1.0
    for support in build.supports:
        for stat, value in support.effect.more.items():
            if stat in HIT_MORE_STATS:
                total_more *= 1 + effective_more(value)
        total_increase += support.effect.add.get(INCREASE_STAT, 0)
    return math.floor(build.active.base.dps * (1 + total_increase) * total_more)


def chain_count(build: RuneBuild | None) -> int:
    """Number of targets a single attack may hit (the first hit plus chains)."""
    if build is None:
        return 1
    return 1 + sum(support.effect.chains for support in build.supports)


def is_beam(rune: RuneActiveDef | None) -> bool:
    """Channelled runes deal damage while held instead of per click."""
    if rune is None:
        return False
    return rune.id == BEAM_RUNE_ID or "Channel" in rune.tags


def describe_active(rune: RuneActiveDef) -> str:
    return f"{rune.name} - {rune.base.elem} damage"


def describe_support(support: RuneSupportDef) -> str:
    effects: List[str] = []
    for stat, value in support.effect.more.items():
        percent = round(value * 100)
        if percent > 0:
            effects.append(f"+{percent}% more {stat}")
        else:
            effects.append(f"{percent}% less {stat}")
    if support.effect.chains:
        effects.append(f"Chains {support.effect.chains} times")
    if support.effect.pierce:
        effects.append(f"Pierces {support.effect.pierce} targets")
    repeat = support.effect.add.get("repeat")
    if repeat:
        effects.append(f"Repeats {repeat:g} additional times")
    return ", ".join(effects)
