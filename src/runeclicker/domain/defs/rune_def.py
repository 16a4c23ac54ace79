"""Rune definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from runeclicker.core.types import Element, RuneTag


@dataclass(frozen=True, slots=True)
class RuneBaseStats:
    hit: float
    dps: float
    elem: Element
    cast_ms: float
    proj: int | None = None


@dataclass(frozen=True, slots=True)
class RuneActiveDef:
    """The offensive skill a build is centred on."""

    id: str
    name: str
    base: RuneBaseStats
    tags: Tuple[RuneTag, ...] = ()
    scales: Tuple[str, ...] = ()
    level_req: int = 1


@dataclass(frozen=True, slots=True)
class SupportEffect:
    """Modifiers a support rune applies to its linked active rune.

    ``more`` values are fractional (0.5 == 50% more); ``add`` values are
    additive increases keyed by stat name.
    """

    more: Dict[str, float] = field(default_factory=dict)
    add: Dict[str, float] = field(default_factory=dict)
    chains: int = 0
    pierce: int = 0
    convert: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RuneSupportDef:
    id: str
    name: str
    effect: SupportEffect = field(default_factory=SupportEffect)
    link_cost: int = 0
    allow_tags: Tuple[RuneTag, ...] = ()
    forbid_tags: Tuple[RuneTag, ...] = ()
