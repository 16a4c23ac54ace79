"""Passive tree node definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple

from runeclicker.core.types import PassiveNodeKind


@dataclass(frozen=True, slots=True)
class PassiveNodeDef:
    """A single allocatable node of the passive tree.

    Stat names ending in ``_pct`` are percentage grants; everything else is flat.
    ``requires`` uses any-of semantics and ``links`` are the outgoing graph edges.
    """

    id: str
    kind: PassiveNodeKind
    cost: int
    grants: Dict[str, float] = field(default_factory=dict)
    pos: Tuple[float, float] = (0.0, 0.0)
    requires: FrozenSet[str] = frozenset()
    links: FrozenSet[str] = frozenset()
    desc: str = ""

    @property
    def is_start(self) -> bool:
        return self.cost == 0
