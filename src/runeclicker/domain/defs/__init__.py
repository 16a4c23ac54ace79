"""Domain definition exports."""

from .passive_def import PassiveNodeDef
from .rune_def import RuneActiveDef, RuneBaseStats, RuneSupportDef, SupportEffect

__all__ = [
    "PassiveNodeDef",
    "RuneActiveDef",
    "RuneBaseStats",
    "RuneSupportDef",
    "SupportEffect",
]
