"""Shared type aliases for the core and domain layers."""
from typing import Literal

Element = Literal["phys", "fire", "cold", "light", "chaos"]
RuneTag = Literal[
    "Projectile",
    "Spell",
    "Trap",
    "Totem",
    "Summon",
    "Aura",
    "Melee",
    "DoT",
    "Channel",
]
PassiveNodeKind = Literal["small", "notable", "cornerstone"]
StartingClass = Literal["str", "dex", "int"]

ELEMENTS = ("phys", "fire", "cold", "light", "chaos")
RUNE_TAGS = ("Projectile", "Spell", "Trap", "Totem", "Summon", "Aura", "Melee", "DoT", "Channel")
PASSIVE_NODE_KINDS = ("small", "notable", "cornerstone")
STARTING_CLASSES = ("str", "dex", "int")

__all__ = [
    "Element",
    "RuneTag",
    "PassiveNodeKind",
    "StartingClass",
    "ELEMENTS",
    "RUNE_TAGS",
    "PASSIVE_NODE_KINDS",
    "STARTING_CLASSES",
]
