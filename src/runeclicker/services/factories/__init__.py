"""Factory helpers for runtime entities."""

from .enemy_factory import create_enemy
from .id_factory import make_instance_id

__all__ = [
    "create_enemy",
    "make_instance_id",
]
