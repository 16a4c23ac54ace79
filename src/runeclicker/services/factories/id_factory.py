"""Utilities for creating deterministic instance identifiers."""
from __future__ import annotations

from typing import Collection

from runeclicker.core.rng import RNG
from runeclicker.services.errors import FactoryError

_MAX_ATTEMPTS = 32


def make_instance_id(prefix: str, rng: RNG, taken: Collection[str] = ()) -> str:
    """Generate a deterministic identifier not already present in ``taken``."""
    for _ in range(_MAX_ATTEMPTS):
        candidate = f"{prefix}_{rng.randint(100000, 999999)}"
        if candidate not in taken:
            return candidate
    raise FactoryError(f"Unable to allocate a unique '{prefix}' id.")
