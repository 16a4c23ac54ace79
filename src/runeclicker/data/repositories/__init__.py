"""Repository exports."""

from .passives_repo import PassivesRepository
from .runes_active_repo import RunesActiveRepository
from .runes_support_repo import RunesSupportRepository

__all__ = [
    "PassivesRepository",
    "RunesActiveRepository",
    "RunesSupportRepository",
]
