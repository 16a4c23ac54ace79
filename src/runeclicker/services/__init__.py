"""Service layer exports."""

from .errors import ContentUnavailableError, FactoryError
from .combat_service import AttackOutcome, CombatService, select_targets
from .content_service import ContentCatalog, ContentService, available_active_runes
from .passive_tree_service import PassiveAllocationResult, PassivePointSummary, PassiveTreeService
from .world_service import WorldService, WorldStep

__all__ = [
    "ContentUnavailableError",
    "FactoryError",
    "AttackOutcome",
    "CombatService",
    "select_targets",
    "ContentCatalog",
    "ContentService",
    "available_active_runes",
    "PassiveAllocationResult",
    "PassivePointSummary",
    "PassiveTreeService",
    "WorldService",
    "WorldStep",
]
