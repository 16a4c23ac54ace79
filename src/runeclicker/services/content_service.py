"""Loads the static rune and passive catalogs the engine consumes."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from runeclicker.data.default_passives import default_passive_nodes
from runeclicker.data.errors import DataError
from runeclicker.data.repositories import (
    PassivesRepository,
    RunesActiveRepository,
    RunesSupportRepository,
)
from runeclicker.data.repositories.base import RepositoryBase
from runeclicker.domain.defs import PassiveNodeDef, RuneActiveDef, RuneSupportDef
from runeclicker.services.errors import ContentUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ContentCatalog:
    passive_nodes: Tuple[PassiveNodeDef, ...]
    active_runes: Tuple[RuneActiveDef, ...]
    support_runes: Tuple[RuneSupportDef, ...]
    used_fallback_passives: bool = False

    def active_rune(self, rune_id: str) -> RuneActiveDef:
        for rune in self.active_runes:
            if rune.id == rune_id:
                return rune
        raise ContentUnavailableError(f"Active rune '{rune_id}' is not in the catalog.")

    def support_rune(self, rune_id: str) -> RuneSupportDef:
        for rune in self.support_runes:
            if rune.id == rune_id:
                return rune
        raise ContentUnavailableError(f"Support rune '{rune_id}' is not in the catalog.")


class ContentService:
    """Load catalogs once, degrading instead of failing.

    A broken passive catalog is replaced by the built-in default tree. Broken
    rune catalogs become empty, which leaves no selectable runes.
    """

    def __init__(
        self,
        *,
        passives_repo: PassivesRepository,
        runes_active_repo: RunesActiveRepository,
        runes_support_repo: RunesSupportRepository,
    ) -> None:
        self._passives_repo = passives_repo
        self._runes_active_repo = runes_active_repo
        self._runes_support_repo = runes_support_repo

    def load(self) -> ContentCatalog:
        passive_nodes, used_fallback = self._load_passives()
        catalog = ContentCatalog(
            passive_nodes=passive_nodes,
            active_runes=self._load_runes(self._runes_active_repo, "active rune"),
            support_runes=self._load_runes(self._runes_support_repo, "support rune"),
            used_fallback_passives=used_fallback,
        )
        logger.info(
            "Content loaded: %d passive nodes, %d active runes, %d support runes",
            len(catalog.passive_nodes),
            len(catalog.active_runes),
            len(catalog.support_runes),
        )
        return catalog

    def _load_passives(self) -> Tuple[Tuple[PassiveNodeDef, ...], bool]:
        try:
            nodes = self._passives_repo.all()
        except DataError as exc:
            logger.warning("Passive catalog unavailable, using default tree: %s", exc)
            return default_passive_nodes(), True
        if not any(node.is_start for node in nodes):
            logger.warning("Passive catalog has no start nodes, using default tree.")
            return default_passive_nodes(), True
        return tuple(nodes), False

    @staticmethod
    def _load_runes(
        repo: RepositoryBase[RuneActiveDef] | RepositoryBase[RuneSupportDef],
        label: str,
    ) -> Tuple[RuneActiveDef, ...] | Tuple[RuneSupportDef, ...]:
        try:
            return tuple(repo.all())
        except DataError as exc:
            logger.error("Unable to load %s catalog: %s", label, exc)
            return ()


def available_active_runes(catalog: ContentCatalog, player_level: int) -> List[RuneActiveDef]:
    """Active runes the player meets the level requirement for."""
    return [rune for rune in catalog.active_runes if rune.level_req <= player_level]
