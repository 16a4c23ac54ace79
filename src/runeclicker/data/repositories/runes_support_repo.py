"""Support rune repository."""
from __future__ import annotations

from typing import Dict

from runeclicker.core.types import RUNE_TAGS
from runeclicker.data.errors import DataValidationError
from runeclicker.data.repositories.base import RepositoryBase
from runeclicker.domain.defs import RuneSupportDef, SupportEffect

_EFFECT_FIELDS = {"more", "add", "chains", "pierce", "convert"}


class RunesSupportRepository(RepositoryBase[RuneSupportDef]):
    """Loads support (link) runes."""

    def __init__(self, base_path=None) -> None:
        super().__init__("runes_support.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, RuneSupportDef]:
        supports: Dict[str, RuneSupportDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Rune IDs must be strings.")
            context = f"support rune '{raw_id}'"
            support_data = self._require_mapping(payload, context)
            self._assert_required(support_data, {"name", "effect"}, context)

            effect_data = self._require_mapping(support_data["effect"], f"{context} effect")
            self._assert_known(effect_data, _EFFECT_FIELDS, f"{context} effect")

            supports[raw_id] = RuneSupportDef(
                id=raw_id,
                name=self._require_str(support_data["name"], f"{context} name"),
                effect=SupportEffect(
                    more=self._require_number_map(effect_data.get("more", {}), f"{context} more"),
                    add=self._require_number_map(effect_data.get("add", {}), f"{context} add"),
                    chains=self._require_int(effect_data.get("chains", 0), f"{context} chains", minimum=0),
                    pierce=self._require_int(effect_data.get("pierce", 0), f"{context} pierce", minimum=0),
                    convert=self._require_number_map(effect_data.get("convert", {}), f"{context} convert"),
                ),
                link_cost=self._require_int(support_data.get("linkCost", 0), f"{context} linkCost", minimum=0),
                allow_tags=self._require_tags(support_data.get("allowTags", []), f"{context} allowTags"),
                forbid_tags=self._require_tags(support_data.get("forbidTags", []), f"{context} forbidTags"),
            )
        return supports

    def _require_tags(self, value: object, context: str):
        return tuple(
            self._require_literal(tag, RUNE_TAGS, context)
            for tag in self._require_str_list(value, context)
        )
