"""Active rune repository."""
from __future__ import annotations

from typing import Dict

from runeclicker.core.types import ELEMENTS, RUNE_TAGS
from runeclicker.data.errors import DataValidationError
from runeclicker.data.repositories.base import RepositoryBase
from runeclicker.domain.defs import RuneActiveDef, RuneBaseStats


class RunesActiveRepository(RepositoryBase[RuneActiveDef]):
    """Loads active (skill) runes."""

    def __init__(self, base_path=None) -> None:
        super().__init__("runes_active.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, RuneActiveDef]:
        runes: Dict[str, RuneActiveDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Rune IDs must be strings.")
            context = f"active rune '{raw_id}'"
            rune_data = self._require_mapping(payload, context)
            self._assert_required(rune_data, {"name", "base", "tags", "scales", "levelReq"}, context)

            base = self._require_mapping(rune_data["base"], f"{context} base")
            self._assert_required(base, {"hit", "dps", "elem", "castMs"}, f"{context} base")
            proj = base.get("proj")

            runes[raw_id] = RuneActiveDef(
                id=raw_id,
                name=self._require_str(rune_data["name"], f"{context} name"),
                base=RuneBaseStats(
                    hit=self._require_number(base["hit"], f"{context} hit", minimum=0),
                    dps=self._require_number(base["dps"], f"{context} dps", minimum=0),
                    elem=self._require_literal(base["elem"], ELEMENTS, f"{context} elem"),
                    cast_ms=self._require_number(base["castMs"], f"{context} castMs", minimum=1),
                    proj=None if proj is None else self._require_int(proj, f"{context} proj", minimum=0),
                ),
                tags=tuple(
                    self._require_literal(tag, RUNE_TAGS, f"{context} tag")
                    for tag in self._require_str_list(rune_data["tags"], f"{context} tags")
                ),
                scales=tuple(self._require_str_list(rune_data["scales"], f"{context} scales")),
                level_req=self._require_int(rune_data["levelReq"], f"{context} levelReq", minimum=0),
            )
        return runes
