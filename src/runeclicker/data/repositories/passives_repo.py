"""Passive tree node repository."""
from __future__ import annotations

from typing import Dict

from runeclicker.core.types import PASSIVE_NODE_KINDS
from runeclicker.data.errors import DataReferenceError, DataValidationError
from runeclicker.data.repositories.base import RepositoryBase
from runeclicker.domain.defs import PassiveNodeDef

_REQUIRED_FIELDS = {"kind", "cost", "pos"}
_ALLOWED_FIELDS = _REQUIRED_FIELDS | {"grants", "desc", "requires", "links"}


class PassivesRepository(RepositoryBase[PassiveNodeDef]):
    """Loads the passive tree node catalog."""

    def __init__(self, base_path=None) -> None:
        super().__init__("passives_core.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, PassiveNodeDef]:
        nodes: Dict[str, PassiveNodeDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Passive node IDs must be strings.")
            context = f"passive '{raw_id}'"
            node_data = self._require_mapping(payload, context)
            self._assert_required(node_data, _REQUIRED_FIELDS, context)
            self._assert_known(node_data, _ALLOWED_FIELDS, context)

            pos = self._require_mapping(node_data["pos"], f"{context} pos")
            self._assert_required(pos, {"x", "y"}, f"{context} pos")

            nodes[raw_id] = PassiveNodeDef(
                id=raw_id,
                kind=self._require_literal(node_data["kind"], PASSIVE_NODE_KINDS, f"{context} kind"),
                cost=self._require_int(node_data["cost"], f"{context} cost", minimum=0),
                grants=self._require_number_map(node_data.get("grants", {}), f"{context} grants"),
                pos=(
                    self._require_number(pos["x"], f"{context} pos.x"),
                    self._require_number(pos["y"], f"{context} pos.y"),
                ),
                requires=frozenset(self._require_str_list(node_data.get("requires", []), f"{context} requires")),
                links=frozenset(self._require_str_list(node_data.get("links", []), f"{context} links")),
                desc=self._require_str(node_data.get("desc", ""), f"{context} desc"),
            )
        self._validate_references(nodes)
        return nodes

    @staticmethod
    def _validate_references(nodes: Dict[str, PassiveNodeDef]) -> None:
        for node in nodes.values():
            for ref in sorted(node.requires | node.links):
                if ref not in nodes:
                    raise DataReferenceError(f"passive '{node.id}' references unknown node '{ref}'.")
