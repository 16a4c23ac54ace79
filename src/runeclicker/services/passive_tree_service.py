"""Point-budgeted passive allocation (the engine boundary around the tree model)."""
from __future__ import annotations

from dataclasses import dataclass

from runeclicker.domain.passive_tree import (
    PassiveTree,
    allocate,
    can_allocate,
    can_deallocate,
    deallocate,
    used_points,
)


@dataclass(frozen=True, slots=True)
class PassivePointSummary:
    earned: int
    spent: int
    available: int


@dataclass(frozen=True, slots=True)
class PassiveAllocationResult:
    success: bool
    message: str
    tree: PassiveTree
    summary: PassivePointSummary


class PassiveTreeService:
    """Check point budgets before delegating to the pure tree operations."""

    def get_summary(self, tree: PassiveTree, passive_points: int) -> PassivePointSummary:
        earned = max(0, passive_points)
        spent = used_points(tree)
        return PassivePointSummary(earned=earned, spent=spent, available=max(0, earned - spent))

    def allocate(self, tree: PassiveTree, node_id: str, passive_points: int) -> PassiveAllocationResult:
        summary = self.get_summary(tree, passive_points)
        node = tree.node(node_id)
        if node is None:
            return PassiveAllocationResult(False, f"Unknown passive '{node_id}'.", tree, summary)
        if not can_allocate(tree, node_id):
            return PassiveAllocationResult(False, f"'{node_id}' is not reachable.", tree, summary)
        if summary.available < node.cost:
            return PassiveAllocationResult(
                False,
                f"Not enough passive points ({summary.available}/{node.cost}).",
                tree,
                summary,
            )
        updated = allocate(tree, node_id)
        return PassiveAllocationResult(
            True,
            f"Allocated '{node_id}'.",
            updated,
            self.get_summary(updated, passive_points),
        )

    def deallocate(self, tree: PassiveTree, node_id: str, passive_points: int) -> PassiveAllocationResult:
        if not can_deallocate(tree, node_id):
            return PassiveAllocationResult(
                False,
                f"'{node_id}' cannot be removed.",
                tree,
                self.get_summary(tree, passive_points),
            )
        updated = deallocate(tree, node_id)
        return PassiveAllocationResult(
            True,
            f"Refunded '{node_id}'.",
            updated,
            self.get_summary(updated, passive_points),
        )
