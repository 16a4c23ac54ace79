"""Passive tree graph and allocation rules.

Every operation here is total: unknown node ids and disallowed changes return
the input tree unchanged instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from runeclicker.core.types import StartingClass
from runeclicker.domain.defs import PassiveNodeDef


@dataclass(frozen=True, slots=True)
class PassiveTree:
    """Immutable passive tree snapshot."""

    nodes: Tuple[PassiveNodeDef, ...]
    allocated: FrozenSet[str]
    starting_class: StartingClass = "str"

    def node(self, node_id: str) -> PassiveNodeDef | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def is_allocated(self, node_id: str) -> bool:
        return node_id in self.allocated


def start_node_id(starting_class: StartingClass) -> str:
    return f"start_{starting_class}"


def create_passive_tree(
    nodes: Iterable[PassiveNodeDef] = (),
    starting_class: StartingClass = "str",
) -> PassiveTree:
    """Create a tree with only the class start node allocated."""
    return PassiveTree(
        nodes=tuple(nodes),
        allocated=frozenset({start_node_id(starting_class)}),
        starting_class=starting_class,
    )


def is_reachable(tree: PassiveTree, node: PassiveNodeDef) -> bool:
    """Whether ``node`` hangs off the allocated set via ``requires`` or ``links``."""
    if any(req in tree.allocated for req in node.requires):
        return True
    for allocated_id in tree.allocated:
        allocated_node = tree.node(allocated_id)
        if allocated_node is not None and node.id in allocated_node.links:
            return True
    return False


def can_allocate(tree: PassiveTree, node_id: str) -> bool:
    node = tree.node(node_id)
    if node is None:
        return False
    if node_id in tree.allocated:
        return False
    if node.is_start:
        return False
    return is_reachable(tree, node)


def allocate(tree: PassiveTree, node_id: str) -> PassiveTree:
    """Add ``node_id`` to the allocation. Point budgets are the caller's concern."""
    if not can_allocate(tree, node_id):
        return tree
    return replace(tree, allocated=tree.allocated | {node_id})


def can_deallocate(tree: PassiveTree, node_id: str) -> bool:
    if node_id not in tree.allocated:
        return False
    node = tree.node(node_id)
    if node_id.startswith("start_") or (node is not None and node.is_start):
        return False
    for other in tree.nodes:
        if other.id in tree.allocated and node_id in other.requires:
            return False
    return True


def deallocate(tree: PassiveTree, node_id: str) -> PassiveTree:
    if not can_deallocate(tree, node_id):
        return tree
    return replace(tree, allocated=tree.allocated - {node_id})


def aggregate_stats(tree: PassiveTree) -> Dict[str, float]:
    """Sum ``grants`` over every allocated node."""
    stats: Dict[str, float] = {}
    for node in tree.nodes:
        if node.id not in tree.allocated:
            continue
        for stat, value in node.grants.items():
            stats[stat] = stats.get(stat, 0) + value
    return stats


def stat(stats: Mapping[str, float], name: str) -> float:
    return stats.get(name, 0)


def used_points(tree: PassiveTree) -> int:
    total = 0
    for node in tree.nodes:
        if node.id in tree.allocated:
            total += node.cost
    return total
