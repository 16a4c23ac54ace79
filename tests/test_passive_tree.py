from __future__ import annotations

from runeclicker.core.rng import RNG
from runeclicker.domain.passive_tree import (
    aggregate_stats,
    allocate,
    can_allocate,
    create_passive_tree,
    deallocate,
    used_points,
)
from tests.helpers.builders import make_node, sample_tree_nodes


def _tree():
    return create_passive_tree(sample_tree_nodes(), "str")


def test_new_tree_allocates_only_start_node() -> None:
    tree = _tree()
    assert tree.allocated == frozenset({"start_str"})
    assert used_points(tree) == 0


def test_can_allocate_rejects_unknown_allocated_and_start_nodes() -> None:
    nodes = sample_tree_nodes() + (make_node("start_dex", cost=0, links=("a",)),)
    tree = create_passive_tree(nodes, "str")
    assert not can_allocate(tree, "missing")
    assert not can_allocate(tree, "start_str")
    assert not can_allocate(tree, "start_dex")
    tree = allocate(tree, "a")
    assert not can_allocate(tree, "a")


def test_can_allocate_via_requires_or_links() -> None:
    tree = _tree()
    assert can_allocate(tree, "a")
    assert can_allocate(tree, "c")
    assert not can_allocate(tree, "b")
    assert not can_allocate(tree, "d")
    assert not can_allocate(tree, "island")

    tree = allocate(allocate(tree, "a"), "c")
    assert can_allocate(tree, "b")
    assert can_allocate(tree, "d")


def test_allocate_is_idempotent_and_noop_when_unreachable() -> None:
    tree = _tree()
    once = allocate(tree, "a")
    assert allocate(once, "a") == once
    assert allocate(tree, "island") is tree
    assert allocate(tree, "nope") is tree


def test_any_allocation_sequence_keeps_nodes_reachable() -> None:
    rng = RNG(99)
    ids = [node.id for node in sample_tree_nodes()] + ["unknown"]
    tree = _tree()
    for _ in range(60):
        tree = allocate(tree, rng.choice(ids))
        for node_id in tree.allocated:
            node = tree.node(node_id)
            assert node is not None
            if node.cost == 0:
                continue
            linked = any(node_id in tree.node(other).links for other in tree.allocated)
            assert linked or bool(node.requires & tree.allocated)
    assert "island" not in tree.allocated


def test_deallocate_protects_start_and_prerequisites() -> None:
    tree = allocate(allocate(_tree(), "a"), "b")
    assert deallocate(tree, "start_str") is tree
    assert deallocate(tree, "a") is tree
    assert deallocate(tree, "unknown") is tree

    without_b = deallocate(tree, "b")
    assert without_b.allocated == frozenset({"start_str", "a"})
    assert deallocate(without_b, "a").allocated == frozenset({"start_str"})


def test_aggregate_stats_is_order_independent() -> None:
    first = _tree()
    for node_id in ("a", "b", "c"):
        first = allocate(first, node_id)
    second = _tree()
    for node_id in ("c", "a", "b"):
        second = allocate(second, node_id)

    assert first.allocated == second.allocated
    assert aggregate_stats(first) == aggregate_stats(second)
    assert aggregate_stats(first) == {"damage_pct": 15, "crit_chance": 20, "attack_speed_pct": 50}


def test_used_points_sums_costs() -> None:
    tree = allocate(allocate(_tree(), "c"), "d")
    assert used_points(tree) == 3
