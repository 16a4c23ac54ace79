from runeclicker.domain.passive_tree import allocate, create_passive_tree
from runeclicker.services import PassiveTreeService
from tests.helpers.builders import sample_tree_nodes


def _tree():
    return create_passive_tree(sample_tree_nodes(), "str")


def test_summary_counts_spent_and_available_points() -> None:
    service = PassiveTreeService()
    tree = allocate(allocate(_tree(), "c"), "d")

    summary = service.get_summary(tree, 5)

    assert (summary.earned, summary.spent, summary.available) == (5, 3, 2)


def test_summary_never_goes_negative() -> None:
    service = PassiveTreeService()
    tree = allocate(_tree(), "a")

    summary = service.get_summary(tree, 0)

    assert summary.available == 0


def test_allocate_requires_enough_points_for_node_cost() -> None:
    service = PassiveTreeService()
    tree = allocate(_tree(), "c")

    denied = service.allocate(tree, "d", 2)
    granted = service.allocate(tree, "d", 3)

    assert not denied.success
    assert denied.tree is tree
    assert "Not enough" in denied.message
    assert granted.success
    assert granted.tree.is_allocated("d")
    assert granted.summary.available == 0


def test_allocate_unknown_and_unreachable_nodes_fail() -> None:
    service = PassiveTreeService()
    tree = _tree()

    unknown = service.allocate(tree, "nope", 10)
    island = service.allocate(tree, "island", 10)

    assert not unknown.success
    assert "Unknown" in unknown.message
    assert not island.success
    assert "not reachable" in island.message


def test_deallocate_refunds_point() -> None:
    service = PassiveTreeService()
    tree = allocate(_tree(), "a")

    result = service.deallocate(tree, "a", 1)

    assert result.success
    assert result.summary.available == 1


def test_deallocate_refuses_required_parent_and_start() -> None:
    service = PassiveTreeService()
    tree = allocate(allocate(_tree(), "a"), "b")

    parent = service.deallocate(tree, "a", 2)
    start = service.deallocate(tree, "start_str", 2)

    assert not parent.success
    assert not start.success
    assert parent.tree is tree
