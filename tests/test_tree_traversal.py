import pytest

from algonotes.tree_traversal import (
    diameter,
    diameter_naive,
    level_order,
    level_order_recursive,
    spiral_order,
    spiral_order_recursive,
)
from algonotes.trees import TreeNode, inorder, insert


def build(spec):
    """Build a tree from (value, left, right) tuples; None for a missing child."""
    if spec is None:
        return None
    value, left, right = spec
    return TreeNode(value, build(left), build(right))


def sample():
    return build(
        (
            11,
            (2, (1, None, None), (7, None, None)),
            (29, (15, None, None), (40, (35, None, None), None)),
        )
    )


def bst(keys):
    root = None
    for key in keys:
        root = insert(root, key)
    return root


def chain(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, root, None)
    return root


TREES = [
    sample,
    lambda: bst([50, 30, 20, 40, 70, 60, 80]),
    lambda: bst([5, 3, 9, 1, 4, 7, 12, 0, 2, 6, 8, 11, 13]),
    lambda: chain([4, 8, 15, 16]),
    lambda: TreeNode(99),
]


def test_level_order_of_sample():
    assert level_order(sample()) == [11, 2, 29, 1, 7, 15, 40, 35]


def test_spiral_order_of_sample():
    assert spiral_order(sample()) == [11, 29, 2, 1, 7, 15, 40, 35]


def test_diameter_of_sample():
    assert diameter(sample()) == 6


@pytest.mark.parametrize("make", TREES)
def test_recursive_level_order_agrees(make):
    assert level_order_recursive(make()) == level_order(make())


@pytest.mark.parametrize("make", TREES)
def test_recursive_spiral_agrees(make):
    assert spiral_order_recursive(make()) == spiral_order(make())


@pytest.mark.parametrize("make", TREES)
def test_diameters_agree(make):
    assert diameter_naive(make()) == diameter(make())


@pytest.mark.parametrize("make", TREES)
def test_traversals_visit_every_node_once(make):
    tree = make()
    everything = sorted(inorder(tree))
    assert sorted(level_order(tree)) == everything
    assert sorted(spiral_order(tree)) == everything


@pytest.mark.parametrize("make", TREES)
def test_traversals_start_at_root(make):
    tree = make()
    assert level_order(tree)[0] == tree.value
    assert spiral_order(tree)[0] == tree.value


def test_chain_diameter_is_its_length():
    values = [4, 8, 15, 16, 23]
    assert diameter(chain(values)) == len(values)
    assert diameter_naive(chain(values)) == len(values)


def test_chain_orders_follow_the_chain():
    values = [4, 8, 15, 16, 23]
    assert level_order(chain(values)) == values
    assert spiral_order(chain(values)) == values


def test_second_level_reversed_in_spiral():
    tree = bst([50, 30, 70])
    assert spiral_order(tree)[1:] == list(reversed(level_order(tree)[1:]))


@pytest.mark.parametrize(
    "traversal", [level_order, level_order_recursive, spiral_order, spiral_order_recursive]
)
def test_empty_tree_traversals(traversal):
    assert traversal(None) == []


@pytest.mark.parametrize("measure", [diameter, diameter_naive])
def test_empty_tree_diameter(measure):
    assert measure(None) == 0