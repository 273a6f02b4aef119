import pytest

from algonotes.tree_views import bottom_view, left_view, right_view, top_view
from algonotes.trees import TreeNode, height


def build(spec):
    """Build a tree from (value, left, right) tuples; None for a missing child."""
    if spec is None:
        return None
    value, left, right = spec
    return TreeNode(value, build(left), build(right))


def chain_right(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, None, root)
    return root


def chain_left(values):
    root = None
    for value in reversed(values):
        root = TreeNode(value, root, None)
    return root


@pytest.fixture
def full_tree():
    return build(
        (1, (2, (4, None, None), (5, None, None)), (3, (6, None, None), (7, None, None)))
    )


@pytest.fixture
def bottom_tree():
    return build(
        (
            20,
            (8, (5, None, None), (3, (10, None, None), (14, None, None))),
            (22, (4, None, None), (25, None, None)),
        )
    )


@pytest.fixture
def small_tree():
    return build((10, (5, None, None), (11, None, (12, None, None))))


def test_top_view_of_full_tree(full_tree):
    assert top_view(full_tree) == [4, 2, 1, 3, 7]


def test_bottom_view_of_sample(bottom_tree):
    assert bottom_view(bottom_tree) == [5, 10, 4, 14, 25]


def test_left_view_of_sample(small_tree):
    assert left_view(small_tree) == [10, 5, 12]


@pytest.mark.parametrize("view", [top_view, bottom_view, left_view, right_view])
def test_views_of_empty_tree_are_empty(view):
    assert view(None) == []


@pytest.mark.parametrize("view", [top_view, bottom_view, left_view, right_view])
def test_single_node(view):
    assert view(TreeNode(42)) == [42]


def test_right_chain_is_seen_whole_from_top_and_bottom():
    values = [3, 8, 1, 9]
    assert top_view(chain_right(values)) == values
    assert bottom_view(chain_right(values)) == values


def test_left_chain_reads_backwards_from_top():
    values = [3, 8, 1, 9]
    assert top_view(chain_left(values)) == list(reversed(values))


def test_side_views_have_one_value_per_level(bottom_tree, full_tree, small_tree):
    for tree in (bottom_tree, full_tree, small_tree):
        assert len(left_view(tree)) == height(tree)
        assert len(right_view(tree)) == height(tree)


def test_side_views_start_at_root(bottom_tree):
    assert left_view(bottom_tree)[0] == bottom_tree.value
    assert right_view(bottom_tree)[0] == bottom_tree.value


def test_side_views_of_chain_are_the_chain():
    values = [7, 2, 6]
    assert left_view(chain_right(values)) == values
    assert right_view(chain_left(values)) == values


def test_right_view_of_mirror_is_left_view(small_tree):
    def mirror(node):
        if node is None:
            return None
        return TreeNode(node.value, mirror(node.right), mirror(node.left))

    assert right_view(mirror(small_tree)) == left_view(small_tree)


def test_root_column_in_top_view(full_tree):
    assert full_tree.value in top_view(full_tree)


def test_views_do_not_change_tree(full_tree):
    before = left_view(full_tree)
    top_view(full_tree)
    bottom_view(full_tree)
    right_view(full_tree)
    assert left_view(full_tree) == before