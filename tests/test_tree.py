import pytest

from powerset import Decision, InvalidArgument, count_nodes, format_path, walk


def collect(n):
    visits = []
    walk(n, lambda path, is_leaf: visits.append((format_path(path), is_leaf)))
    return visits


def test_walk_order_three_items():
    visits = collect(3)
    assert [p for p, _ in visits] == [
        "{}", "-0", "-1,-0", "-2,-1,-0", "+2,-1,-0", "+1,-0", "-2,+1,-0", "+2,+1,-0",
        "+0", "-1,+0", "-2,-1,+0", "+2,-1,+0", "+1,+0", "-2,+1,+0", "+2,+1,+0",
    ]
    assert sum(1 for _, leaf in visits if leaf) == 8


def test_walk_zero_items_visits_root_as_leaf():
    assert collect(0) == [("{}", True)]


@pytest.mark.parametrize("n", range(7))
def test_walk_node_count(n):
    visits = collect(n)
    assert len(visits) == count_nodes(n) == 2 ** (n + 1) - 1
    assert sum(1 for _, leaf in visits if leaf) == 2 ** n


def test_path_indices_strictly_decrease():
    def visit(path, is_leaf):
        indices = [d.index for d in path]
        assert indices == sorted(indices, reverse=True)
        assert len(set(indices)) == len(indices)
        assert is_leaf == (len(path) == 4)

    walk(4, visit)


def test_walk_propagates_visitor_errors():
    def visit(path, is_leaf):
        if path == (Decision(0, True),):
            raise KeyError("boom")

    with pytest.raises(KeyError):
        walk(2, visit)


@pytest.mark.parametrize("n", [-1, 2.0, "3", True])
def test_walk_rejects_bad_item_counts(n):
    with pytest.raises(InvalidArgument):
        walk(n, lambda path, is_leaf: None)
