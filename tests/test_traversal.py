import pytest
from immugraph import (
    Edge,
    Graph,
    InvalidArgumentError,
    breadth_first,
    configure,
    depth_first,
    sorted_edges,
)


def _recorder():
    visits = []

    def visit(node, ancestors):
        visits.append((node, list(ancestors)))

    return visits, visit


def test_breadth_first_level_order(tree):
    visits, visit = _recorder()
    breadth_first(tree, "a", visit, sorted_edges)
    assert visits == [
        ("a", []),
        ("b", ["a"]),
        ("c", ["a"]),
        ("d", ["a"]),
        ("e", ["a", "b"]),
        ("f", ["a", "c"]),
        ("g", ["a", "d"]),
    ]


def test_breadth_first_without_order_visits_everything(tree):
    visits, visit = _recorder()
    breadth_first(tree, "a", visit)
    assert {n for n, _ in visits} == {"a", "b", "c", "d", "e", "f", "g"}
    assert visits[0] == ("a", [])


def test_breadth_first_starting_mid_graph(tree):
    visits, visit = _recorder()
    breadth_first(tree, "b", visit, sorted_edges)
    assert visits == [("b", []), ("e", ["b"])]


def test_breadth_first_isolated_start(tree):
    visits, visit = _recorder()
    breadth_first(tree, "zzz", visit)
    assert visits == [("zzz", [])]


def test_breadth_first_stops_whole_walk_on_cycle(cyclic):
    visits, visit = _recorder()
    breadth_first(cyclic, "a", visit, sorted_edges)
    # e -> a reaches the unmarked start node once more; a -> b then ends the walk
    assert visits == [
        ("a", []),
        ("b", ["a"]),
        ("c", ["a"]),
        ("d", ["a"]),
        ("e", ["a", "b"]),
        ("a", ["a", "b", "e"]),
    ]


def test_breadth_first_stops_on_shared_node():
    # d is reached twice; the second sighting ends the walk before c -> x
    g = Graph.from_pairs([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("c", "x")])
    visits, visit = _recorder()
    breadth_first(g, "a", visit, sorted_edges)
    assert [n for n, _ in visits] == ["a", "b", "c", "d"]


def test_breadth_first_custom_order(tree):
    visits, visit = _recorder()

    def reverse(edges, ancestors):
        return sorted(edges, key=lambda e: e.sort_key, reverse=True)

    breadth_first(tree, "a", visit, reverse)
    assert [n for n, _ in visits] == ["a", "d", "c", "b", "g", "f", "e"]


def test_order_receives_path(tree):
    seen = []

    def order(edges, ancestors):
        seen.append(list(ancestors))
        return sorted_edges(edges, ancestors)

    breadth_first(tree, "a", lambda n, a: None, order)
    assert seen[0] == ["a"]
    assert ["a", "b"] in seen


def test_depth_first_branch_order(tree):
    visits, visit = _recorder()
    depth_first(tree, "a", visit, sorted_edges)
    assert visits == [
        ("a", []),
        ("b", ["a"]),
        ("e", ["a", "b"]),
        ("c", ["a"]),
        ("f", ["a", "c"]),
        ("d", ["a"]),
        ("g", ["a", "d"]),
    ]


def test_depth_first_prunes_cycle_per_branch(cyclic):
    visits, visit = _recorder()
    depth_first(cyclic, "a", visit, sorted_edges)
    assert [n for n, _ in visits] == ["a", "b", "e", "c", "d"]


def test_depth_first_visits_shared_nodes_per_branch():
    g = Graph.from_pairs([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])
    visits, visit = _recorder()
    depth_first(g, "a", visit, sorted_edges)
    assert visits == [
        ("a", []),
        ("b", ["a"]),
        ("d", ["a", "b"]),
        ("c", ["a"]),
        ("d", ["a", "c"]),
    ]


def test_depth_first_sibling_paths_are_independent(tree):
    paths = []

    def visit(node, ancestors):
        paths.append(ancestors)
        ancestors.append("mutated")

    depth_first(tree, "a", visit, sorted_edges)
    assert paths[2] == ["a", "b", "mutated"]
    assert paths[3] == ["a", "mutated"]


@pytest.mark.parametrize("walk", [breadth_first, depth_first])
def test_order_cannot_corrupt_paths(walk, tree):
    def meddling(edges, ancestors):
        ancestors.append("mutated")
        ancestors.insert(0, "x")
        return sorted_edges(edges, ancestors)

    visits, visit = _recorder()
    walk(tree, "a", visit, meddling)
    paths = dict(visits)
    assert paths["e"] == ["a", "b"]
    assert paths["g"] == ["a", "d"]


def test_walks_terminate_on_cyclic_graph(cyclic):
    breadth_first(cyclic, "a", lambda n, a: None)
    depth_first(cyclic, "a", lambda n, a: None)


def test_walks_on_self_loop():
    g = Graph([Edge("a", "a")])
    visits, visit = _recorder()
    depth_first(g, "a", visit)
    assert visits == [("a", [])]
    visits.clear()
    breadth_first(g, "a", visit)
    assert visits == [("a", []), ("a", ["a"])]


@pytest.mark.parametrize("walk", [breadth_first, depth_first])
def test_walks_validate_arguments(walk, tree):
    with pytest.raises(InvalidArgumentError):
        walk([Edge("a", "b")], "a", lambda n, a: None)
    with pytest.raises(InvalidArgumentError):
        walk(tree, "a", "not callable")
    with pytest.raises(InvalidArgumentError):
        walk(tree, ["a"], lambda n, a: None)
    with pytest.raises(InvalidArgumentError):
        walk(tree, "a", lambda n, a: None, 5)


def test_validation_can_be_disabled(tree):
    configure(validate=False)
    with pytest.raises(TypeError) as info:
        breadth_first(tree, "a", "not callable")
    assert not isinstance(info.value, InvalidArgumentError)


def test_visitor_errors_propagate(tree):
    def boom(node, ancestors):
        if node == "c":
            raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        depth_first(tree, "a", boom, sorted_edges)
