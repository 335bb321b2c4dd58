from immugraph import Edge
from immugraph.hashing import content_hash, edge_set_hash


def test_content_hash_is_order_independent():
    assert content_hash(["x", "y", "z"]) == content_hash(["z", "x", "y"])


def test_content_hash_collapses_duplicates():
    assert content_hash(["x", "x", "y"]) == content_hash(["y", "x"])


def test_content_hash_distinguishes_contents():
    assert content_hash(["x"]) != content_hash(["y"])
    assert content_hash(["ab", "c"]) != content_hash(["a", "bc"])


def test_content_hash_is_hex_string():
    h = content_hash([])
    assert isinstance(h, str)
    int(h, 16)


def test_edge_set_hash():
    a = [Edge("a", "b"), Edge("b", "c")]
    assert edge_set_hash(a) == edge_set_hash(reversed(a))
    assert edge_set_hash(a) != edge_set_hash([Edge("b", "a"), Edge("b", "c")])


def test_edge_set_hash_distinguishes_node_types():
    assert edge_set_hash([Edge(1, 2)]) != edge_set_hash([Edge("1", "2")])
    assert Edge(1, 2).identity != Edge("1", "2").identity
    assert str(Edge(1, 2)) == str(Edge("1", "2"))
