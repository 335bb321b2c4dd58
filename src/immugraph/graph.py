"""Immutable directed graph and its memoized derived queries.

A :class:`Graph` is a value: its edge set is frozen at construction and its
``id`` is a content hash of that edge set. Every derived query below is a
pure function of ``(graph id, extra arguments)`` and is cached through
:func:`~immugraph.cache.memoize`, so repeated calls on structurally equal
graphs are computed once.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any

from .cache import memoize
from .edge import Edge, nodes_from_edges
from .exceptions import CircularReferenceError
from .hashing import edge_set_hash
from .keys import graph_and_edges_key, graph_and_node_key, graph_key, require_edges
from .logger import logger

__all__ = [
    "Graph",
    "get_edges",
    "get_nodes",
    "add_edge",
    "get_outgoing_edges",
    "get_sub_tree",
    "get_descendants",
    "get_ancestors",
    "invert",
    "to_string",
]

Node = Hashable


class Graph:
    """A directed graph whose edge set never changes.

    Expected to be acyclic, but cycles are not rejected at construction;
    :func:`get_sub_tree` and the queries built on it raise
    :class:`~immugraph.exceptions.CircularReferenceError` when they meet one.

    Attributes
    ----------
    edges : frozenset[Edge]
        The edges of the graph.
    id : str
        Content hash of the edge set. Independent of insertion order and
        used as the cache key of every derived query.
    """
    __slots__ = ("edges", "id")

    edges: frozenset[Edge]
    id: str

    def __init__(self, edges: Iterable[Edge] = ()):
        items = frozenset(require_edges(edges))
        object.__setattr__(self, "edges", items)
        object.__setattr__(self, "id", edge_set_hash(items))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Node, Node]]) -> "Graph":
        """Build a graph from ``(source, target)`` tuples."""
        return cls(Edge(source, target) for source, target in pairs)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __reduce__(self):
        return (type(self), (tuple(self.edges),))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __contains__(self, edge: object) -> bool:
        return edge in self.edges

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"<Graph id={self.id[:12]} edges={len(self.edges)}>"

    # method forms of the module-level queries
    @property
    def nodes(self) -> frozenset[Node]:
        return get_nodes(self)

    def add_edge(self, *edges: Edge) -> "Graph":
        return add_edge(self, *edges)

    def outgoing_edges(self, node: Node) -> frozenset[Edge]:
        return get_outgoing_edges(self, node)

    def sub_tree(self, node: Node) -> "Graph":
        return get_sub_tree(self, node)

    def descendants(self, node: Node) -> frozenset[Node]:
        return get_descendants(self, node)

    def ancestors(self, node: Node) -> frozenset[Node]:
        return get_ancestors(self, node)

    def invert(self) -> "Graph":
        return invert(self)


def get_edges(g: Graph) -> frozenset[Edge]:
    """Return the graph's edge set (a read-only view)."""
    return g.edges


@memoize(graph_key)
def get_nodes(g: Graph) -> frozenset[Node]:
    """Return every node appearing as a source or target in ``g``."""
    return nodes_from_edges(g.edges)


@memoize(graph_and_edges_key)
def add_edge(g: Graph, *edges: Edge) -> Graph:
    """Return a new graph holding ``g``'s edges plus ``edges``.

    ``g`` itself is left untouched. Duplicate edges are absorbed, and
    calling with no edges returns ``g``.

    Examples
    --------
    >>> g1 = Graph([Edge("a", "b"), Edge("a", "c")])
    >>> g2 = add_edge(g1, Edge("a", "d"), Edge("b", "e"))
    >>> str(g2)
    '[Graph [[Edge a -> b], [Edge a -> c], [Edge a -> d], [Edge b -> e]]]'
    """
    if not edges:
        return g
    return Graph(g.edges.union(edges))


@memoize(graph_and_node_key)
def get_outgoing_edges(g: Graph, node: Node) -> frozenset[Edge]:
    """Return the edges of ``g`` that start at ``node``."""
    return frozenset(e for e in g.edges if e.source == node)


@memoize(graph_and_node_key)
def get_sub_tree(g: Graph, node: Node) -> Graph:
    """Return the graph of every edge reachable from ``node``.

    Expansion is recursive: each outgoing edge is collected together with
    the subtree rooted at its target. Meeting a node that is already on the
    current expansion path raises :class:`CircularReferenceError`. A node
    without outgoing edges yields the empty graph.
    """
    return _expand(g, node, ())


def _expand(g: Graph, node: Node, chain: tuple[Node, ...]) -> Graph:
    if node in chain:
        logger.debug("cycle detected at {!r} via {}", node, list(chain))
        raise CircularReferenceError(node)

    chain = chain + (node,)
    edges: set[Edge] = set()
    for e in get_outgoing_edges(g, node):
        edges.add(e)
        # inner subtrees share the get_sub_tree cache
        key = graph_and_node_key(g, e.target)
        hit, sub = get_sub_tree.cache.get(key)
        if not hit:
            sub = _expand(g, e.target, chain)
            get_sub_tree.cache.put(key, sub)
        edges.update(sub.edges)
    return Graph(edges)


@memoize(graph_and_node_key)
def get_descendants(g: Graph, node: Node) -> frozenset[Node]:
    """Return every node reachable from ``node``, excluding ``node`` itself."""
    return get_nodes(get_sub_tree(g, node)) - {node}


@memoize(graph_key)
def invert(g: Graph) -> Graph:
    """Return a copy of ``g`` with every edge direction reversed."""
    return Graph(e.invert() for e in g.edges)


@memoize(graph_and_node_key)
def get_ancestors(g: Graph, node: Node) -> frozenset[Node]:
    """Return every node from which ``node`` is reachable.

    Ancestors are the descendants of ``node`` in the inverted graph.
    """
    return get_descendants(invert(g), node)


@memoize(graph_key)
def to_string(g: Graph) -> str:
    """Canonical text form, with edges sorted by their string form."""
    return f"[Graph [{', '.join(sorted(str(e) for e in g.edges))}]]"
