"""Cache-key resolvers, one per operation arity.

Every memoized graph operation derives its key from the graph's ``id`` plus
a canonical form of its extra arguments. Resolvers also reject malformed
arguments before any cache lookup happens.
"""
from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any, TYPE_CHECKING

from .edge import Edge
from .exceptions import InvalidArgumentError
from .hashing import edge_set_hash

if TYPE_CHECKING:
    from .graph import Graph

__all__ = ["graph_key", "graph_and_node_key", "graph_and_edges_key"]


def _require_graph(g: Any) -> "Graph":
    from .graph import Graph
    if not isinstance(g, Graph):
        raise InvalidArgumentError(f"expected a Graph, got {type(g).__name__}")
    return g


def _require_node(node: Any) -> Hashable:
    try:
        hash(node)
    except TypeError as exc:
        raise InvalidArgumentError(f"node {node!r} is not hashable") from exc
    return node


def require_edges(edges: Iterable[Any]) -> tuple[Edge, ...]:
    """Materialize ``edges`` and check every element is an :class:`Edge`."""
    try:
        items = tuple(edges)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"edges must be iterable, got {type(edges).__name__}"
        ) from exc
    for e in items:
        if not isinstance(e, Edge):
            raise InvalidArgumentError(f"expected an Edge, got {type(e).__name__}")
    return items


def graph_key(g: "Graph") -> str:
    return _require_graph(g).id


def graph_and_node_key(g: "Graph", node: Hashable) -> tuple[str, Hashable]:
    return _require_graph(g).id, _require_node(node)


def graph_and_edges_key(g: "Graph", *edges: Edge) -> tuple[str, str]:
    """Key for variadic edge arguments.

    The edges are deduplicated and sorted by canonical string before
    hashing, so any permutation of the same edges maps to one key.
    """
    return _require_graph(g).id, edge_set_hash(require_edges(edges))
