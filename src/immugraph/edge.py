"""Immutable directed edge and helpers over edge collections."""
from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Any

__all__ = [
    "Edge",
    "nodes_from_edges",
    "reverse_edges",
    "edges_starting_from",
]

Node = Hashable


class Edge:
    """A directed connection ``source -> target`` between two nodes.

    Edges compare and hash by value. Nodes are opaque identifiers and are not
    validated.
    """
    __slots__ = ("source", "target")

    source: Node
    target: Node

    def __init__(self, source: Node, target: Node):
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "target", target)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __reduce__(self):
        return (type(self), (self.source, self.target))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.source == other.source and self.target == other.target

    def __hash__(self) -> int:
        return hash((self.source, self.target))

    def __str__(self) -> str:
        return f"[Edge {self.source} -> {self.target}]"

    def __repr__(self) -> str:
        return f"Edge({self.source!r}, {self.target!r})"

    @property
    def sort_key(self) -> str:
        """Canonical string used for ordering."""
        return str(self)

    @property
    def identity(self) -> str:
        """Type-aware form used for identity hashing, so 1 and "1" differ."""
        return repr((self.source, self.target))

    def invert(self) -> "Edge":
        """Return a new edge with the direction reversed."""
        return Edge(self.target, self.source)


def nodes_from_edges(edges: Iterable[Edge]) -> frozenset[Node]:
    """Return every node appearing as a source or target in ``edges``."""
    nodes: set[Node] = set()
    for e in edges:
        nodes.add(e.source)
        nodes.add(e.target)
    return frozenset(nodes)


def reverse_edges(edges: Iterable[Edge]) -> list[Edge]:
    """Invert each edge, keeping the input order."""
    return [e.invert() for e in edges]


def edges_starting_from(node: Node, edges: Iterable[Edge]) -> list[Edge]:
    """Return the edges whose source is ``node``, keeping the input order."""
    return [e for e in edges if e.source == node]
