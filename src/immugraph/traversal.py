"""Breadth-first and depth-first walks over a :class:`Graph`.

The walks differ on purpose in how they react to cycles:

* :func:`breadth_first` stops the *whole* walk at the first target that was
  already seen.
* :func:`depth_first` prunes only the branch that re-enters a node already
  on its own ancestor path.

Neither raises on cycles; :func:`~immugraph.graph.get_sub_tree` is the only
operation that fails on them.
"""
from __future__ import annotations

import functools
from collections import deque
from collections.abc import Callable, Hashable, Iterable
from typing import Any, Optional

from pydantic import ConfigDict, ValidationError, validate_call

from .config import get_config
from .edge import Edge
from .exceptions import InvalidArgumentError
from .graph import Graph, get_outgoing_edges
from .logger import logger

__all__ = [
    "Visitor",
    "OrderFn",
    "breadth_first",
    "depth_first",
    "identity_order",
    "sorted_edges",
]

Node = Hashable
Visitor = Callable[[Node, list], Any]
OrderFn = Callable[[Iterable[Edge], list], Iterable[Edge]]


def identity_order(edges: Iterable[Edge], ancestors: list) -> Iterable[Edge]:
    """Walk edges in whatever order the edge set yields them."""
    return edges


def sorted_edges(edges: Iterable[Edge], ancestors: list) -> list[Edge]:
    """Walk edges sorted by their canonical string form."""
    return sorted(edges, key=lambda e: e.sort_key)


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def _check_walk_args(
    graph: Graph,
    node: Hashable,
    visitor: Callable[..., Any],
    order: Optional[Callable[..., Any]] = None,
) -> None:
    pass


def _validated(fn: Callable[..., None]) -> Callable[..., None]:
    """Validate walk arguments with pydantic when validation is enabled."""

    @functools.wraps(fn)
    def wrapper(graph, node, visitor, order=None):
        if get_config().validate:
            try:
                _check_walk_args(graph, node, visitor, order)
            except ValidationError as exc:
                raise InvalidArgumentError(
                    f"invalid arguments for {fn.__name__}: {exc}"
                ) from exc
        return fn(graph, node, visitor, order)

    return wrapper


def _ordered(g: Graph, node: Node, order: OrderFn | None, ancestors: list) -> Iterable[Edge]:
    edges = get_outgoing_edges(g, node)
    return (order or identity_order)(edges, ancestors)


@_validated
def breadth_first(
    graph: Graph,
    node: Node,
    visitor: Visitor,
    order: OrderFn | None = None,
) -> None:
    """Walk the subtree of ``graph`` rooted at ``node`` level by level.

    ``visitor(node, ancestors)`` is called for the start node with ``[]`` and
    then for every newly reached node with the path of nodes leading to it.
    Edge sets carry no order, so ``order(edges, ancestors)`` may reorder
    each node's outgoing edges before they are scanned.

    The first target that was already seen ends the entire walk. Only
    targets are marked seen, so a cycle back to the start node visits it
    once more before the walk ends.
    """
    seen: set[Node] = set()
    queue: deque[tuple[Node, list]] = deque([(node, [])])
    visitor(node, [])
    while queue:
        current, ancestors = queue.popleft()
        path = ancestors + [current]
        for e in _ordered(graph, current, order, list(path)):
            if e.target in seen:
                logger.debug("breadth_first stopped at revisited node {!r}", e.target)
                return
            seen.add(e.target)
            visitor(e.target, list(path))
            queue.append((e.target, path))


@_validated
def depth_first(
    graph: Graph,
    node: Node,
    visitor: Visitor,
    order: OrderFn | None = None,
) -> None:
    """Walk the subtree of ``graph`` rooted at ``node`` branch by branch.

    ``visitor(node, ancestors)`` is called on entry to each node. A node
    already present in its own ancestors is skipped, which prunes that
    branch only.
    """
    _depth_first(graph, node, visitor, order, [])


def _depth_first(
    graph: Graph,
    node: Node,
    visitor: Visitor,
    order: OrderFn | None,
    ancestors: list,
) -> None:
    if node in ancestors:
        return

    path = ancestors + [node]
    visitor(node, ancestors)
    for e in _ordered(graph, node, order, list(path)):
        # each branch gets its own copy of the path
        _depth_first(graph, e.target, visitor, order, list(path))
