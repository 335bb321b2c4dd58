from .cache import MemoCache, clear_caches, memoize
from .config import Config, configure, get_config, reset
from .edge import Edge, edges_starting_from, nodes_from_edges, reverse_edges
from .exceptions import (
    CircularReferenceError,
    ConfigurationError,
    GraphError,
    InvalidArgumentError,
)
from .graph import (
    Graph,
    add_edge,
    get_ancestors,
    get_descendants,
    get_edges,
    get_nodes,
    get_outgoing_edges,
    get_sub_tree,
    invert,
    to_string,
)
from .hashing import content_hash
from .logger import logger, console
from .traversal import breadth_first, depth_first, sorted_edges

__all__ = [
    "Edge",
    "Graph",
    "add_edge",
    "get_edges",
    "get_nodes",
    "get_outgoing_edges",
    "get_sub_tree",
    "get_descendants",
    "get_ancestors",
    "invert",
    "to_string",
    "breadth_first",
    "depth_first",
    "sorted_edges",
    "nodes_from_edges",
    "reverse_edges",
    "edges_starting_from",
    "content_hash",
    "MemoCache",
    "memoize",
    "clear_caches",
    "Config",
    "configure",
    "get_config",
    "reset",
    "GraphError",
    "CircularReferenceError",
    "InvalidArgumentError",
    "ConfigurationError",
    "logger",
    "console",
]
