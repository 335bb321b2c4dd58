"""Custom exception hierarchy for immugraph."""

from typing import Any


class GraphError(Exception):
    """Base class for all immugraph exceptions."""
    pass


class CircularReferenceError(GraphError):
    """Raised when subtree expansion meets a node already on its own chain."""

    def __init__(self, node: Any):
        self.node = node
        super().__init__(f"Circular reference detected at {node!r}")


class InvalidArgumentError(GraphError, TypeError):
    """Raised when an operation receives malformed input."""
    pass


class ConfigurationError(GraphError):
    """Raised when there is an issue with configuration parsing or structure."""
    pass
