"""
errors.py — Graph Errors
========================
Raised synchronously by graph queries and by engine construction.
Nothing here is retried; the web layer turns them into user messages.
"""

from typing import Any


class GraphError(Exception):
    """Base class for structural problems with a graph."""


class UnknownNode(GraphError, KeyError):
    """A node id was referenced that the graph does not contain."""

    def __init__(self, node_id: Any):
        self.node_id = node_id
        super().__init__(node_id)

    def __str__(self) -> str:
        return f"Unknown node: {self.node_id!r}"
