"""
node.py — Graph Node
====================
Plain data entity.  The traversal core only cares about `id`; position
and label belong to the presentation layer and never take part in
equality or hashing.

Visual state (colours, "active", "on path") deliberately lives in the
Board, not here, so one Graph can be shared by any number of renderers.
"""

from typing import Optional


class Node:
    """
    Attributes:
        id    : Integer identifier, unique within its graph.
        x, y  : Canvas coordinates (pixels).  0 when the caller has no layout.
        label : Text drawn next to the node.  Defaults to str(id).
    """

    __slots__ = ("id", "x", "y", "label")

    def __init__(
        self,
        node_id: int,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
    ):
        self.id:    int   = node_id
        self.x:     float = x
        self.y:     float = y
        self.label: str   = label if label is not None else str(node_id)

    def distance_to(self, other: "Node") -> float:
        """Euclidean distance, used as the edge cost of random graphs."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, "label": self.label}

    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.1f},{self.y:.1f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
