"""
edge.py — Undirected Weighted Edge
==================================
Connects two node ids with a non-negative cost.

Design decisions:
  - Endpoints are node-id ints, NOT Node references, so edges stay cheap
    to hash and serialise.
  - Edges are undirected.  Which endpoint discovered the other is the
    engine's business (parent map), not the edge's.
  - `key` is the frozenset of endpoints: the graph uses it to refuse a
    second edge between the same pair.
"""

from typing import FrozenSet, Optional


class Edge:
    """
    Attributes:
        a, b : Endpoint node ids (order carries no meaning).
        cost : Non-negative traversal cost.  1.0 for unweighted trees.
    """

    __slots__ = ("a", "b", "cost")

    def __init__(self, a: int, b: int, cost: float = 1.0):
        if a == b:
            raise ValueError(f"Self loop on node {a} is not allowed")
        if cost < 0:
            raise ValueError(f"Edge cost must be non-negative, got {cost}")
        self.a:    int   = a
        self.b:    int   = b
        self.cost: float = cost

    @property
    def key(self) -> FrozenSet[int]:
        return frozenset((self.a, self.b))

    def connects(self, node_a: int, node_b: int) -> bool:
        return self.key == frozenset((node_a, node_b))

    def other_end(self, node_id: int) -> Optional[int]:
        """Given one endpoint, return the other.  None if node_id isn't an endpoint."""
        if node_id == self.a:
            return self.b
        if node_id == self.b:
            return self.a
        return None

    def to_dict(self) -> dict:
        return {"a": self.a, "b": self.b, "cost": self.cost}

    def __repr__(self) -> str:
        return f"Edge({self.a} ↔ {self.b}, cost={self.cost:g})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.key == other.key and self.cost == other.cost

    def __hash__(self) -> int:
        return hash(self.key)
