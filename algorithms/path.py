"""
path.py — Path Reconstruction
=============================
Walks a parent map from the target back to the source.  Shared by every
search mode: DFS / BFS fill the map from tree arithmetic, Dijkstra from
relaxation.
"""

from typing import Dict, List, Sequence

from graph import Edge, Graph


class NoPathRecorded(RuntimeError):
    """The parent map has no chain from the target back to the source."""


def reconstruct_path(parent: Dict[int, int], source: int, target: int) -> List[int]:
    """Node ids from source to target, inclusive."""
    if target != source and target not in parent:
        raise NoPathRecorded(f"No parent recorded for node {target}")

    path = [target]
    current = target
    # a chain can never be longer than the map; anything more is a cycle
    for _ in range(len(parent) + 1):
        if current == source:
            path.reverse()
            return path
        if current not in parent:
            raise NoPathRecorded(f"Parent chain from {target} breaks at {current} before reaching {source}")
        current = parent[current]
        path.append(current)
    raise NoPathRecorded(f"Parent chain from {target} cycles without reaching {source}")


def path_edges(graph: Graph, path: Sequence[int]) -> List[Edge]:
    """Edges joining consecutive path nodes, in order."""
    edges = []
    for a, b in zip(path, path[1:]):
        edge = graph.edge_between(a, b)
        if edge is None:
            raise NoPathRecorded(f"Path step {a} → {b} has no edge in the graph")
        edges.append(edge)
    return edges


def path_cost(edges: Sequence[Edge]) -> float:
    return sum(e.cost for e in edges)
