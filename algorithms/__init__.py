"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every search mode the visualizer knows about.

    from algorithms import SearchMode, REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        SearchMode.DFS: AlgoInfo(mode, label, searcher, pseudocode, …),
        …
    }

The engine uses `searcher` and `requires_tree`; the board and web page
use the rest.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Type, Union

from algorithms.base        import Searcher
from algorithms.dijkstra    import DijkstraSearch, PSEUDOCODE as _dij_pc
from algorithms.min_heap    import HeapEntry, MinPriorityQueue
from algorithms.path        import NoPathRecorded, path_cost, path_edges, reconstruct_path
from algorithms.step        import Exhausted, Expanded, Found, StepResult, result_to_dict
from algorithms.tree_search import (
    BreadthFirstSearch,
    DepthFirstSearch,
    BFS_PSEUDOCODE as _bfs_pc,
    DFS_PSEUDOCODE as _dfs_pc,
)


class SearchMode(Enum):
    DFS      = "dfs"
    BFS      = "bfs"
    DIJKSTRA = "dijkstra"


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each mode
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    mode:             SearchMode
    label:            str                     # human label, e.g. "Depth-First Search"
    searcher:         Type[Searcher]          # class instantiated per run
    pseudocode:       List[str]               # lines for the side-panel
    requires_tree:    bool = False            # needs a heap-indexed complete binary tree
    weighted:         bool = False            # reads edge costs?
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str  = ""
    complexity_space: str  = ""
    description:      str  = ""


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[SearchMode, AlgoInfo] = {

    SearchMode.DFS: AlgoInfo(
        mode=SearchMode.DFS, label="Depth-First Search", searcher=DepthFirstSearch,
        pseudocode=_dfs_pc, requires_tree=True,
        tags=["unweighted", "traversal", "tree"],
        complexity_time="O(V)", complexity_space="O(h)",
        description="Dives down the right-most branch first, then backtracks.",
    ),

    SearchMode.BFS: AlgoInfo(
        mode=SearchMode.BFS, label="Breadth-First Search", searcher=BreadthFirstSearch,
        pseudocode=_bfs_pc, requires_tree=True,
        tags=["unweighted", "traversal", "tree"],
        complexity_time="O(V)", complexity_space="O(2^h)",
        description="Sweeps the tree level by level, left to right.",
    ),

    SearchMode.DIJKSTRA: AlgoInfo(
        mode=SearchMode.DIJKSTRA, label="Dijkstra's Algorithm", searcher=DijkstraSearch,
        pseudocode=_dij_pc, weighted=True,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log V)", complexity_space="O(V + E)",
        description="Finalises the closest unvisited node each step. Optimal for non-negative costs.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def parse_mode(mode: Union[SearchMode, str]) -> SearchMode:
    """Accept the enum or its string value ("dfs", "BFS", …)."""
    if isinstance(mode, SearchMode):
        return mode
    try:
        return SearchMode(str(mode).lower())
    except ValueError:
        raise ValueError(f"Unknown search mode: {mode!r}") from None


def get_algorithm(mode: Union[SearchMode, str]) -> Optional[AlgoInfo]:
    """Return AlgoInfo for a mode, or None if the string names no mode."""
    try:
        return REGISTRY[parse_mode(mode)]
    except ValueError:
        return None


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered modes in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "SearchMode",
    "AlgoInfo",
    "REGISTRY",
    "parse_mode",
    "get_algorithm",
    "list_algorithms",
    "Searcher",
    "DepthFirstSearch",
    "BreadthFirstSearch",
    "DijkstraSearch",
    "MinPriorityQueue",
    "HeapEntry",
    "Expanded",
    "Found",
    "Exhausted",
    "StepResult",
    "result_to_dict",
    "NoPathRecorded",
    "reconstruct_path",
    "path_edges",
    "path_cost",
]
