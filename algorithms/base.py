"""
base.py — Searcher Contract
===========================
A searcher owns the frontier and bookkeeping of ONE run and advances it
by exactly one expansion per `advance()` call.  It does not know about
READY / RUNNING / terminal states; the TraversalEngine wraps it for that.
"""

import logging
from typing import Dict, List, Set

from graph import Graph
from algorithms.path import path_cost, path_edges, reconstruct_path
from algorithms.step import Found, StepResult


class Searcher:
    """
    Attributes:
        graph   : Graph being searched (read only).
        source  : Start node id.
        target  : Goal node id.
        visited : Ids expanded so far.
        parent  : {node_id: id of the node that discovered it}.
    """

    def __init__(self, graph: Graph, source: int, target: int):
        self.graph:   Graph          = graph
        self.source:  int            = source
        self.target:  int            = target
        self.visited: Set[int]       = set()
        self.parent:  Dict[int, int] = {}

    def advance(self) -> StepResult:
        raise NotImplementedError

    def frontier(self) -> List[int]:
        """Node ids waiting to be expanded, next-to-pop last."""
        raise NotImplementedError

    def _found(self, logger: logging.Logger) -> Found:
        path  = reconstruct_path(self.parent, self.source, self.target)
        edges = path_edges(self.graph, path)
        cost  = path_cost(edges)
        logger.info("Found target %s: path=%s cost=%g", self.target, path, cost)
        return Found(node=self.target, path=tuple(path), edges=tuple(edges), cost=cost)
