"""
traversal.py — Traversal Engine
===============================
The pull-based core.  The caller decides WHEN to advance; the engine only
decides WHAT one advance means.

State machine:
    READY  →  step()                 →  RUNNING
    RUNNING → step() hits target     →  FOUND      (terminal)
    RUNNING → step() empties frontier →  EXHAUSTED  (terminal)
    any    →  reset()                →  READY

Once terminal, every further step() returns the very same result object.

Thread safety:
  None.  One engine, one caller.  Each engine owns its frontier, visited
  set and cost / parent maps outright; separate engines share nothing but
  the (read-only) graph.
"""

import logging
from enum import Enum
from typing import FrozenSet, Iterator, List, Optional, Union

from graph import Graph, GraphError, UnknownNode
from algorithms import AlgoInfo, SearchMode, get_algorithm, parse_mode
from algorithms.base import Searcher
from algorithms.step import StepResult

logger = logging.getLogger(__name__)


class EngineState(Enum):
    READY     = "ready"
    RUNNING   = "running"
    FOUND     = "found"
    EXHAUSTED = "exhausted"


class TraversalEngine:
    """
    Attributes:
        graph  : Graph being searched.  Must not change during a run.
        source : Start node id.
        target : Goal node id.
        mode   : SearchMode.
        state  : Current EngineState.
        result : Last StepResult returned (None before the first step).
        steps_taken : Number of step() calls that did real work.
    """

    def __init__(
        self,
        graph: Graph,
        source: int,
        target: int,
        mode: Union[SearchMode, str] = SearchMode.DIJKSTRA,
    ):
        self.mode: SearchMode = parse_mode(mode)
        self.info: AlgoInfo   = get_algorithm(self.mode)

        for node_id in (source, target):
            if not graph.has_node(node_id):
                raise UnknownNode(node_id)
        if self.info.requires_tree and not graph.is_heap_tree():
            raise GraphError(f"{self.info.label} needs a heap-indexed complete binary tree")

        self.graph:  Graph = graph
        self.source: int   = source
        self.target: int   = target
        self.reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        """Drop all run state and go back to READY."""
        self._searcher: Searcher              = self.info.searcher(self.graph, self.source, self.target)
        self.state:     EngineState           = EngineState.READY
        self.result:    Optional[StepResult]  = None
        self.steps_taken: int                 = 0

    def step(self) -> StepResult:
        """Advance by exactly one expansion, or repeat the terminal result."""
        if self.is_finished:
            return self.result

        if self.state is EngineState.READY:
            logger.info(
                "Starting %s from %s to %s", self.info.label, self.source, self.target,
            )
            self.state = EngineState.RUNNING

        result = self._searcher.advance()
        self.steps_taken += 1
        self.result = result

        if result.kind == "found":
            self.state = EngineState.FOUND
        elif result.kind == "exhausted":
            self.state = EngineState.EXHAUSTED
        return result

    def steps(self) -> Iterator[StepResult]:
        """Yield step results until (and including) the terminal one."""
        while not self.is_finished:
            yield self.step()

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.state in (EngineState.FOUND, EngineState.EXHAUSTED)

    @property
    def visited(self) -> FrozenSet[int]:
        return frozenset(self._searcher.visited)

    def frontier(self) -> List[int]:
        """Ids awaiting expansion, next-to-pop last."""
        return self._searcher.frontier()

    @property
    def searcher(self) -> Searcher:
        return self._searcher

    def __repr__(self) -> str:
        return (
            f"TraversalEngine(mode={self.mode.value}, {self.source}→{self.target}, "
            f"state={self.state.value}, steps={self.steps_taken})"
        )
