"""
recorder.py — Run Recorder & Analytics
========================================
Runs a traversal to completion and computes the numbers the analytics
panel shows.

Usage:
    rec = Recorder()
    metrics = rec.record(graph, source=0, target=5, mode="dfs")
    rec.results          # every StepResult, terminal one last
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import List, Optional, Union

from graph import Graph
from algorithms import SearchMode
from algorithms.step import StepResult
from engine.traversal import TraversalEngine

logger = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    mode:           str         = ""
    source:         int         = 0
    target:         int         = 0
    nodes_expanded: int         = 0     # Expanded + the final Found pop
    nodes_enqueued: int         = 0     # frontier pushes (relaxations for Dijkstra)
    stale_skipped:  int         = 0     # Dijkstra lazy-deletion discards
    total_steps:    int         = 0     # results produced, terminal included
    path:           List[int]   = field(default_factory=list)
    path_length:    int         = 0     # edges on the path
    path_cost:      float       = 0.0
    path_found:     bool        = False
    wall_time_ms:   float       = 0.0

    def to_dict(self) -> dict:
        return asdict(self)


class Recorder:
    """
    Attributes:
        results : Every StepResult from the last run.
        metrics : RunMetrics of the last run (None before record()).
    """

    def __init__(self):
        self.results: List[StepResult]     = []
        self.metrics: Optional[RunMetrics] = None

    def record(
        self,
        graph: Graph,
        source: int,
        target: int,
        mode: Union[SearchMode, str],
    ) -> RunMetrics:
        engine = TraversalEngine(graph, source, target, mode)
        return self.record_engine(engine)

    def record_engine(self, engine: TraversalEngine) -> RunMetrics:
        """
        Drive an existing engine from wherever it is to the end.

        total_steps and the path fields describe the whole run; the
        expansion counts only cover the steps driven here, so an engine
        that is already finished records none.
        """
        start = time.perf_counter()
        self.results = list(engine.steps())
        elapsed = (time.perf_counter() - start) * 1000

        m = RunMetrics(
            mode=engine.mode.value,
            source=engine.source,
            target=engine.target,
            total_steps=engine.steps_taken,
            wall_time_ms=round(elapsed, 3),
        )
        for r in self.results:
            if r.kind != "exhausted":
                m.nodes_expanded += 1
            if r.kind == "expanded":
                m.nodes_enqueued += len(r.newly_enqueued)

        terminal = engine.result
        if terminal is not None and terminal.kind == "found":
            m.path        = list(terminal.path)
            m.path_length = len(terminal.path) - 1
            m.path_cost   = terminal.cost
            m.path_found  = True
        m.stale_skipped = getattr(engine.searcher, "stale_discarded", 0)

        self.metrics = m
        logger.info(
            "Recorded %s run: steps=%d found=%s cost=%g",
            m.mode, m.total_steps, m.path_found, m.path_cost,
        )
        return m
