"""
step.py — Step Results
======================
Every call to `TraversalEngine.step()` returns exactly one of these:

    Expanded   – a node left the frontier and was visited
    Found      – the node just popped is the target; carries the path
    Exhausted  – the frontier ran dry before the target showed up

They are frozen snapshots.  The searcher is the only writer; the board,
stepper, recorder and renderer are pure readers.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from graph import Edge


@dataclass(frozen=True)
class Expanded:
    """
    Attributes:
        node           : Id of the node just expanded.
        discovered_via : Edge that originally discovered it (None for the source).
        newly_enqueued : Ids pushed onto the frontier during this expansion.
    """

    node:           int
    discovered_via: Optional[Edge]  = None
    newly_enqueued: Tuple[int, ...] = ()

    kind = "expanded"

    @property
    def is_terminal(self) -> bool:
        return False


@dataclass(frozen=True)
class Found:
    """
    Attributes:
        node  : The target id.
        path  : Node ids from source to target, inclusive.
        edges : Edges along `path`, in order (len(path) - 1 of them).
        cost  : Sum of edge costs along the path.
    """

    node:  int
    path:  Tuple[int, ...]  = ()
    edges: Tuple[Edge, ...] = field(default=(), compare=False)
    cost:  float            = 0.0

    kind = "found"

    @property
    def is_terminal(self) -> bool:
        return True


@dataclass(frozen=True)
class Exhausted:
    """No frontier left and the target was never reached."""

    kind = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return True


StepResult = Union[Expanded, Found, Exhausted]


def result_to_dict(result: StepResult) -> dict:
    """JSON-friendly form for the web layer."""
    if isinstance(result, Expanded):
        via = result.discovered_via
        return {
            "kind":           result.kind,
            "node":           result.node,
            "discovered_via": via.to_dict() if via else None,
            "newly_enqueued": list(result.newly_enqueued),
        }
    if isinstance(result, Found):
        return {
            "kind":  result.kind,
            "node":  result.node,
            "path":  list(result.path),
            "edges": [e.to_dict() for e in result.edges],
            "cost":  result.cost,
        }
    return {"kind": result.kind}
