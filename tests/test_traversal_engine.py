"""TraversalEngine state machine, construction checks and terminal behaviour."""

import pytest

from graph import GraphError, UnknownNode
from algorithms import Exhausted, Found, SearchMode
from engine import EngineState, TraversalEngine


class TestConstruction:
    def test_unknown_source(self, detour_graph):
        with pytest.raises(UnknownNode):
            TraversalEngine(detour_graph, 9, 3, SearchMode.DIJKSTRA)

    def test_unknown_target(self, tree2):
        with pytest.raises(UnknownNode) as info:
            TraversalEngine(tree2, 0, 7, SearchMode.DFS)
        assert info.value.node_id == 7

    def test_tree_mode_rejects_general_graph(self, detour_graph):
        with pytest.raises(GraphError):
            TraversalEngine(detour_graph, 0, 3, "bfs")

    def test_dijkstra_accepts_tree(self, tree2):
        found = list(TraversalEngine(tree2, 0, 6, "dijkstra").steps())[-1]
        assert found.path == (0, 2, 6)

    @pytest.mark.parametrize("raw,mode", [("dfs", SearchMode.DFS), ("BFS", SearchMode.BFS),
                                          ("Dijkstra", SearchMode.DIJKSTRA)])
    def test_string_modes(self, tree2, raw, mode):
        assert TraversalEngine(tree2, 0, 1, raw).mode is mode

    def test_unknown_mode(self, tree2):
        with pytest.raises(ValueError):
            TraversalEngine(tree2, 0, 1, "astar")


class TestStateMachine:
    def test_ready_running_found(self, tree2):
        engine = TraversalEngine(tree2, 0, 2, "bfs")
        assert engine.state is EngineState.READY
        assert engine.result is None

        engine.step()
        assert engine.state is EngineState.RUNNING
        assert not engine.is_finished

        engine.step()                      # expands 1
        result = engine.step()             # pops 2
        assert isinstance(result, Found)
        assert engine.state is EngineState.FOUND
        assert engine.is_finished

    def test_exhausted_state(self, split_graph):
        engine = TraversalEngine(split_graph, 3, 0, "dijkstra")
        list(engine.steps())
        assert engine.state is EngineState.EXHAUSTED

    @pytest.mark.parametrize("mode,target", [("dfs", 5), ("bfs", 5), ("dijkstra", 5)])
    def test_found_is_idempotent(self, tree2, mode, target):
        engine = TraversalEngine(tree2, 0, target, mode)
        terminal = list(engine.steps())[-1]
        taken = engine.steps_taken
        for _ in range(5):
            assert engine.step() is terminal
        assert engine.steps_taken == taken

    def test_exhausted_is_idempotent(self, split_graph):
        engine = TraversalEngine(split_graph, 0, 4, "dijkstra")
        terminal = list(engine.steps())[-1]
        assert isinstance(terminal, Exhausted)
        assert all(engine.step() is terminal for _ in range(5))

    def test_steps_generator_stops_after_terminal(self, tree2):
        engine = TraversalEngine(tree2, 0, 1, "bfs")
        assert len(list(engine.steps())) == 2
        assert list(engine.steps()) == []


class TestSnapshotsAndReset:
    def test_visited_grows(self, tree2):
        engine = TraversalEngine(tree2, 0, 6, "bfs")
        engine.step()
        engine.step()
        assert engine.visited == frozenset({0, 1})

    def test_reset_starts_over(self, detour_graph):
        engine = TraversalEngine(detour_graph, 0, 3, "dijkstra")
        first_run = list(engine.steps())
        engine.reset()
        assert engine.state is EngineState.READY
        assert engine.visited == frozenset()
        assert engine.steps_taken == 0
        assert list(engine.steps()) == first_run

    def test_engines_share_nothing(self, tree2):
        a = TraversalEngine(tree2, 0, 6, "dfs")
        b = TraversalEngine(tree2, 0, 6, "dfs")
        a.step()
        assert b.visited == frozenset()
        assert b.state is EngineState.READY
