"""Stepper cadence with a hand-driven clock."""

import pytest

from algorithms import Found
from engine import SPEED_PRESETS, Stepper, StepperState, TraversalEngine


@pytest.fixture
def stepper(tree2, clock):
    engine = TraversalEngine(tree2, 0, 5, "dfs")
    return Stepper(engine, interval=0.5, clock=clock)


class TestManualStepping:
    def test_next_step_records_history(self, stepper):
        r1 = stepper.next_step()
        r2 = stepper.next_step()
        assert stepper.history == [r1, r2]
        assert stepper.current is r2

    def test_finishes_on_terminal(self, stepper):
        last = stepper.jump_to_end()
        assert isinstance(last, Found)
        assert stepper.state is StepperState.FINISHED
        assert stepper.next_step() is None
        assert len(stepper.history) == 4

    def test_on_step_callback(self, tree2, clock):
        seen = []
        s = Stepper(TraversalEngine(tree2, 0, 2, "bfs"), on_step=seen.append, clock=clock)
        s.jump_to_end()
        assert [r.kind for r in seen] == ["expanded", "expanded", "found"]


class TestTicking:
    def test_tick_does_nothing_while_paused(self, stepper):
        assert stepper.tick() is None
        assert stepper.history == []

    def test_first_tick_after_play_advances(self, stepper):
        stepper.play()
        assert stepper.tick() is not None
        assert stepper.tick() is None

    def test_interval_gates_ticks(self, stepper, clock):
        stepper.play()
        stepper.tick()
        clock.advance(0.3)
        assert stepper.tick() is None
        clock.advance(0.2)
        assert stepper.tick() is not None
        assert len(stepper.history) == 2

    def test_pause_stops_ticks(self, stepper, clock):
        stepper.toggle_play()
        assert stepper.is_playing
        stepper.toggle_play()
        clock.advance(5)
        assert stepper.tick() is None

    def test_play_after_finish_is_ignored(self, stepper):
        stepper.jump_to_end()
        stepper.play()
        assert stepper.state is StepperState.FINISHED

    def test_ticks_run_to_completion(self, stepper, clock):
        stepper.play()
        for _ in range(10):
            stepper.tick()
            clock.advance(0.5)
        assert stepper.is_finished
        assert stepper.history[-1].path == (0, 2, 5)


class TestSpeedAndReset:
    def test_presets(self, stepper):
        stepper.set_speed("fast")
        assert stepper.interval == SPEED_PRESETS["fast"]
        with pytest.raises(ValueError):
            stepper.set_speed("warp")

    def test_speed_floor(self, stepper):
        stepper.set_speed_value(0)
        assert stepper.interval > 0

    def test_reset(self, stepper):
        stepper.jump_to_end()
        stepper.reset()
        assert stepper.state is StepperState.PAUSED
        assert stepper.history == []
        assert stepper.next_step().node == 0
