"""
stepper.py — Cadence Driver
===========================
Calls `TraversalEngine.step()` at a fixed interval so the board animates.
The Stepper never sleeps: the owner calls `tick()` from its event loop
(or the browser polls /api/tick) and the Stepper decides whether enough
time has passed to advance.

State machine:
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    any     →  engine reaches FOUND / EXHAUSTED  →  FINISHED
    any     →  reset()  →  PAUSED  (engine reset as well)

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread; the web
  app serialises access with a lock per board.
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional

from algorithms.step import StepResult
from engine.traversal import TraversalEngine

logger = logging.getLogger(__name__)


class StepperState(Enum):
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # Dijkstra board default
    "medium": 0.5,    # tree board default
    "fast":   0.15,
    "turbo":  0.05,
}

MIN_INTERVAL = 0.02


class Stepper:
    """
    Attributes:
        engine   : The TraversalEngine being driven.
        state    : Current StepperState.
        history  : Every StepResult produced so far, in order.
        interval : Seconds between auto-advance ticks.
        on_step  : Optional callback(StepResult) fired after every real step.
        clock    : Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        engine: TraversalEngine,
        interval: float = SPEED_PRESETS["medium"],
        on_step: Optional[Callable[[StepResult], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.engine:   TraversalEngine  = engine
        self.history:  List[StepResult] = []
        self.state:    StepperState     = StepperState.PAUSED
        self.interval: float            = max(MIN_INTERVAL, interval)
        self.on_step                    = on_step
        self.clock                      = clock
        self._last_tick: float          = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self) -> None:
        self.engine.reset()
        self.history = []
        self.state   = StepperState.PAUSED

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> Optional[StepResult]:
        """Advance one step.  Returns None if the run already finished."""
        if self.state == StepperState.FINISHED:
            return None
        result = self.engine.step()
        self.history.append(result)
        if self.engine.is_finished:
            self.state = StepperState.FINISHED
            logger.info("Run finished after %d steps: %s", len(self.history), result.kind)
        if self.on_step is not None:
            self.on_step(result)
        return result

    def jump_to_end(self) -> Optional[StepResult]:
        """Run the engine to completion; returns the terminal result."""
        last = None
        while self.state != StepperState.FINISHED:
            last = self.next_step()
        return last

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state == StepperState.FINISHED:
            return
        self.state      = StepperState.PLAYING
        # first tick after play() advances immediately
        self._last_tick = self.clock() - self.interval

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> Optional[StepResult]:
        """
        Call periodically (e.g. every 50 ms).  If playing and the interval
        has elapsed, advances one step and returns its result.
        """
        if self.state != StepperState.PLAYING:
            return None
        now = self.clock()
        if now - self._last_tick < self.interval:
            return None
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset!r}")
        self.interval = SPEED_PRESETS[preset]

    def set_speed_value(self, seconds: float) -> None:
        self.interval = max(MIN_INTERVAL, seconds)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current(self) -> Optional[StepResult]:
        return self.history[-1] if self.history else None

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING
