"""
engine/
-------
Run control: the traversal state machine plus playback & recording.

    from engine import TraversalEngine, Stepper, Recorder
"""

from engine.traversal import TraversalEngine, EngineState
from engine.stepper   import Stepper, StepperState, SPEED_PRESETS
from engine.recorder  import Recorder, RunMetrics

__all__ = [
    "TraversalEngine",
    "EngineState",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
]
