"""Gesture detectors - turn pointer samples into gesture commands.

Both detectors see every sample, so one physical movement can produce
pinch and tap/drag commands in the same frame. The controller is built to
stay consistent under that interleaving.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .commands import Command, PinchBegin, PinchUpdate, PinchEnd, DoubleTap, Drag
from .config import ZOOM_STEP_WHEEL, PINCH_IDLE_END_MS
from .state.input import InputState


@dataclass
class PointerSample:
    """Pointer state for one frame."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    left_down: bool = False
    wheel: float = 0.0
    t: float = 0.0


@dataclass
class ScaleGestureDetector:
    """Maps mouse wheel bursts onto pinch begin/update/end.

    The first notch of a burst begins a pinch focused at the pointer; the
    pinch ends once the wheel has been idle for ``idle_end_ms``.
    """
    step: float = ZOOM_STEP_WHEEL
    idle_end_ms: float = PINCH_IDLE_END_MS

    def feed(self, sample: PointerSample, input_state: InputState) -> List[Command]:
        commands: List[Command] = []
        if sample.wheel != 0.0:
            if not input_state.pinch_active:
                input_state.start_pinch(sample.t)
                commands.append(PinchBegin(focus_x=sample.x, focus_y=sample.y))
            input_state.last_wheel_time = sample.t
            commands.append(PinchUpdate(scale_factor=(1.0 + self.step) ** sample.wheel))
        elif input_state.pinch_active:
            if (sample.t - input_state.last_wheel_time) * 1000.0 >= self.idle_end_ms:
                input_state.end_pinch()
                commands.append(PinchEnd())
        return commands


@dataclass
class TapDragDetector:
    """Recognizes double-clicks and left-button drags."""

    def feed(self, sample: PointerSample, input_state: InputState) -> List[Command]:
        commands: List[Command] = []
        if sample.left_pressed:
            if input_state.check_double_click(int(sample.x), int(sample.y), sample.t):
                commands.append(DoubleTap(x=sample.x, y=sample.y))
            input_state.start_drag(sample.x, sample.y)
        elif sample.left_down and input_state.is_dragging:
            delta = input_state.drag_to(sample.x, sample.y)
            if delta is not None:
                commands.append(Drag(dx=delta[0], dy=delta[1]))

        if sample.left_released:
            input_state.end_drag()
        return commands


@dataclass
class GestureRecognizer:
    """Feeds every sample to both detectors."""
    scale_detector: ScaleGestureDetector = field(default_factory=ScaleGestureDetector)
    tap_detector: TapDragDetector = field(default_factory=TapDragDetector)

    def feed(self, sample: PointerSample, input_state: InputState) -> List[Command]:
        commands = self.scale_detector.feed(sample, input_state)
        commands.extend(self.tap_detector.feed(sample, input_state))
        return commands
