"""Input state - pointer tracking for tap, drag and pinch detection."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config import DOUBLE_CLICK_TIME_MS, DOUBLE_CLICK_DISTANCE


@dataclass
class InputState:
    """State for gesture detection."""
    # Drag
    is_dragging: bool = False
    last_drag_pos: Tuple[float, float] = (0.0, 0.0)

    # Double-click
    last_click_time: float = 0.0
    last_click_pos: Tuple[int, int] = (0, 0)

    # Wheel pinch
    pinch_active: bool = False
    last_wheel_time: float = 0.0

    def start_drag(self, x: float, y: float) -> None:
        self.is_dragging = True
        self.last_drag_pos = (x, y)

    def drag_to(self, x: float, y: float) -> Optional[Tuple[float, float]]:
        """Move the drag to (x, y).

        Returns the scroll distance (previous - current) or None when the
        pointer did not move.
        """
        px, py = self.last_drag_pos
        self.last_drag_pos = (x, y)
        dx = px - x
        dy = py - y
        if dx == 0.0 and dy == 0.0:
            return None
        return (dx, dy)

    def end_drag(self) -> bool:
        """End dragging. Returns True if was dragging."""
        was_dragging = self.is_dragging
        self.is_dragging = False
        return was_dragging

    def check_double_click(self, x: int, y: int, t: float,
                           max_distance: int = DOUBLE_CLICK_DISTANCE) -> bool:
        """Check if a click at time ``t`` completes a double-click. Updates state."""
        if self.last_click_time and (t - self.last_click_time) < (DOUBLE_CLICK_TIME_MS / 1000.0):
            dx = abs(x - self.last_click_pos[0])
            dy = abs(y - self.last_click_pos[1])
            if dx < max_distance and dy < max_distance:
                self.last_click_time = 0.0  # Reset to prevent triple-click
                return True

        self.last_click_time = t
        self.last_click_pos = (x, y)
        return False

    def start_pinch(self, t: float) -> None:
        self.pinch_active = True
        self.last_wheel_time = t

    def end_pinch(self) -> bool:
        was_active = self.pinch_active
        self.pinch_active = False
        return was_active
