"""Input Handler - maps raylib input events to commands.

Mouse input is sampled once per frame into a PointerSample and handed to
the gesture recognizer; keyboard shortcuts are mapped here directly.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .state.app_state import AppState

from .rl_compat import rl
from .commands import Command, CloseApp, ToggleHUD, DoubleTap
from .gestures import GestureRecognizer, PointerSample
from .config import KEY_CLOSE, KEY_TOGGLE_HUD, KEY_TOGGLE_ZOOM
from .logging import now


@dataclass
class InputHandler:
    """Handles input polling and command generation."""
    recognizer: GestureRecognizer = field(default_factory=GestureRecognizer)

    # Key bindings (can be customized)
    key_close: int = KEY_CLOSE
    key_toggle_hud: int = KEY_TOGGLE_HUD
    key_toggle_zoom: int = KEY_TOGGLE_ZOOM

    def poll_pointer(self) -> PointerSample:
        """Get current mouse state."""
        pos = rl.GetMousePosition()
        return PointerSample(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            left_down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            wheel=rl.GetMouseWheelMove(),
            t=now(),
        )

    def poll(self, state: "AppState") -> List[Command]:
        """Poll all inputs and return list of commands to execute."""
        commands: List[Command] = []

        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseApp())
            return commands

        if rl.IsKeyPressed(self.key_toggle_hud):
            commands.append(ToggleHUD())

        sample = self.poll_pointer()

        # F key behaves like a double-tap under the pointer
        if rl.IsKeyPressed(self.key_toggle_zoom):
            commands.append(DoubleTap(x=sample.x, y=sample.y))

        commands.extend(self.recognizer.feed(sample, state.input))
        return commands


# Singleton instance for convenience
_default_handler: Optional[InputHandler] = None


def get_input_handler() -> InputHandler:
    """Get the default input handler instance."""
    global _default_handler
    if _default_handler is None:
        _default_handler = InputHandler()
    return _default_handler
