"""Command Pattern for input handling.

Commands encapsulate actions produced by the gesture detectors and the
input handler. Each command has an execute() method and an optional
can_execute() guard.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state.app_state import AppState

from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Layout
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class Layout(Command):
    """Window was resized."""
    width: int
    height: int

    def execute(self, state: "AppState") -> bool:
        if (self.width, self.height) == state.window.size:
            return False
        log(f"[CMD] Layout: {self.width}x{self.height}")
        # Record the size only once the controller accepted it
        applied = state.relayout(self.width, self.height)
        state.window.resize(self.width, self.height)
        return applied


# ═══════════════════════════════════════════════════════════════════════════
# Pinch Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class PinchBegin(Command):
    """Start a pinch anchored at a focus point."""
    focus_x: float
    focus_y: float

    def can_execute(self, state: "AppState") -> bool:
        return state.controller.is_ready

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] PinchBegin: focus=({self.focus_x:.0f}, {self.focus_y:.0f})")
        return state.controller.on_pinch_begin(self.focus_x, self.focus_y)


@dataclass
class PinchUpdate(Command):
    """Multiply the current scale by a factor."""
    scale_factor: float

    def can_execute(self, state: "AppState") -> bool:
        return state.controller.is_ready

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        return state.controller.on_pinch_update(self.scale_factor)


class PinchEnd(Command):
    """Finish a pinch. The scale stays where it is."""

    def can_execute(self, state: "AppState") -> bool:
        return state.controller.is_ready

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log("[CMD] PinchEnd")
        return state.controller.on_pinch_end()


# ═══════════════════════════════════════════════════════════════════════════
# Tap / Pan Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class DoubleTap(Command):
    """Toggle zoom, anchored at the tap position."""
    x: float
    y: float

    def can_execute(self, state: "AppState") -> bool:
        return state.controller.is_ready

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        log(f"[CMD] DoubleTap: ({self.x:.0f}, {self.y:.0f})")
        return state.controller.on_double_tap(self.x, self.y)


@dataclass
class Drag(Command):
    """Pan by a scroll distance (previous - current pointer position)."""
    dx: float
    dy: float

    def can_execute(self, state: "AppState") -> bool:
        return state.controller.is_ready and state.is_zoomed_in

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        return state.controller.on_drag(self.dx, self.dy)


# ═══════════════════════════════════════════════════════════════════════════
# UI / App Control Commands
# ═══════════════════════════════════════════════════════════════════════════

class ToggleHUD(Command):
    """Toggle the scale/pan overlay."""

    def execute(self, state: "AppState") -> bool:
        state.show_hud = not state.show_hud
        log(f"[CMD] ToggleHUD: now={state.show_hud}")
        return True


class CloseApp(Command):
    """Close the application."""

    def execute(self, state: "AppState") -> bool:
        state.running = False
        log("[CMD] CloseApp")
        return True
