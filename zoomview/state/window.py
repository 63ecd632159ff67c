"""Window state - screen dimensions."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass
class WindowState:
    """Window-related state."""
    screen_w: int = 0
    screen_h: int = 0

    @property
    def size(self) -> Tuple[int, int]:
        return (self.screen_w, self.screen_h)

    def resize(self, w: int, h: int) -> bool:
        """Record a new size. Returns True if it changed."""
        if (w, h) == self.size:
            return False
        self.screen_w, self.screen_h = w, h
        return True
