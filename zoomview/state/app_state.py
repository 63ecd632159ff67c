"""Composite AppState - everything the host loop reads and writes."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .window import WindowState
from .input import InputState
from ..controller import ZoomTransformController, create_controller
from ..types import TextureInfo, ViewportGeometry


@dataclass
class AppState:
    """
    Host application state.

    The transform itself lives in the controller; AppState only keeps the
    window, the pointer tracking and the loaded content around it.
    """
    window: WindowState = field(default_factory=WindowState)
    input: InputState = field(default_factory=InputState)
    controller: ZoomTransformController = field(default_factory=create_controller)
    content: Optional[TextureInfo] = None
    show_hud: bool = False
    running: bool = True

    @property
    def screenW(self) -> int:
        return self.window.screen_w

    @property
    def screenH(self) -> int:
        return self.window.screen_h

    @property
    def geometry(self) -> Optional[ViewportGeometry]:
        return self.controller.geometry

    @property
    def is_zoomed_in(self) -> bool:
        s = self.controller.state
        return bool(s and s.is_zoomed_in)

    def relayout(self, width: int, height: int) -> bool:
        """Push a window size and the content size into the controller.

        Raises:
            InvalidGeometry: If the controller rejects the size.
        """
        if self.content is None:
            return False
        return self.controller.on_layout(width, height, self.content.w, self.content.h)
