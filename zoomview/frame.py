"""Per-frame transform lookup for the renderer.

Kept apart from the renderer so it runs without a window.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .controller import ZoomTransformController

from .errors import DegenerateZoomRange
from .types import RenderTransform
from .logging import log


@dataclass
class FrameTransformSource:
    """Reads the controller's render transform once per frame.

    An empty zoom range falls back to the un-panned transform. The failure
    is logged once per run of degenerate frames.
    """
    degenerate_logged: bool = False

    def transform_for(self, controller: "ZoomTransformController") -> RenderTransform:
        try:
            transform = controller.render_transform()
        except DegenerateZoomRange as e:
            if not self.degenerate_logged:
                log(f"[RENDER][ERR] {e}; drawing without pan")
                self.degenerate_logged = True
            scale, _, _ = controller.current_transform()
            cx, cy = controller.geometry.view_center
            return RenderTransform(scale=scale, pivot_x=cx, pivot_y=cy)
        self.degenerate_logged = False
        return transform
