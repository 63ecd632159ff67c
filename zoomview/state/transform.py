"""Transform state - scale bounds, live scale, pan, zoom toggle."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..types import ScaleBounds


@dataclass
class TransformState:
    """Mutable zoom/pan state. Owned and mutated only by the controller."""
    scale: float = 1.0
    min_scale: float = 1.0
    max_scale: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0
    is_zoomed_in: bool = False

    @classmethod
    def at_rest(cls, bounds: ScaleBounds) -> TransformState:
        """Fresh state for a new layout: fit scale, no pan, zoomed out."""
        return cls(
            scale=bounds.min_scale,
            min_scale=bounds.min_scale,
            max_scale=bounds.max_scale,
        )

    @property
    def bounds(self) -> ScaleBounds:
        return ScaleBounds(self.min_scale, self.max_scale)

    @property
    def pan(self) -> Tuple[float, float]:
        return (self.pan_x, self.pan_y)

    def as_tuple(self) -> Tuple[float, float, float]:
        """(scale, pan_x, pan_y) as read by the renderer."""
        return (self.scale, self.pan_x, self.pan_y)
