"""Core data types for zoomview."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Tuple

from .errors import InvalidGeometry
from .math_utils import is_positive_finite


@dataclass(frozen=True)
class ViewportGeometry:
    """View and content sizes for one layout pass."""
    view_width: float
    view_height: float
    content_width: float
    content_height: float

    def validate(self) -> ViewportGeometry:
        """Raise InvalidGeometry if any dimension is not usable. Returns self."""
        for name in ("view_width", "view_height", "content_width", "content_height"):
            value = getattr(self, name)
            if not is_positive_finite(value):
                raise InvalidGeometry(name, value)
        return self

    @property
    def view_center(self) -> Tuple[float, float]:
        return (self.view_width / 2.0, self.view_height / 2.0)


@dataclass(frozen=True)
class ScaleBounds:
    """Allowed zoom range for a geometry."""
    min_scale: float
    max_scale: float

    @property
    def span(self) -> float:
        return self.max_scale - self.min_scale

    @property
    def ratio(self) -> float:
        """max_scale / min_scale."""
        return self.max_scale / self.min_scale


@dataclass(frozen=True)
class RenderTransform:
    """Canvas operations for one frame, applied in field order.

    Translate by (translate_x, translate_y), then scale by ``scale`` about
    (pivot_x, pivot_y), then draw the content centred on the pivot.
    """
    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 1.0
    pivot_x: float = 0.0
    pivot_y: float = 0.0


@dataclass
class TextureInfo:
    """Information about a loaded texture."""
    tex: Any  # rl.Texture2D - using Any to avoid raylib import
    w: int
    h: int
    path: str = ""
