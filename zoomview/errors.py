"""Errors raised by the zoom transform core."""

from __future__ import annotations


class ZoomViewError(ValueError):
    """Base class for zoomview errors."""


class InvalidGeometry(ZoomViewError):
    """A view or content dimension is zero, negative or not finite."""

    def __init__(self, field_name: str, value: float):
        super().__init__(f"{field_name} must be a positive finite number, got {value!r}")
        self.field_name = field_name
        self.value = value


class DegenerateZoomRange(ZoomViewError):
    """min_scale equals max_scale, so zoom progress is undefined."""

    def __init__(self, scale: float):
        super().__init__(f"zoom range is empty (min_scale == max_scale == {scale!r})")
        self.scale = scale
