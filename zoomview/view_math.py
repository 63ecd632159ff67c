"""Pure view calculation functions - no side effects, no state mutation."""

from __future__ import annotations
from typing import Tuple

from .types import ViewportGeometry, ScaleBounds, RenderTransform
from .errors import DegenerateZoomRange
from .math_utils import clamp


def compute_scale_bounds(geometry: ViewportGeometry, coefficient: float) -> ScaleBounds:
    """Compute the (min, max) zoom range for a geometry.

    The axis where the content has to shrink more to fit is the binding one:
    its fit factor is min_scale. max_scale is the fit factor of the other
    axis multiplied by ``coefficient``.

    Args:
        geometry: View and content sizes.
        coefficient: Overscale applied on top of the other axis fit.

    Returns:
        ScaleBounds for the geometry.

    Raises:
        InvalidGeometry: If any dimension is zero, negative or not finite.
    """
    g = geometry.validate()
    fit_w = g.view_width / g.content_width
    fit_h = g.view_height / g.content_height

    if g.content_width / g.view_width > g.content_height / g.view_height:
        return ScaleBounds(min_scale=fit_w, max_scale=fit_h * coefficient)
    return ScaleBounds(min_scale=fit_h, max_scale=fit_w * coefficient)


def pan_limits(scale: float, geometry: ViewportGeometry) -> Tuple[float, float]:
    """How far the content centre may move from the view centre on each axis.

    A negative limit means the content is smaller than the view on that axis.
    """
    limit_x = geometry.content_width * scale / 2.0 - geometry.view_width / 2.0
    limit_y = geometry.content_height * scale / 2.0 - geometry.view_height / 2.0
    return (limit_x, limit_y)


def _clamp_axis(pan: float, limit: float) -> float:
    if limit < 0.0:
        return 0.0
    return clamp(pan, -limit, limit)


def clamp_pan(
    pan_x: float,
    pan_y: float,
    scale: float,
    geometry: ViewportGeometry
) -> Tuple[float, float]:
    """Clamp a pan offset so scaled content never leaves a gap inside the view.

    Axes where the content is smaller than the view are pinned to 0.
    """
    limit_x, limit_y = pan_limits(scale, geometry)
    return (_clamp_axis(pan_x, limit_x), _clamp_axis(pan_y, limit_y))


def anchor_pan(
    focus_x: float,
    focus_y: float,
    bounds: ScaleBounds,
    geometry: ViewportGeometry
) -> Tuple[float, float]:
    """Pan offset that makes a zoom appear anchored at a focus point.

    Uses the ratio of the zoom extremes rather than the live scale, so the
    result depends only on the focus point and the bounds.
    """
    cx, cy = geometry.view_center
    k = 1.0 - bounds.ratio
    return ((focus_x - cx) * k, (focus_y - cy) * k)


def zoom_progress(scale: float, bounds: ScaleBounds) -> float:
    """Position of ``scale`` inside the zoom range: 0 at min, 1 at max.

    Raises:
        DegenerateZoomRange: If min_scale == max_scale.
    """
    span = bounds.span
    if span == 0.0:
        raise DegenerateZoomRange(bounds.min_scale)
    return (scale - bounds.min_scale) / span


def compose_render_transform(
    scale: float,
    pan_x: float,
    pan_y: float,
    bounds: ScaleBounds,
    geometry: ViewportGeometry
) -> RenderTransform:
    """Build the per-frame canvas transform.

    Pan influence grows linearly with zoom progress: none at min_scale,
    full at max_scale.
    """
    t = zoom_progress(scale, bounds)
    cx, cy = geometry.view_center
    return RenderTransform(
        translate_x=pan_x * t,
        translate_y=pan_y * t,
        scale=scale,
        pivot_x=cx,
        pivot_y=cy,
    )


def compute_dest_rect(
    transform: RenderTransform,
    geometry: ViewportGeometry
) -> Tuple[float, float, float, float]:
    """On-screen rectangle (x, y, w, h) of the content under ``transform``."""
    s = transform.scale
    w = geometry.content_width * s
    h = geometry.content_height * s
    return (
        transform.translate_x + transform.pivot_x - w / 2.0,
        transform.translate_y + transform.pivot_y - h / 2.0,
        w,
        h,
    )
