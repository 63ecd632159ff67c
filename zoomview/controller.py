"""ZoomTransformController - the zoom/pan state machine.

The controller owns a TransformState and reacts to layout and gesture
events. After every call the state is clamped: scale inside
[min_scale, max_scale] and pan inside the bounds for the current scale.

Known quirk: the anchor pan computed on pinch begin and double-tap uses
max_scale / min_scale instead of the live scale ratio, so the pan jump
depends only on the bounds and the focus point.
"""

from __future__ import annotations
import math
from typing import Callable, Optional, Tuple

from .animation import AnimationController, AnimationType, create_scale_tween
from .config import ZOOM_COEFFICIENT, ANIM_TOGGLE_ZOOM_MS
from .logging import log, now
from .math_utils import clamp
from .state.transform import TransformState
from .types import ViewportGeometry, RenderTransform
from .view_math import (
    compute_scale_bounds,
    clamp_pan,
    anchor_pan,
    compose_render_transform,
)

IDENTITY = (1.0, 0.0, 0.0)


class ZoomTransformController:
    """Interprets gestures into a clamped (scale, pan_x, pan_y) transform."""

    def __init__(
        self,
        zoom_coefficient: float = ZOOM_COEFFICIENT,
        toggle_duration_ms: float = ANIM_TOGGLE_ZOOM_MS,
        clock: Callable[[], float] = now,
        on_invalidate: Optional[Callable[[], None]] = None,
    ):
        if not math.isfinite(zoom_coefficient) or zoom_coefficient < 1.0:
            raise ValueError(f"zoom_coefficient must be >= 1.0, got {zoom_coefficient!r}")
        self.zoom_coefficient = zoom_coefficient
        self.toggle_duration_ms = toggle_duration_ms
        self.on_invalidate = on_invalidate
        self._clock = clock
        self._animations = AnimationController(clock)
        self._geometry: Optional[ViewportGeometry] = None
        self._state: Optional[TransformState] = None
        self._needs_redraw = False
        self._alive = True

    # ═══════════════════════════════════════════════════════════════════════
    # Lifecycle
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def is_ready(self) -> bool:
        """True once a layout has been applied and until destroy()."""
        return self._alive and self._state is not None

    def destroy(self) -> None:
        """Detach from the host. Later gesture and layout calls are ignored."""
        if not self._alive:
            return
        self._animations.cancel_all()
        self._alive = False
        self.on_invalidate = None
        log("[CTRL] Destroyed")

    # ═══════════════════════════════════════════════════════════════════════
    # Read access
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def state(self) -> Optional[TransformState]:
        return self._state

    @property
    def geometry(self) -> Optional[ViewportGeometry]:
        return self._geometry

    @property
    def is_animating(self) -> bool:
        return self._animations.is_running(AnimationType.TOGGLE_ZOOM)

    @property
    def needs_redraw(self) -> bool:
        return self._needs_redraw

    def consume_redraw(self) -> bool:
        """Return and clear the pending redraw request."""
        pending = self._needs_redraw
        self._needs_redraw = False
        return pending

    def current_transform(self) -> Tuple[float, float, float]:
        """(scale, pan_x, pan_y); identity before the first layout."""
        if self._state is None:
            return IDENTITY
        return self._state.as_tuple()

    def render_transform(self) -> RenderTransform:
        """Canvas transform for this frame.

        Raises:
            DegenerateZoomRange: If min_scale == max_scale.
        """
        if self._state is None or self._geometry is None:
            return RenderTransform()
        s = self._state
        return compose_render_transform(s.scale, s.pan_x, s.pan_y, s.bounds, self._geometry)

    # ═══════════════════════════════════════════════════════════════════════
    # Geometry
    # ═══════════════════════════════════════════════════════════════════════

    def on_layout(self, view_width: float, view_height: float,
                  content_width: float, content_height: float) -> bool:
        """Apply a new geometry and reset the transform.

        Raises:
            InvalidGeometry: If any dimension is not positive. State is
                left untouched.
        """
        if not self._alive:
            log("[CTRL] on_layout ignored: controller destroyed")
            return False
        geometry = ViewportGeometry(
            float(view_width), float(view_height),
            float(content_width), float(content_height),
        )
        bounds = compute_scale_bounds(geometry, self.zoom_coefficient)

        self._animations.cancel(AnimationType.TOGGLE_ZOOM)
        self._geometry = geometry
        self._state = TransformState.at_rest(bounds)
        log(f"[CTRL] Layout view={view_width}x{view_height} "
            f"content={content_width}x{content_height} "
            f"min={bounds.min_scale:.4f} max={bounds.max_scale:.4f}")
        self._invalidate()
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # Pinch
    # ═══════════════════════════════════════════════════════════════════════

    def on_pinch_begin(self, focus_x: float, focus_y: float) -> bool:
        if not self._check_ready("on_pinch_begin"):
            return False
        self._animations.cancel(AnimationType.TOGGLE_ZOOM)
        s = self._state
        s.pan_x, s.pan_y = anchor_pan(focus_x, focus_y, s.bounds, self._geometry)
        self._clamp_pan()
        self._invalidate()
        return True

    def on_pinch_update(self, scale_factor: float) -> bool:
        if not self._check_ready("on_pinch_update"):
            return False
        if not math.isfinite(scale_factor) or scale_factor <= 0.0:
            log(f"[CTRL] on_pinch_update ignored: bad factor {scale_factor!r}")
            return False
        s = self._state
        self._set_scale(s.scale * scale_factor)
        self._invalidate()
        return True

    def on_pinch_end(self) -> bool:
        return self._check_ready("on_pinch_end")

    # ═══════════════════════════════════════════════════════════════════════
    # Double-tap toggle
    # ═══════════════════════════════════════════════════════════════════════

    def on_double_tap(self, x: float, y: float) -> bool:
        """Toggle between fit and zoomed-in, animating the scale."""
        if not self._check_ready("on_double_tap"):
            return False
        s = self._state
        s.is_zoomed_in = not s.is_zoomed_in
        if s.is_zoomed_in:
            s.pan_x, s.pan_y = anchor_pan(x, y, s.bounds, self._geometry)
            self._clamp_pan()
            target = s.max_scale
        else:
            target = s.min_scale

        tween = create_scale_tween(
            self.toggle_duration_ms,
            from_scale=s.scale,
            to_scale=target,
            on_frame=self._apply_tween_scale,
            start_time=self._clock(),
        )
        self._animations.start(tween)
        log(f"[CTRL] DoubleTap at ({x:.0f}, {y:.0f}) zoomed_in={s.is_zoomed_in} "
            f"{s.scale:.4f} -> {target:.4f}")
        return True

    def tick(self, at: Optional[float] = None) -> bool:
        """Advance running tweens. Returns True if an animation is still running."""
        if not self._alive:
            return False
        self._animations.update(at)
        return self._animations.has_animations

    def _apply_tween_scale(self, value: float) -> None:
        if self._state is None:
            return
        self._set_scale(value)
        self._invalidate()

    # ═══════════════════════════════════════════════════════════════════════
    # Drag
    # ═══════════════════════════════════════════════════════════════════════

    def on_drag(self, dx: float, dy: float) -> bool:
        """Pan by a scroll distance (previous - current pointer position).

        Ignored unless zoomed in.
        """
        if not self._check_ready("on_drag"):
            return False
        s = self._state
        if not s.is_zoomed_in:
            return False
        s.pan_x += -dx
        s.pan_y += -dy
        self._clamp_pan()
        self._invalidate()
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # Internals
    # ═══════════════════════════════════════════════════════════════════════

    def _check_ready(self, what: str) -> bool:
        if not self._alive:
            log(f"[CTRL] {what} ignored: controller destroyed")
            return False
        if self._state is None:
            log(f"[CTRL] {what} ignored: no layout yet")
            return False
        return True

    def _set_scale(self, value: float) -> None:
        s = self._state
        s.scale = clamp(value, s.min_scale, s.max_scale)
        self._clamp_pan()

    def _clamp_pan(self) -> None:
        s = self._state
        s.pan_x, s.pan_y = clamp_pan(s.pan_x, s.pan_y, s.scale, self._geometry)

    def _invalidate(self) -> None:
        self._needs_redraw = True
        if self.on_invalidate is not None:
            self.on_invalidate()


def create_controller(
    zoom_coefficient: float = ZOOM_COEFFICIENT,
    toggle_duration_ms: float = ANIM_TOGGLE_ZOOM_MS,
    clock: Callable[[], float] = now,
    on_invalidate: Optional[Callable[[], None]] = None,
) -> ZoomTransformController:
    """Create a controller for a newly attached view."""
    controller = ZoomTransformController(
        zoom_coefficient=zoom_coefficient,
        toggle_duration_ms=toggle_duration_ms,
        clock=clock,
        on_invalidate=on_invalidate,
    )
    log(f"[CTRL] Created coefficient={zoom_coefficient} toggle={toggle_duration_ms}ms")
    return controller
