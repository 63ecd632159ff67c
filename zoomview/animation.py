"""Animation system - non-blocking tweens driven by the main loop."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, List, Callable, Dict
from enum import Enum, auto

from .math_utils import lerp, ease_in_out_sine
from .logging import now, log


class AnimationType(Enum):
    """Types of animations. At most one animation per type runs at a time."""
    TOGGLE_ZOOM = auto()  # Double-tap / F key zoom toggle


@dataclass
class Animation(ABC):
    """Base class for all animations."""
    start_time: float = field(default_factory=now)
    duration_ms: float = 0.0

    def progress_at(self, t: float) -> float:
        """Animation progress (0.0 to 1.0) at time ``t``."""
        if self.duration_ms <= 0:
            return 1.0
        elapsed = (t - self.start_time) * 1000.0
        return max(0.0, min(1.0, elapsed / self.duration_ms))

    def is_complete_at(self, t: float) -> bool:
        return self.progress_at(t) >= 1.0

    @abstractmethod
    def get_type(self) -> AnimationType:
        """Get the type of this animation."""
        pass

    def step(self, t: float) -> None:
        """Advance to time ``t``. Called once per frame by the controller."""
        pass


@dataclass
class ScaleTween(Animation):
    """Interpolates a scale value and hands each frame's value to a callback."""
    from_scale: float = 1.0
    to_scale: float = 1.0
    easing: Callable[[float], float] = ease_in_out_sine
    on_frame: Optional[Callable[[float], None]] = None

    def get_type(self) -> AnimationType:
        return AnimationType.TOGGLE_ZOOM

    def value_at(self, t: float) -> float:
        """Interpolated scale at time ``t``."""
        return lerp(self.from_scale, self.to_scale, self.easing(self.progress_at(t)))

    def step(self, t: float) -> None:
        if self.on_frame is not None:
            self.on_frame(self.value_at(t))


class AnimationController:
    """Manages all active animations."""

    def __init__(self, clock: Callable[[], float] = now):
        self._clock = clock
        self._animations: List[Animation] = []
        self._on_complete_callbacks: Dict[AnimationType, Callable] = {}

    @property
    def has_animations(self) -> bool:
        """Check if any animations are running."""
        return len(self._animations) > 0

    def get_animation(self, anim_type: AnimationType) -> Optional[Animation]:
        """Get currently running animation of specified type."""
        for anim in self._animations:
            if anim.get_type() == anim_type:
                return anim
        return None

    def is_running(self, anim_type: AnimationType) -> bool:
        return self.get_animation(anim_type) is not None

    def start(self, animation: Animation, on_complete: Optional[Callable] = None) -> None:
        """Start a new animation, replacing any existing of same type."""
        anim_type = animation.get_type()

        self._animations = [a for a in self._animations if a.get_type() != anim_type]
        self._on_complete_callbacks.pop(anim_type, None)
        self._animations.append(animation)

        if on_complete:
            self._on_complete_callbacks[anim_type] = on_complete

        log(f"[ANIM] Started {anim_type.name} duration={animation.duration_ms}ms")

    def cancel(self, anim_type: AnimationType) -> bool:
        """Cancel animation of specified type. Returns True if one was running."""
        before = len(self._animations)
        self._animations = [a for a in self._animations if a.get_type() != anim_type]
        self._on_complete_callbacks.pop(anim_type, None)
        cancelled = len(self._animations) != before
        if cancelled:
            log(f"[ANIM] Cancelled {anim_type.name}")
        return cancelled

    def cancel_all(self) -> None:
        """Cancel all running animations."""
        self._animations.clear()
        self._on_complete_callbacks.clear()

    def update(self, at: Optional[float] = None) -> List[Animation]:
        """Step all animations and return the ones that completed.

        Completed animations get a final step at their end value before
        removal.
        """
        t = self._clock() if at is None else at
        completed = []
        still_running = []

        for anim in self._animations:
            anim.step(t)
            if anim.is_complete_at(t):
                completed.append(anim)
                anim_type = anim.get_type()
                callback = self._on_complete_callbacks.pop(anim_type, None)
                if callback:
                    try:
                        callback(anim)
                    except Exception as e:
                        log(f"[ANIM][ERR] Callback failed for {anim_type.name}: {e!r}")
                log(f"[ANIM] Completed {anim_type.name}")
            else:
                still_running.append(anim)

        self._animations = still_running
        return completed


def create_scale_tween(
    duration_ms: float,
    from_scale: float,
    to_scale: float,
    on_frame: Callable[[float], None],
    start_time: Optional[float] = None,
) -> ScaleTween:
    """Create a zoom toggle tween."""
    tween = ScaleTween(
        duration_ms=duration_ms,
        from_scale=from_scale,
        to_scale=to_scale,
        on_frame=on_frame,
    )
    if start_time is not None:
        tween.start_time = start_time
    return tween
