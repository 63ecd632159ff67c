"""Tests for tweens and the animation controller."""

import pytest

from zoomview.animation import AnimationController, AnimationType, ScaleTween, create_scale_tween
from zoomview.math_utils import ease_in_out_sine, clamp, lerp


def test_easing_endpoints():
    assert ease_in_out_sine(0.0) == 0.0
    assert ease_in_out_sine(1.0) == 1.0
    assert ease_in_out_sine(0.5) == pytest.approx(0.5)
    assert ease_in_out_sine(0.25) < 0.25


def test_clamp_and_lerp():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert lerp(2.0, 4.0, 2.0) == 4.0


def test_tween_values_over_time():
    frames = []
    tween = create_scale_tween(200, 1.0, 3.0, frames.append, start_time=10.0)
    assert tween.value_at(10.0) == pytest.approx(1.0)
    assert tween.value_at(10.1) == pytest.approx(2.0)
    assert tween.value_at(10.5) == pytest.approx(3.0)
    assert tween.progress_at(9.0) == 0.0


def test_controller_steps_and_completes():
    frames = []
    anims = AnimationController(clock=lambda: 0.0)
    done = []
    anims.start(create_scale_tween(100, 0.0, 1.0, frames.append, start_time=0.0),
                on_complete=done.append)

    assert anims.update(at=0.05) == []
    assert anims.is_running(AnimationType.TOGGLE_ZOOM)

    completed = anims.update(at=0.2)
    assert len(completed) == 1
    assert frames[-1] == pytest.approx(1.0)
    assert done == completed
    assert not anims.has_animations


def test_start_replaces_same_type():
    first, second = [], []
    anims = AnimationController(clock=lambda: 0.0)
    anims.start(create_scale_tween(100, 0.0, 1.0, first.append, start_time=0.0))
    anims.start(create_scale_tween(100, 5.0, 6.0, second.append, start_time=0.0))

    anims.update(at=0.05)
    assert first == []
    assert len(second) == 1


def test_cancel():
    anims = AnimationController(clock=lambda: 0.0)
    anims.start(ScaleTween(start_time=0.0, duration_ms=100))
    assert anims.cancel(AnimationType.TOGGLE_ZOOM) is True
    assert anims.cancel(AnimationType.TOGGLE_ZOOM) is False
    assert not anims.has_animations


def test_zero_duration_completes_immediately():
    frames = []
    anims = AnimationController(clock=lambda: 0.0)
    anims.start(create_scale_tween(0, 1.0, 2.0, frames.append, start_time=0.0))
    assert len(anims.update()) == 1
    assert frames == [2.0]


def test_completion_follows_the_given_time():
    tween = ScaleTween(start_time=1.0, duration_ms=200)
    assert not tween.is_complete_at(1.1)
    assert tween.is_complete_at(1.25)
    assert tween.is_complete_at(5.0)
