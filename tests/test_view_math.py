"""Tests for the pure zoom/pan calculations."""

import pytest

from zoomview.errors import InvalidGeometry, DegenerateZoomRange
from zoomview.types import ViewportGeometry, ScaleBounds
from zoomview.view_math import (
    compute_scale_bounds,
    pan_limits,
    clamp_pan,
    anchor_pan,
    zoom_progress,
    compose_render_transform,
    compute_dest_rect,
)

WIDE = ViewportGeometry(300, 300, 600, 300)


def test_width_binding_axis_bounds():
    bounds = compute_scale_bounds(WIDE, 1.2)
    assert bounds.min_scale == pytest.approx(0.5)
    assert bounds.max_scale == pytest.approx(1.2)


def test_height_binding_axis_bounds():
    tall = ViewportGeometry(400, 300, 200, 600)
    bounds = compute_scale_bounds(tall, 1.5)
    assert bounds.min_scale == pytest.approx(300 / 600)
    assert bounds.max_scale == pytest.approx(400 / 200 * 1.5)


@pytest.mark.parametrize("dims", [
    (300, 300, 600, 300),
    (1920, 1080, 4000, 3000),
    (320, 640, 100, 100),
    (1000, 10, 5, 800),
])
def test_bounds_positive_and_ordered(dims):
    bounds = compute_scale_bounds(ViewportGeometry(*dims), 1.2)
    assert bounds.min_scale > 0
    assert bounds.max_scale > 0
    assert bounds.min_scale <= bounds.max_scale


@pytest.mark.parametrize("dims,field_name", [
    ((0, 300, 600, 300), "view_width"),
    ((300, -1, 600, 300), "view_height"),
    ((300, 300, 0, 300), "content_width"),
    ((300, 300, 600, float("nan")), "content_height"),
])
def test_invalid_geometry(dims, field_name):
    with pytest.raises(InvalidGeometry) as exc:
        compute_scale_bounds(ViewportGeometry(*dims), 1.2)
    assert exc.value.field_name == field_name


def test_pan_limits_at_max_scale():
    limit_x, limit_y = pan_limits(1.2, WIDE)
    assert limit_x == pytest.approx(210.0)
    assert limit_y == pytest.approx(30.0)


def test_clamp_pan_keeps_content_inside():
    assert clamp_pan(500.0, -500.0, 1.2, WIDE) == (pytest.approx(210.0), pytest.approx(-30.0))
    assert clamp_pan(-20.0, 10.0, 1.2, WIDE) == (pytest.approx(-20.0), pytest.approx(10.0))


def test_clamp_pan_pins_small_axis_to_zero():
    # At scale 0.5 the content is 300x150: y is smaller than the view
    assert clamp_pan(40.0, 40.0, 0.5, WIDE) == (0.0, 0.0)


def test_clamp_pan_idempotent():
    once = clamp_pan(321.0, -77.0, 1.0, WIDE)
    twice = clamp_pan(once[0], once[1], 1.0, WIDE)
    assert once == twice


def test_anchor_pan_at_center_is_zero():
    bounds = compute_scale_bounds(WIDE, 1.2)
    assert anchor_pan(150, 150, bounds, WIDE) == (0.0, 0.0)


def test_anchor_pan_uses_extreme_ratio():
    bounds = ScaleBounds(0.5, 1.2)
    pan_x, pan_y = anchor_pan(0, 250, bounds, WIDE)
    assert pan_x == pytest.approx(-150 * (1 - 2.4))
    assert pan_y == pytest.approx(100 * (1 - 2.4))


def test_zoom_progress():
    bounds = ScaleBounds(0.5, 1.5)
    assert zoom_progress(0.5, bounds) == 0.0
    assert zoom_progress(1.0, bounds) == pytest.approx(0.5)
    assert zoom_progress(1.5, bounds) == pytest.approx(1.0)


def test_zoom_progress_degenerate_range():
    with pytest.raises(DegenerateZoomRange):
        zoom_progress(1.0, ScaleBounds(1.0, 1.0))


def test_render_transform_pan_grows_with_zoom():
    bounds = ScaleBounds(0.5, 1.5)
    at_min = compose_render_transform(0.5, 100.0, -40.0, bounds, WIDE)
    halfway = compose_render_transform(1.0, 100.0, -40.0, bounds, WIDE)
    at_max = compose_render_transform(1.5, 100.0, -40.0, bounds, WIDE)

    assert (at_min.translate_x, at_min.translate_y) == (0.0, 0.0)
    assert halfway.translate_x == pytest.approx(50.0)
    assert halfway.translate_y == pytest.approx(-20.0)
    assert (at_max.translate_x, at_max.translate_y) == (pytest.approx(100.0), pytest.approx(-40.0))
    assert (at_max.pivot_x, at_max.pivot_y) == (150.0, 150.0)
    assert at_max.scale == 1.5


def test_dest_rect_centered_without_pan():
    t = compose_render_transform(0.5, 0.0, 0.0, ScaleBounds(0.5, 1.2), WIDE)
    assert compute_dest_rect(t, WIDE) == (0.0, pytest.approx(75.0), 300.0, 150.0)


def test_dest_rect_follows_translation():
    t = compose_render_transform(1.2, 60.0, 0.0, ScaleBounds(0.5, 1.2), WIDE)
    x, y, w, h = compute_dest_rect(t, WIDE)
    assert w == pytest.approx(720.0)
    assert h == pytest.approx(360.0)
    assert x == pytest.approx(60.0 + 150.0 - 360.0)
    assert y == pytest.approx(150.0 - 180.0)
