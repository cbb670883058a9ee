from __future__ import annotations

import math

import pytest

from engine.grid_editor.view_transform import (
    MAX_SCALE,
    MIN_SCALE,
    ViewportRect,
    ViewTransform,
    next_power_of_two,
    prev_power_of_two,
)


def _make_view(size: int = 21) -> ViewTransform:
    view = ViewTransform(size)
    view.set_bounds(ViewportRect(0.0, 0.0, size * 10.0, size * 10.0))
    return view


def test_screen_to_grid_aligns_cell_centers() -> None:
    view = _make_view()
    assert view.screen_to_grid(55.0, 55.0) == pytest.approx((5.0, 5.0))
    assert view.screen_to_grid(5.0, 205.0) == pytest.approx((0.0, 20.0))


def test_grid_to_screen_inverts_screen_to_grid() -> None:
    view = _make_view()
    view.pan_x, view.pan_y = 1.5, -2.0
    view.set_scale(1.7)
    view.rendered_scale = 1.7
    gx, gy = view.screen_to_grid(73.0, 121.0)
    assert view.grid_to_screen(gx, gy) == pytest.approx((73.0, 121.0))


@pytest.mark.parametrize("screen", [(80.0, 120.0), (5.0, 5.0), (200.0, 33.0)])
def test_zoom_at_keeps_anchor_point_fixed(screen) -> None:
    view = _make_view()
    view.apply_drag(30.0, -12.0)
    grid_point = view.update_anchor(*screen)

    view.zoom_at(2, view.anchor_x, view.anchor_y)

    assert view.scale == 2
    assert view.grid_to_screen(*grid_point) == pytest.approx(screen)


def test_coarse_zoom_rounds_to_powers_of_two() -> None:
    view = _make_view()
    view.zoom_in_coarse()
    assert view.scale == 2
    view.zoom_in_precise()
    assert view.scale == pytest.approx(2.4)
    view.zoom_in_coarse()
    assert view.scale == 4
    view.zoom_out_coarse()
    assert view.scale == 2
    view.zoom_out_precise()
    assert view.scale == pytest.approx(1.6)
    view.zoom_out_coarse()
    assert view.scale == 1


def test_wheel_zoom_changes_scale_by_one_twentieth() -> None:
    view = _make_view()
    view.zoom_wheel(120)
    assert view.scale == pytest.approx(1.05)
    view.zoom_wheel(-3)
    assert view.scale == pytest.approx(1.05 * 0.95)
    view.zoom_wheel(0)
    assert view.scale == pytest.approx(1.05 * 0.95)


def test_scale_never_becomes_non_positive() -> None:
    view = _make_view()
    with pytest.raises(ValueError):
        view.zoom_by(0)
    with pytest.raises(ValueError):
        view.zoom_at(-1.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        view.set_scale(0.0)
    for _ in range(200):
        view.zoom_out_precise()
    assert view.scale > 0


def test_apply_drag_converts_pixels_to_grid_units() -> None:
    view = _make_view()
    view.apply_drag(10.0, -20.0)
    assert (view.pan_x, view.pan_y) == pytest.approx((1.0, -2.0))


def test_render_matrix_includes_live_drag_without_committing() -> None:
    view = _make_view()
    scale, x, y = view.render_matrix(20.0, 0.0)
    assert (scale, x, y) == pytest.approx((1.0, 2.0, 0.0))
    assert (view.pan_x, view.pan_y) == (0.0, 0.0)


def test_unusable_bounds_are_ignored() -> None:
    view = _make_view()
    view.set_bounds(ViewportRect(0.0, 0.0, 0.0, 0.0))
    assert view.bounds.width == 210.0


def test_power_of_two_helpers() -> None:
    assert next_power_of_two(3) == 4
    assert next_power_of_two(4) == 4
    assert prev_power_of_two(3) == 2
    assert prev_power_of_two(0.75) == 0.5


def test_scale_is_clamped_to_finite_range() -> None:
    view = _make_view()
    for _ in range(100):
        view.zoom_out_coarse()
    assert view.scale == MIN_SCALE
    for _ in range(5000):
        view.zoom_wheel(-1)
    assert view.scale == MIN_SCALE

    for _ in range(100):
        view.zoom_in_coarse()
    assert view.scale == MAX_SCALE
    view.zoom_by(1e300)
    view.set_scale(float("inf"))
    assert view.scale == MAX_SCALE

    scale, x, y = view.render_matrix()
    assert scale == MAX_SCALE
    assert all(math.isfinite(value) for value in (x, y, view.pan_x, view.pan_y))
