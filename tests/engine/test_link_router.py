from __future__ import annotations

import itertools

import pytest

from engine.grid_editor.link_router import route


def test_route_is_identical_for_both_endpoint_orders() -> None:
    coords = range(0, 7)
    for x1, y1, x2, y2 in itertools.product(coords, coords, [0, 3, 6], [1, 4]):
        assert route(x1, y1, x2, y2) == route(x2, y2, x1, y1)


def test_route_vertical_line_is_single_segment() -> None:
    path = route(2, 3, 2, 9)
    assert path.is_straight
    assert len(path.segments) == 1
    assert {path.start, path.end} == {(2, 3), (2, 9)}


def test_route_diagonal_line_is_single_segment() -> None:
    path = route(2, 2, 5, 5)
    assert path.is_straight
    assert path.start == (5, 5)
    assert path.end == (2, 2)
    assert path.to_svg() == "M5,5L2,2"


def test_route_equal_deltas_is_straight_not_three_segment() -> None:
    path = route(0, 0, 5, 5)
    assert path.is_straight
    assert len(path.segments) == 1


def test_route_general_case_has_equal_straight_legs() -> None:
    path = route(0, 0, 5, 2)
    assert not path.is_straight
    assert len(path.segments) == 3
    first, diagonal, last = path.segment_lengths()
    assert first == pytest.approx(1.5)
    assert last == pytest.approx(1.5)
    assert diagonal == pytest.approx(2)
    # 横向跨度更大：水平 - 斜线 - 水平
    assert path.segments[0][1] == 0
    assert path.segments[2][1] == 0
    assert path.to_svg() == "M5,2h-1.5l-2,-2h-1.5"


def test_route_taller_than_wide_goes_vertical_first() -> None:
    path = route(0, 0, 2, 6)
    assert path.start == (2, 6)
    assert [dx for dx, _ in (path.segments[0], path.segments[2])] == [0, 0]
    assert path.segment_lengths() == (2.0, 2, 2.0)
    assert path.to_svg() == "M2,6v-2l-2,-2v-2"


def test_route_ends_exactly_on_other_endpoint() -> None:
    for x1, y1, x2, y2 in [(0, 0, 5, 2), (1, 7, 4, 0), (3, 1, 0, 9), (9, 9, 2, 4)]:
        path = route(x1, y1, x2, y2)
        assert {path.start, path.end} == {(x1, y1), (x2, y2)}


def test_route_downward_mirrors_upward() -> None:
    up = route(0, 0, 5, 2)
    down = route(0, 2, 5, 0)
    assert [(dx, -dy) for dx, dy in up.segments] == list(down.segments)
