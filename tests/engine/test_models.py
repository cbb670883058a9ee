from __future__ import annotations

import pytest

from engine.grid_editor.models import GraphModel, GridBoundsError


def test_point_key_is_derived_from_coordinates() -> None:
    model = GraphModel(21)
    point = model.add_point(5, 5)
    assert point.key == 110
    assert model.point_key(5, 5) == 110
    assert model.get_point(5, 5) is point


def test_adding_point_on_occupied_cell_overwrites_record() -> None:
    model = GraphModel(21)
    first = model.add_point(2, 3)
    other = model.add_point(4, 4)
    link = model.add_link(first, other)

    second = model.add_point(2, 3)

    assert len(model) == 2
    assert model.get_point(2, 3) is second
    assert second is not first
    assert second.links == []
    # 旧点对象上的连线不会迁移，模型中的连线仍指向旧点
    assert model.links == [link]
    assert link.start is first


def test_self_link_is_ignored() -> None:
    model = GraphModel(21)
    point = model.add_point(1, 1)
    assert model.add_link(point, point) is None
    assert model.links == []
    assert point.links == []


def test_duplicate_links_are_kept() -> None:
    model = GraphModel(21)
    a = model.add_point(0, 0)
    b = model.add_point(3, 1)
    first = model.add_link(a, b)
    second = model.add_link(a, b)

    assert first is not second
    assert model.links == [first, second]
    assert a.links == [first, second]
    assert b.links == [first, second]


def test_remove_link_detaches_from_endpoints() -> None:
    model = GraphModel(21)
    a = model.add_point(0, 0)
    b = model.add_point(3, 1)
    first = model.add_link(a, b)
    second = model.add_link(b, a)

    assert model.remove_link(first)
    assert model.links == [second]
    assert a.links == [second]
    assert b.links == [second]
    assert not model.remove_link(first)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, 21), (21, 21), (1.5, 2), (True, 0), ("1", 1)])
def test_out_of_range_points_are_rejected(x, y) -> None:
    model = GraphModel(21)
    with pytest.raises(GridBoundsError):
        model.add_point(x, y)
    assert model.get_point(x, y) is None


@pytest.mark.parametrize("size", [0, -3, 2.5, None])
def test_invalid_grid_size_is_rejected(size) -> None:
    with pytest.raises(ValueError):
        GraphModel(size)
