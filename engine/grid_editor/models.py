"""网格图数据模型：点、连线与图容器。

点以网格坐标 (x, y) 唯一确定，key = x * grid_size + y。
模型本身不关心渲染，`handle` 字段仅保存宿主创建的图元引用。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from engine.utils.logging.logger import log_info


class GridBoundsError(ValueError):
    """网格坐标越界或类型非法"""

    def __init__(self, x: object, y: object, grid_size: int):
        self.x = x
        self.y = y
        self.grid_size = grid_size
        super().__init__(f"网格坐标 ({x}, {y}) 超出范围 [0, {grid_size - 1}]")


@dataclass(eq=False)
class Point:
    x: int
    y: int
    key: int
    links: List["Link"] = field(default_factory=list)
    handle: Optional[Any] = field(default=None, repr=False)


@dataclass(eq=False)
class Link:
    start: Point
    end: Point
    handle: Optional[Any] = field(default=None, repr=False)


class GraphModel:
    """网格图模型

    - points：key -> Point；同一格子重复添加会覆盖旧记录（旧点上的连线不会迁移）
    - links：按创建顺序保存，允许同一对端点存在多条连线
    """

    def __init__(self, grid_size: int):
        if not isinstance(grid_size, int) or isinstance(grid_size, bool) or grid_size < 1:
            raise ValueError(f"grid_size 必须为正整数，当前为 {grid_size!r}")
        self.grid_size = grid_size
        self.points: Dict[int, Point] = {}
        self.links: List[Link] = []

    def point_key(self, x: int, y: int) -> int:
        return x * self.grid_size + y

    def contains_cell(self, x: object, y: object) -> bool:
        return (
            isinstance(x, int)
            and isinstance(y, int)
            and not isinstance(x, bool)
            and not isinstance(y, bool)
            and 0 <= x < self.grid_size
            and 0 <= y < self.grid_size
        )

    def get_point(self, x: int, y: int) -> Optional[Point]:
        if not self.contains_cell(x, y):
            return None
        return self.points.get(self.point_key(x, y))

    def add_point(self, x: int, y: int) -> Point:
        if not self.contains_cell(x, y):
            raise GridBoundsError(x, y, self.grid_size)
        key = self.point_key(x, y)
        point = Point(x=x, y=y, key=key)
        if key in self.points:
            log_info("[GRID] 覆盖已存在的点 key={}", key)
        self.points[key] = point
        log_info("[GRID] 新增点 ({}, {}) key={}", x, y, key)
        return point

    def add_link(self, start: Point, end: Point) -> Optional[Link]:
        """新增连线；起止为同一个点时忽略并返回 None。"""
        if start is end:
            return None
        link = Link(start=start, end=end)
        self.links.append(link)
        start.links.append(link)
        end.links.append(link)
        log_info("[GRID] 新增连线 {} -> {}", start.key, end.key)
        return link

    def remove_link(self, link: Link) -> bool:
        """移除连线；连线不在模型中时返回 False。"""
        if not any(existing is link for existing in self.links):
            return False
        self.links = [existing for existing in self.links if existing is not link]
        for endpoint in (link.start, link.end):
            endpoint.links = [existing for existing in endpoint.links if existing is not link]
        log_info("[GRID] 移除连线 {} -> {}", link.start.key, link.end.key)
        return True

    def __len__(self) -> int:
        return len(self.points)
