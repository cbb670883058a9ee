"""连线路由（纯几何）

两个网格点之间的连线统一画成“直线 - 45° 斜线 - 直线”的折线：
- 同一行、同一列或恰好位于 45° 对角线上时，直接画一条直线；
- 否则两段直线等长，斜线两轴位移相同，沿跨度较大的轴展开。

路由前总是把 x 较大的端点作为起点（锚点），保证交换起止点后得到完全相同的路径。
返回的 LinkPath 是不可变值对象，Qt 宿主直接使用 vertices() 构造 QPainterPath。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Vector = Tuple[float, float]


@dataclass(frozen=True)
class LinkPath:
    """路由结果：起点 + 若干相对位移段。"""

    start: Vector
    segments: Tuple[Vector, ...]
    # 单段直线时用绝对坐标输出 `M..L..`，折线时逐段输出 h/v/l 相对指令
    is_straight: bool

    @property
    def end(self) -> Vector:
        return self.vertices()[-1]

    def vertices(self) -> Tuple[Vector, ...]:
        x, y = self.start
        points = [(x, y)]
        for dx, dy in self.segments:
            x += dx
            y += dy
            points.append((x, y))
        return tuple(points)

    def segment_lengths(self) -> Tuple[float, ...]:
        """每段沿主轴的长度（斜线段取单轴位移，与网格单位一致）。"""
        return tuple(max(abs(dx), abs(dy)) for dx, dy in self.segments)

    def to_svg(self) -> str:
        sx, sy = self.start
        head = f"M{_fmt(sx)},{_fmt(sy)}"
        if self.is_straight:
            ex, ey = self.end
            return f"{head}L{_fmt(ex)},{_fmt(ey)}"
        parts = [head]
        for dx, dy in self.segments:
            if dx == 0:
                parts.append(f"v{_fmt(dy)}")
            elif dy == 0:
                parts.append(f"h{_fmt(dx)}")
            else:
                parts.append(f"l{_fmt(dx)},{_fmt(dy)}")
        return "".join(parts)


def _fmt(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def route(x1: float, y1: float, x2: float, y2: float) -> LinkPath:
    """计算 (x1, y1) 与 (x2, y2) 之间的连线路径。"""
    # x 相同时取 y 较大者为锚点，竖直线同样与端点顺序无关
    if x1 < x2 or (x1 == x2 and y1 < y2):
        x1, y1, x2, y2 = x2, y2, x1, y1

    w = abs(x1 - x2)
    h = abs(y1 - y2)
    if x1 == x2 or y1 == y2 or w == h:
        return LinkPath(start=(x1, y1), segments=((x2 - x1, y2 - y1),), is_straight=True)

    # 锚点在右侧，路径始终向左走：e 为斜线段单轴位移（负值），t 为直线段长度（负值）
    e = -min(w, h)
    t = (max(w, h) + e) / -2
    if y1 > y2:
        # 终点在左上方
        if h > w:
            segments = ((0, t), (e, e), (0, t))
        else:
            segments = ((t, 0), (e, e), (t, 0))
    else:
        # 终点在左下方
        if h > w:
            segments = ((0, -t), (e, -e), (0, -t))
        else:
            segments = ((t, 0), (e, -e), (t, 0))
    return LinkPath(start=(x1, y1), segments=segments, is_straight=False)
