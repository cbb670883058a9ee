"""视图平移/缩放变换

坐标空间：
- 屏幕坐标：宿主上报的指针像素坐标。
- 视口相对坐标 rel：把视口包围盒映射到 [-0.5, grid_size - 0.5] 的网格单位，
  即 `rel = (screen - origin) / extent * grid_size - 0.5`（偏移半格使像素光标对准格心）。
- 网格坐标 g：`g = (rel - pan) / scale`。

缩放锚点使用 rel 坐标：缩放后按 `pan' = ratio * (pan - anchor) + anchor`
重新求解平移，使锚点下的网格点在屏幕上保持不动。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

ZOOM_PRECISE_IN_FACTOR = 1.2
ZOOM_PRECISE_OUT_FACTOR = 0.8
WHEEL_ZOOM_DIVISOR = 20
# 缩放比例的取值范围，超出时钳制到边界，保证坐标换算始终有限
MIN_SCALE = 2.0 ** -16
MAX_SCALE = 2.0 ** 16


@dataclass(frozen=True)
class ViewportRect:
    """视口包围盒（屏幕坐标）"""

    x: float
    y: float
    width: float
    height: float

    def is_usable(self) -> bool:
        return self.width > 0 and self.height > 0


def next_power_of_two(value: float) -> float:
    return 2.0 ** math.ceil(math.log2(value))


def prev_power_of_two(value: float) -> float:
    return 2.0 ** math.floor(math.log2(value))


class ViewTransform:
    def __init__(self, grid_size: int) -> None:
        self.grid_size = grid_size
        self.scale: float = 1.0
        # 上一次渲染时的缩放；scale 与之不同表示还有未结算的缩放
        self.rendered_scale: float = 1.0
        self.pan_x: float = 0.0
        self.pan_y: float = 0.0
        center = grid_size / 2 - 0.5
        self.anchor_x: float = center
        self.anchor_y: float = center
        self.bounds = ViewportRect(0.0, 0.0, float(grid_size), float(grid_size))

    # ---------- 视口 ----------
    def set_bounds(self, bounds: ViewportRect) -> None:
        if not bounds.is_usable():
            # 尚未布局完成的宿主会报告 0 尺寸，保留上一次的有效值
            return
        self.bounds = bounds

    # ---------- 缩放 ----------
    def set_scale(self, scale: float) -> None:
        if not scale > 0:
            raise ValueError(f"缩放比例必须为正数，当前为 {scale!r}")
        self.scale = min(max(float(scale), MIN_SCALE), MAX_SCALE)

    def zoom_by(self, factor: float) -> None:
        """按倍数缩放，锚点为当前 anchor（指针最近所在位置）"""
        if not factor > 0:
            raise ValueError(f"缩放倍数必须为正数，当前为 {factor!r}")
        self.set_scale(self.scale * factor)

    def zoom_at(self, factor: float, anchor_x: float, anchor_y: float) -> Tuple[float, float, float]:
        self.anchor_x = float(anchor_x)
        self.anchor_y = float(anchor_y)
        self.zoom_by(factor)
        return self.render_matrix()

    def zoom_in_coarse(self) -> None:
        self.set_scale(prev_power_of_two(self.scale * 2))

    def zoom_out_coarse(self) -> None:
        self.set_scale(next_power_of_two(self.scale / 2))

    def zoom_in_precise(self) -> None:
        self.zoom_by(ZOOM_PRECISE_IN_FACTOR)

    def zoom_out_precise(self) -> None:
        self.zoom_by(ZOOM_PRECISE_OUT_FACTOR)

    def zoom_wheel(self, delta: float) -> None:
        if delta == 0:
            return
        self.zoom_by(1 + math.copysign(1.0, delta) / WHEEL_ZOOM_DIVISOR)

    # ---------- 平移 ----------
    def drag_offset(self, delta_x: float, delta_y: float) -> Tuple[float, float]:
        """屏幕拖拽向量换算为网格单位的平移量（不提交）"""
        return (
            delta_x / self.bounds.width * self.grid_size,
            delta_y / self.bounds.height * self.grid_size,
        )

    def apply_drag(self, delta_x: float, delta_y: float) -> None:
        offset_x, offset_y = self.drag_offset(delta_x, delta_y)
        self.pan_x += offset_x
        self.pan_y += offset_y

    def render_matrix(self, drag_dx: float = 0.0, drag_dy: float = 0.0) -> Tuple[float, float, float]:
        """结算未生效的缩放并返回 (scale, x, y) 变换矩阵

        拖拽进行中时 drag_dx/drag_dy 为屏幕上的累计位移，只参与本次输出，不写回 pan。
        """
        ratio = self.scale / self.rendered_scale
        mod_x, mod_y = self.drag_offset(drag_dx, drag_dy) if (drag_dx or drag_dy) else (0.0, 0.0)
        x = ratio * ((mod_x + self.pan_x) - self.anchor_x) + self.anchor_x
        y = ratio * ((mod_y + self.pan_y) - self.anchor_y) + self.anchor_y

        self.rendered_scale = self.scale
        self.pan_x = ratio * (self.pan_x - self.anchor_x) + self.anchor_x
        self.pan_y = ratio * (self.pan_y - self.anchor_y) + self.anchor_y
        return self.scale, x, y

    # ---------- 坐标换算 ----------
    def screen_to_relative(self, screen_x: float, screen_y: float) -> Tuple[float, float]:
        rel_x = (screen_x - self.bounds.x) / self.bounds.width * self.grid_size - 0.5
        rel_y = (screen_y - self.bounds.y) / self.bounds.height * self.grid_size - 0.5
        return rel_x, rel_y

    def update_anchor(self, screen_x: float, screen_y: float) -> Tuple[float, float]:
        """记录指针位置作为新的缩放锚点，并返回对应的网格坐标"""
        self.anchor_x, self.anchor_y = self.screen_to_relative(screen_x, screen_y)
        return self.relative_to_grid(self.anchor_x, self.anchor_y)

    def relative_to_grid(self, rel_x: float, rel_y: float) -> Tuple[float, float]:
        return (rel_x - self.pan_x) / self.scale, (rel_y - self.pan_y) / self.scale

    def screen_to_grid(self, screen_x: float, screen_y: float) -> Tuple[float, float]:
        return self.relative_to_grid(*self.screen_to_relative(screen_x, screen_y))

    def grid_to_screen(self, grid_x: float, grid_y: float) -> Tuple[float, float]:
        rel_x = grid_x * self.scale + self.pan_x
        rel_y = grid_y * self.scale + self.pan_y
        return (
            (rel_x + 0.5) / self.grid_size * self.bounds.width + self.bounds.x,
            (rel_y + 0.5) / self.grid_size * self.bounds.height + self.bounds.y,
        )
