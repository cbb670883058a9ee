"""State container for 网格编辑交互."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from engine.grid_editor.models import Point


class EditorMode(Enum):
    IDLE = "idle"
    POINT_SELECTED = "point_selected"
    DRAGGING = "dragging"
    GRAB_PANNING = "grab_panning"


@dataclass
class SelectionState:
    selected_point: Optional[Point] = None
    hover_point: Optional[Point] = None
    drag_origin: Optional[Tuple[float, float]] = None


@dataclass
class InteractionSession:
    """集中维护一次编辑会话的运行状态（指针、悬停格、选择、模式）。

    宿主回调只写入指针坐标与滚轮增量；其余字段只在帧回调中修改。
    """

    mode: EditorMode = EditorMode.IDLE
    selection: SelectionState = field(default_factory=SelectionState)
    pointer_x: float = -1.0
    pointer_y: float = -1.0
    # 指针所在的网格坐标（小数）与就近取整的格子
    hover_x: float = -1.0
    hover_y: float = -1.0
    near_x: int = -1
    near_y: int = -1
    pending_wheel: List[float] = field(default_factory=list)

    def set_pointer(self, x: float, y: float) -> None:
        self.pointer_x = float(x)
        self.pointer_y = float(y)

    def drag_delta(self) -> Tuple[float, float]:
        origin = self.selection.drag_origin
        if origin is None:
            return 0.0, 0.0
        return self.pointer_x - origin[0], self.pointer_y - origin[1]

    @property
    def is_dragging(self) -> bool:
        return self.selection.drag_origin is not None

    def settle_mode(self) -> None:
        """拖拽结束或选择变化后，根据选择状态回落到 IDLE / POINT_SELECTED"""
        if self.is_dragging:
            return
        self.mode = EditorMode.POINT_SELECTED if self.selection.selected_point else EditorMode.IDLE

    def take_wheel_deltas(self) -> List[float]:
        deltas = self.pending_wheel
        self.pending_wheel = []
        return deltas
