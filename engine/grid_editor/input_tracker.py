"""输入状态跟踪器

记录当前按住的逻辑输入（按键名或合成的点击名 leftclick/rightclick）：
- held：输入名 -> 按下时间戳（毫秒）
- just_pressed：自上一帧结束以来新按下的输入
- released：本帧内被松开、等待在帧末清理的输入

帧末 `end_frame()` 是唯一的清理点，因此“刚松开”的状态恰好可见一帧。
"""

from __future__ import annotations

from typing import Dict, Set

LEFT_CLICK = "leftclick"
RIGHT_CLICK = "rightclick"
MIDDLE_CLICK = "middleclick"


class InputTracker:
    def __init__(self) -> None:
        self._held: Dict[str, float] = {}
        self._just_pressed: Set[str] = set()
        self._released: Set[str] = set()

    def press(self, name: str, timestamp: float) -> None:
        """按住期间重复按下是幂等的（键盘自动重复不会刷新时间戳）。"""
        if name in self._held:
            return
        self._held[name] = float(timestamp)
        self._just_pressed.add(name)

    def release(self, name: str) -> None:
        if name not in self._held:
            return
        self._released.add(name)

    def release_all(self) -> None:
        # 失去焦点后宿主无法保证送达松开事件，全部视为已松开
        self._released.update(self._held)

    def is_held(self, name: str) -> bool:
        return name in self._held

    def is_just_pressed(self, name: str) -> bool:
        return name in self._just_pressed

    def is_released(self, name: str) -> bool:
        return name in self._released

    def held_duration(self, name: str, now: float) -> float:
        pressed_at = self._held.get(name)
        if pressed_at is None:
            return 0.0
        return max(0.0, now - pressed_at)

    def has_held_inputs(self) -> bool:
        return bool(self._held)

    def end_frame(self) -> None:
        for name in self._released:
            self._held.pop(name, None)
        self._released.clear()
        self._just_pressed.clear()
