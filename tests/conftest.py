from __future__ import annotations

import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import pytest

# Qt 用例在无显示环境下运行
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from engine.configs.settings import settings
from engine.grid_editor.actions import ActionType
from engine.grid_editor.host import PrimitiveKind, SceneLayer
from engine.grid_editor.view_transform import ViewportRect


class FakePrimitive:
    def __init__(self, kind: PrimitiveKind, attributes: Mapping[str, Any], layer: SceneLayer):
        self.kind = kind
        self.attributes = dict(attributes)
        self.layer = layer
        self.visible = True
        self.removed = False

    def set_attributes(self, attributes: Mapping[str, Any]) -> None:
        self.attributes.update(attributes)

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def remove(self) -> None:
        self.removed = True


class FakeSceneHost:
    """记录型宿主：每格 10 像素，视口位于 (0, 0)"""

    def __init__(self, grid_size: int = 21, cell_px: float = 10.0):
        self.grid_size = grid_size
        self.cell_px = cell_px
        self.rect = ViewportRect(0.0, 0.0, grid_size * cell_px, grid_size * cell_px)
        self.primitives: List[FakePrimitive] = []
        self.transforms: List[Tuple[float, float, float]] = []
        self.cursor_states: set[str] = set()
        self.clock_ms = 0.0

    def create_primitive(self, kind, attributes, layer) -> FakePrimitive:
        primitive = FakePrimitive(kind, attributes, layer)
        self.primitives.append(primitive)
        return primitive

    def bounding_rect(self) -> ViewportRect:
        return self.rect

    def set_view_transform(self, scale: float, x: float, y: float) -> None:
        self.transforms.append((scale, x, y))

    def set_cursor_state(self, state: str, enabled: bool) -> None:
        if enabled:
            self.cursor_states.add(state)
        else:
            self.cursor_states.discard(state)

    def now(self) -> float:
        return self.clock_ms

    def cell_center(self, x: float, y: float) -> Tuple[float, float]:
        """初始视图（scale=1、无平移）下格子中心的屏幕坐标"""
        return (x + 0.5) * self.cell_px, (y + 0.5) * self.cell_px

    def primitives_in(self, layer: SceneLayer) -> List[FakePrimitive]:
        return [p for p in self.primitives if p.layer == layer and not p.removed]


class FakeFrameClock:
    def __init__(self) -> None:
        self._next_token = 0
        self.pending: Dict[int, Callable[[], None]] = {}
        self.cancelled: List[int] = []

    def request_frame(self, callback: Callable[[], None]) -> int:
        self._next_token += 1
        self.pending[self._next_token] = callback
        return self._next_token

    def cancel_frame(self, token: int) -> None:
        self.cancelled.append(token)
        self.pending.pop(token, None)

    def run_frame(self) -> bool:
        """执行当前挂起的帧；没有挂起帧时返回 False"""
        if not self.pending:
            return False
        token = min(self.pending)
        callback = self.pending.pop(token)
        callback()
        return True


class ActionRecorder:
    def __init__(self) -> None:
        self.calls: List[Tuple[ActionType, Any]] = []

    def __call__(self, action_type: ActionType, payload: Any) -> None:
        self.calls.append((action_type, payload))

    def of_type(self, action_type: ActionType) -> List[Any]:
        return [payload for kind, payload in self.calls if kind == action_type]


@pytest.fixture
def host() -> FakeSceneHost:
    return FakeSceneHost()


@pytest.fixture
def frame_clock() -> FakeFrameClock:
    return FakeFrameClock()


@pytest.fixture
def recorder() -> ActionRecorder:
    return ActionRecorder()


@pytest.fixture(autouse=True)
def _restore_settings():
    yield
    settings.reset()
    settings._config_path = None  # noqa: SLF001
