"""宿主协作方协议

引擎本身不依赖任何 GUI 框架，宿主需要提供：
- SceneHost：图元工厂、视口包围盒、组变换与光标样式、时钟；
- FrameClock：与帧同步的回调调度（请求/取消）。
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping, Protocol

from engine.grid_editor.view_transform import ViewportRect


class PrimitiveKind(str, Enum):
    CIRCLE = "circle"
    PATH = "path"


class SceneLayer(int, Enum):
    """图元层级：值越大越靠前"""

    POINTS = 0
    GRID = 1
    HOVER = 2
    PREVIEW = 3
    LINKS = 4


class Primitive(Protocol):
    def set_attributes(self, attributes: Mapping[str, Any]) -> None: ...

    def set_visible(self, visible: bool) -> None: ...

    def remove(self) -> None: ...


class SceneHost(Protocol):
    def create_primitive(
        self,
        kind: PrimitiveKind,
        attributes: Mapping[str, Any],
        layer: SceneLayer,
    ) -> Primitive: ...

    def bounding_rect(self) -> ViewportRect: ...

    def set_view_transform(self, scale: float, x: float, y: float) -> None: ...

    def set_cursor_state(self, state: str, enabled: bool) -> None: ...

    def now(self) -> float:
        """当前时间（毫秒）"""
        ...


class FrameClock(Protocol):
    def request_frame(self, callback: Callable[[], None]) -> Any: ...

    def cancel_frame(self, token: Any) -> None: ...
