"""对外通知：三种动作类型及其载荷"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Optional, Union

from engine.grid_editor.models import Link, Point
from engine.utils.logging.logger import log_info


class ActionType(str, Enum):
    ADD_POINT = "ADD_POINT"
    ADD_LINK = "ADD_LINK"
    REMOVE_LINK = "REMOVE_LINK"


@dataclass(frozen=True)
class LinkEndpoints:
    """ADD_LINK 的载荷，只包含两个端点"""

    start: Point
    end: Point


@dataclass(frozen=True)
class AddPointAction:
    type: ClassVar[ActionType] = ActionType.ADD_POINT
    point: Point

    @property
    def payload(self) -> Point:
        return self.point


@dataclass(frozen=True)
class AddLinkAction:
    type: ClassVar[ActionType] = ActionType.ADD_LINK
    start: Point
    end: Point

    @property
    def payload(self) -> LinkEndpoints:
        return LinkEndpoints(start=self.start, end=self.end)


@dataclass(frozen=True)
class RemoveLinkAction:
    type: ClassVar[ActionType] = ActionType.REMOVE_LINK
    link: Link

    @property
    def payload(self) -> Link:
        return self.link


EditorAction = Union[AddPointAction, AddLinkAction, RemoveLinkAction]
ActionListener = Callable[[ActionType, object], None]


class ActionDispatcher:
    """把动作转发给外部 listener（未提供 listener 时仅记录日志）"""

    def __init__(self, listener: Optional[ActionListener] = None) -> None:
        self._listener = listener

    def dispatch(self, action: EditorAction) -> None:
        log_info("[GRID] dispatch {}", action.type.value)
        if self._listener is not None:
            self._listener(action.type, action.payload)
