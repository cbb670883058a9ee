"""网格连线编辑器的交互引擎（与 GUI 框架无关）"""

from .actions import (
    ActionDispatcher,
    ActionType,
    AddLinkAction,
    AddPointAction,
    EditorAction,
    LinkEndpoints,
    RemoveLinkAction,
)
from .config import GridEditorConfig, KeyBindings
from .editor import GridEditor
from .host import FrameClock, Primitive, PrimitiveKind, SceneHost, SceneLayer
from .input_tracker import LEFT_CLICK, MIDDLE_CLICK, RIGHT_CLICK, InputTracker
from .link_router import LinkPath, route
from .models import GraphModel, GridBoundsError, Link, Point
from .scheduler import UpdateScheduler
from .session import EditorMode, InteractionSession, SelectionState
from .state_machine import FRAME_STEPS, InteractionStateMachine, is_near, snap
from .view_transform import ViewportRect, ViewTransform

__all__ = [
    "ActionDispatcher",
    "ActionType",
    "AddLinkAction",
    "AddPointAction",
    "EditorAction",
    "LinkEndpoints",
    "RemoveLinkAction",
    "GridEditorConfig",
    "KeyBindings",
    "GridEditor",
    "FrameClock",
    "Primitive",
    "PrimitiveKind",
    "SceneHost",
    "SceneLayer",
    "LEFT_CLICK",
    "MIDDLE_CLICK",
    "RIGHT_CLICK",
    "InputTracker",
    "LinkPath",
    "route",
    "GraphModel",
    "GridBoundsError",
    "Link",
    "Point",
    "UpdateScheduler",
    "EditorMode",
    "InteractionSession",
    "SelectionState",
    "FRAME_STEPS",
    "InteractionStateMachine",
    "is_near",
    "snap",
    "ViewportRect",
    "ViewTransform",
]
