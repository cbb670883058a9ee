"""交互状态机

每帧按固定顺序（FRAME_STEPS）读取输入状态，推进视图变换与图模型：

    blur → resize/init → zoom → grab_style → unselect →
    primary_down → primary_up → secondary_down → pointer_move

模式（EditorMode）：
- IDLE：无选择、无拖拽
- POINT_SELECTED：已选中一个点，等待点击另一个点完成连线
- DRAGGING：在空白处按下主键平移画布
- GRAB_PANNING：按住抓取键时按下主键平移画布
拖拽期间已选中的点会保留，拖拽结束后回落到 POINT_SELECTED。
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from engine.configs.settings import settings
from engine.grid_editor.actions import (
    ActionDispatcher,
    AddLinkAction,
    AddPointAction,
    RemoveLinkAction,
)
from engine.grid_editor.config import KeyBindings
from engine.grid_editor.input_tracker import LEFT_CLICK, RIGHT_CLICK, InputTracker
from engine.grid_editor.models import GraphModel, Link, Point
from engine.grid_editor.scene_renderer import SceneRenderer
from engine.grid_editor.session import EditorMode, InteractionSession
from engine.grid_editor.view_transform import ViewTransform
from engine.utils.logging.logger import log_info

# 按住主键超过该时长（毫秒）后松开，视为“按下-拖动-松开”式连线
HOLD_TO_LINK_THRESHOLD_MS = 300
# 小数部分落在 [0.3, 0.7] 区间时视为位于两格之间，不产生悬停
NEAR_LOWER = 0.3
NEAR_UPPER = 0.7

FRAME_STEPS = (
    "blur",
    "resize",
    "zoom",
    "grab_style",
    "unselect",
    "primary_down",
    "primary_up",
    "secondary_down",
    "pointer_move",
)

CURSOR_GRAB = "grab"
CURSOR_GRABBING = "grabbing"


def is_near(value: float) -> bool:
    """坐标是否足够靠近某个整数格（外侧 30% 区间）"""
    fraction = round(abs(value - math.trunc(value)), 9)
    return fraction < NEAR_LOWER or fraction > NEAR_UPPER


def snap(value: float) -> int:
    # 四舍五入（.5 向上），与浏览器 Math.round 一致
    return int(math.floor(value + 0.5))


class InteractionStateMachine:
    def __init__(
        self,
        *,
        model: GraphModel,
        view: ViewTransform,
        tracker: InputTracker,
        session: InteractionSession,
        renderer: SceneRenderer,
        dispatcher: ActionDispatcher,
        keys: KeyBindings,
        handle_event: Callable[[str], bool],
        set_cursor_state: Callable[[str, bool], None],
        bounding_rect_provider: Callable,
    ) -> None:
        self.model = model
        self.view = view
        self.tracker = tracker
        self.session = session
        self.renderer = renderer
        self.dispatcher = dispatcher
        self.keys = keys
        self._handle = handle_event
        self._set_cursor_state = set_cursor_state
        self._bounding_rect_provider = bounding_rect_provider
        self._now: float = 0.0

    @property
    def mode(self) -> EditorMode:
        return self.session.mode

    def run_frame(self, now: float) -> None:
        self._now = now
        for step in FRAME_STEPS:
            getattr(self, f"_step_{step}")()
        self.tracker.end_frame()
        if settings.INTERACTION_VERBOSE:
            log_info(
                "[FRAME] mode={} near=({}, {}) scale={:.3f}",
                self.session.mode.value,
                self.session.near_x,
                self.session.near_y,
                self.view.scale,
            )

    # ---------- 图模型变更（唯一入口） ----------
    def add_point(self, x: int, y: int) -> Point:
        point = self.model.add_point(x, y)
        self.renderer.create_point(point)
        self.dispatcher.dispatch(AddPointAction(point))
        return point

    def add_link(self, start: Point, end: Point) -> Optional[Link]:
        link = self.model.add_link(start, end)
        if link is None:
            return None
        self.renderer.create_link(link)
        self.dispatcher.dispatch(AddLinkAction(start, end))
        return link

    def delete_link(self, link: Link) -> bool:
        if not self.model.remove_link(link):
            return False
        self.renderer.remove_link(link)
        self.dispatcher.dispatch(RemoveLinkAction(link))
        return True

    # ---------- 渲染辅助 ----------
    def _apply_pan_and_scale(self) -> None:
        self.renderer.apply_transform(*self.view.render_matrix(*self.session.drag_delta()))

    def _clear_selection(self) -> None:
        self.session.selection.selected_point = None
        self.session.settle_mode()

    def _begin_drag(self) -> None:
        grabbing = self.tracker.is_held(self.keys.grab)
        self.session.selection.drag_origin = (self.session.pointer_x, self.session.pointer_y)
        self.session.mode = EditorMode.GRAB_PANNING if grabbing else EditorMode.DRAGGING
        self._set_cursor_state(CURSOR_GRABBING, True)

    # ---------- 帧步骤 ----------
    def _step_blur(self) -> None:
        if self._handle("blur"):
            self.tracker.release_all()

    def _step_resize(self) -> None:
        resized = self._handle("resize")
        initialized = self._handle("init")
        if resized or initialized:
            self.view.set_bounds(self._bounding_rect_provider())
            self._apply_pan_and_scale()
            self.renderer.draw_selection(self.session)

    def _step_zoom(self) -> None:
        zoom_steps = (
            (self.keys.zoom_in, self.view.zoom_in_coarse),
            (self.keys.zoom_in_precise, self.view.zoom_in_precise),
            (self.keys.zoom_out, self.view.zoom_out_coarse),
            (self.keys.zoom_out_precise, self.view.zoom_out_precise),
        )
        for key_name, zoom in zoom_steps:
            if self.tracker.is_just_pressed(key_name):
                zoom()
                self._apply_pan_and_scale()

        if self._handle("wheel"):
            deltas = self.session.take_wheel_deltas()
            for delta in deltas:
                self.view.zoom_wheel(delta)
            if deltas:
                self._apply_pan_and_scale()

    def _step_grab_style(self) -> None:
        if self.tracker.is_just_pressed(self.keys.grab):
            self._set_cursor_state(CURSOR_GRAB, True)
        if self.tracker.is_released(self.keys.grab):
            self._set_cursor_state(CURSOR_GRAB, False)

    def _step_unselect(self) -> None:
        if self.tracker.is_just_pressed(self.keys.unselect):
            self._clear_selection()
            self.renderer.draw_selection(self.session)

    def _step_primary_down(self) -> None:
        if not self.tracker.is_just_pressed(LEFT_CLICK):
            return
        selection = self.session.selection
        if self.tracker.is_held(self.keys.grab) or selection.hover_point is None:
            self._begin_drag()
        elif selection.selected_point is not None:
            self.add_link(selection.selected_point, selection.hover_point)
            self._clear_selection()
        else:
            selection.selected_point = selection.hover_point
            self.session.settle_mode()

    def _step_primary_up(self) -> None:
        if not self.tracker.is_released(LEFT_CLICK):
            return
        selection = self.session.selection
        if self.session.is_dragging:
            self.view.apply_drag(*self.session.drag_delta())
            selection.drag_origin = None
            self._set_cursor_state(CURSOR_GRABBING, False)
            self.session.settle_mode()
            self._apply_pan_and_scale()
        elif selection.selected_point is not None:
            if self.tracker.held_duration(LEFT_CLICK, self._now) > HOLD_TO_LINK_THRESHOLD_MS:
                if selection.hover_point is not None:
                    self.add_link(selection.selected_point, selection.hover_point)
                self._clear_selection()

    def _step_secondary_down(self) -> None:
        if not self.tracker.is_just_pressed(RIGHT_CLICK):
            return
        if self.session.selection.selected_point is not None:
            self._clear_selection()
            return
        if self.session.selection.hover_point is not None:
            return
        x, y = self.session.near_x, self.session.near_y
        if not self.model.contains_cell(x, y):
            log_info("[GRID] 右键位置 ({}, {}) 不在网格内，忽略", x, y)
            return
        if self.model.get_point(x, y) is not None:
            return
        self.add_point(x, y)

    def _step_pointer_move(self) -> None:
        if not self._handle("mousemove"):
            return
        session = self.session
        if session.is_dragging:
            self._apply_pan_and_scale()
            return
        session.hover_x, session.hover_y = self.view.update_anchor(session.pointer_x, session.pointer_y)
        session.near_x = snap(session.hover_x)
        session.near_y = snap(session.hover_y)
        if is_near(session.hover_x) and is_near(session.hover_y):
            session.selection.hover_point = self.model.get_point(session.near_x, session.near_y)
        else:
            session.selection.hover_point = None
        self.renderer.draw_selection(session)
