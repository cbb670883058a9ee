"""网格编辑器装配入口

`GridEditor` 把各组件连接起来，并作为宿主事件的接收方：
宿主回调只记录意图（输入状态、指针坐标、待处理事件），
真正的状态变更全部发生在调度器触发的帧回调中。
"""

from __future__ import annotations

from typing import Optional

from engine.grid_editor.actions import ActionDispatcher
from engine.grid_editor.config import GridEditorConfig
from engine.grid_editor.host import FrameClock, SceneHost
from engine.grid_editor.input_tracker import InputTracker
from engine.grid_editor.models import GraphModel, Link
from engine.grid_editor.scene_renderer import SceneRenderer
from engine.grid_editor.scheduler import UpdateScheduler
from engine.grid_editor.session import EditorMode, InteractionSession
from engine.grid_editor.state_machine import InteractionStateMachine
from engine.grid_editor.view_transform import ViewTransform
from engine.utils.logging.logger import log_info


class GridEditor:
    def __init__(
        self,
        host: SceneHost,
        frame_clock: FrameClock,
        config: Optional[GridEditorConfig] = None,
    ) -> None:
        self.config = config or GridEditorConfig()
        self.host = host
        size = self.config.size

        self.model = GraphModel(size)
        self.view = ViewTransform(size)
        self.tracker = InputTracker()
        self.session = InteractionSession()
        self.renderer = SceneRenderer(host, size)
        self.scheduler = UpdateScheduler(
            frame_clock,
            self._execute_frame,
            keep_alive=self.tracker.has_held_inputs,
        )
        self.state_machine = InteractionStateMachine(
            model=self.model,
            view=self.view,
            tracker=self.tracker,
            session=self.session,
            renderer=self.renderer,
            dispatcher=ActionDispatcher(self.config.listener),
            keys=self.config.keys,
            handle_event=self.scheduler.handle,
            set_cursor_state=host.set_cursor_state,
            bounding_rect_provider=host.bounding_rect,
        )

        self.renderer.build()
        self.view.set_bounds(host.bounding_rect())
        self.scheduler.request("init")
        log_info("[GRID] 网格编辑器初始化完成，size={}", size)

    @property
    def mode(self) -> EditorMode:
        return self.session.mode

    @property
    def is_disposed(self) -> bool:
        return self.scheduler.is_disposed

    def _execute_frame(self) -> None:
        self.state_machine.run_frame(self.host.now())

    # === 宿主事件（只记录意图） ===

    def on_pointer_move(self, x: float, y: float) -> None:
        if self.is_disposed:
            return
        self.session.set_pointer(x, y)
        self.scheduler.request("mousemove")

    def on_pointer_down(self, click_name: Optional[str], x: float, y: float) -> None:
        if self.is_disposed:
            return
        self.session.set_pointer(x, y)
        if click_name:
            self.tracker.press(click_name, self.host.now())
        self.scheduler.request("mousemove")

    def on_pointer_up(self, click_name: Optional[str], x: float, y: float) -> None:
        if self.is_disposed:
            return
        self.session.set_pointer(x, y)
        if click_name:
            self.tracker.release(click_name)
        self.scheduler.request("mousemove")

    def on_key_down(self, key_name: str) -> None:
        if self.is_disposed or self.tracker.is_held(key_name):
            return
        self.tracker.press(key_name, self.host.now())
        self.scheduler.request("keyboard")

    def on_key_up(self, key_name: str) -> None:
        if self.is_disposed:
            return
        self.tracker.release(key_name)
        self.scheduler.request("keyboard")

    def on_wheel(self, delta: float) -> None:
        if self.is_disposed or delta == 0:
            return
        self.session.pending_wheel.append(float(delta))
        self.scheduler.request("wheel")

    def on_resize(self) -> None:
        if self.is_disposed:
            return
        self.scheduler.request("resize")

    def on_blur(self) -> None:
        if self.is_disposed:
            return
        self.scheduler.request("blur")

    # === 编程接口 ===

    def delete_link(self, link: Link) -> bool:
        """删除连线并派发 REMOVE_LINK；连线已不在模型中时不做任何事"""
        if self.is_disposed:
            return False
        return self.state_machine.delete_link(link)

    def dispose(self) -> None:
        if self.is_disposed:
            return
        self.scheduler.dispose()
        log_info("[GRID] 网格编辑器已销毁")
