"""网格编辑器视图

QGraphicsView 同时扮演引擎需要的宿主角色：
- 图元工厂（QtPrimitive，挂在统一的根图元下，由根图元承载平移/缩放矩阵）；
- 宿主事件源（鼠标/键盘/滚轮/尺寸变化/失焦 → GridEditor.on_*）；
- 帧回调调度（QtFrameClock）。
"""

from __future__ import annotations

import time
from typing import Any, Dict, Mapping, Optional

from PyQt6 import QtCore, QtGui, QtWidgets

from engine.grid_editor.config import GridEditorConfig
from engine.grid_editor.editor import GridEditor
from engine.grid_editor.host import PrimitiveKind, SceneLayer
from engine.grid_editor.input_tracker import LEFT_CLICK, MIDDLE_CLICK, RIGHT_CLICK
from engine.grid_editor.view_transform import ViewportRect
from engine.utils.logging.logger import log_info

from app.ui.grid_editor.frame_clock import QtFrameClock
from app.ui.grid_editor.primitive_items import QtPrimitive

CANVAS_BACKGROUND = QtGui.QColor(30, 30, 30)

_CLICK_NAMES = {
    QtCore.Qt.MouseButton.LeftButton: LEFT_CLICK,
    QtCore.Qt.MouseButton.RightButton: RIGHT_CLICK,
    QtCore.Qt.MouseButton.MiddleButton: MIDDLE_CLICK,
}

# 无可打印文本的按键，统一为浏览器风格的按键名
_NAMED_KEYS = {
    QtCore.Qt.Key.Key_Escape.value: "Escape",
    QtCore.Qt.Key.Key_Space.value: " ",
    QtCore.Qt.Key.Key_Delete.value: "Delete",
    QtCore.Qt.Key.Key_Backspace.value: "Backspace",
    QtCore.Qt.Key.Key_Return.value: "Enter",
    QtCore.Qt.Key.Key_Enter.value: "Enter",
    QtCore.Qt.Key.Key_Tab.value: "Tab",
}


def click_name_for_button(button: QtCore.Qt.MouseButton) -> Optional[str]:
    return _CLICK_NAMES.get(button)


def key_name_for_event(event: QtGui.QKeyEvent) -> Optional[str]:
    named = _NAMED_KEYS.get(int(event.key()))
    if named is not None:
        return named
    text = event.text()
    if text and text.isprintable():
        return text
    return None


class GridEditorView(QtWidgets.QGraphicsView):
    def __init__(self, config: Optional[GridEditorConfig] = None, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        config = config or GridEditorConfig()
        size = config.size
        self._scene = QtWidgets.QGraphicsScene(self)
        # 与 viewBox "-0.5 -0.5 S S" 对应：格心落在整数坐标上
        self._scene.setSceneRect(QtCore.QRectF(-0.5, -0.5, size, size))
        self._scene.setBackgroundBrush(CANVAS_BACKGROUND)
        self.setScene(self._scene)

        self._root = QtWidgets.QGraphicsRectItem(QtCore.QRectF())
        self._root.setPen(QtGui.QPen(QtCore.Qt.PenStyle.NoPen))
        self._scene.addItem(self._root)

        self.setHorizontalScrollBarPolicy(QtCore.Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(QtCore.Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
        self.setDragMode(QtWidgets.QGraphicsView.DragMode.NoDrag)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)
        self.viewport().setMouseTracking(True)

        self._cursor_states: set[str] = set()
        # 按物理按键记录按下时上报的名称，避免 Shift 先松开导致 "+" 与 "=" 对不上
        self._pressed_key_names: Dict[int, str] = {}
        self.frame_clock = QtFrameClock(self)
        self.editor: Optional[GridEditor] = GridEditor(self, self.frame_clock, config)

    # === SceneHost ===

    def create_primitive(self, kind: PrimitiveKind, attributes: Mapping[str, Any], layer: SceneLayer) -> QtPrimitive:
        return QtPrimitive.create(kind, attributes, self._root, float(int(layer)))

    def bounding_rect(self) -> ViewportRect:
        rect = self.viewportTransform().mapRect(self._scene.sceneRect())
        return ViewportRect(rect.x(), rect.y(), rect.width(), rect.height())

    def set_view_transform(self, scale: float, x: float, y: float) -> None:
        self._root.setTransform(QtGui.QTransform(scale, 0.0, 0.0, scale, x, y))

    def set_cursor_state(self, state: str, enabled: bool) -> None:
        if enabled:
            self._cursor_states.add(state)
        else:
            self._cursor_states.discard(state)
        if "grabbing" in self._cursor_states:
            shape = QtCore.Qt.CursorShape.ClosedHandCursor
        elif "grab" in self._cursor_states:
            shape = QtCore.Qt.CursorShape.OpenHandCursor
        else:
            shape = QtCore.Qt.CursorShape.ArrowCursor
        self.viewport().setCursor(QtGui.QCursor(shape))

    @property
    def cursor_states(self) -> frozenset[str]:
        return frozenset(self._cursor_states)

    def now(self) -> float:
        return time.monotonic() * 1000.0

    # === 生命周期 ===

    def detach(self) -> None:
        """停止把宿主事件转发给编辑器，并让调度器失效"""
        if self.editor is None:
            return
        self.editor.dispose()
        self.editor = None
        self._pressed_key_names.clear()
        log_info("[INPUT] 网格编辑器视图已解除事件绑定")

    # === 宿主事件 ===

    def _fit_scene(self) -> None:
        self.fitInView(self._scene.sceneRect(), QtCore.Qt.AspectRatioMode.KeepAspectRatio)

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:
        super().resizeEvent(event)
        self._fit_scene()
        if self.editor is not None:
            self.editor.on_resize()

    def showEvent(self, event: QtGui.QShowEvent) -> None:
        super().showEvent(event)
        self._fit_scene()
        if self.editor is not None:
            self.editor.on_resize()

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:
        if self.editor is None:
            super().mouseMoveEvent(event)
            return
        pos = event.position()
        self.editor.on_pointer_move(pos.x(), pos.y())
        event.accept()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        if self.editor is None:
            super().mousePressEvent(event)
            return
        self.setFocus(QtCore.Qt.FocusReason.MouseFocusReason)
        pos = event.position()
        self.editor.on_pointer_down(click_name_for_button(event.button()), pos.x(), pos.y())
        event.accept()

    def mouseReleaseEvent(self, event: QtGui.QMouseEvent) -> None:
        if self.editor is None:
            super().mouseReleaseEvent(event)
            return
        pos = event.position()
        self.editor.on_pointer_up(click_name_for_button(event.button()), pos.x(), pos.y())
        event.accept()

    def wheelEvent(self, event: QtGui.QWheelEvent) -> None:
        if self.editor is None:
            super().wheelEvent(event)
            return
        # 与浏览器 deltaY 同号：向下滚动为正
        self.editor.on_wheel(-event.angleDelta().y())
        event.accept()

    def contextMenuEvent(self, event: QtGui.QContextMenuEvent) -> None:
        # 右键用于新增点，屏蔽默认菜单
        event.accept()

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:
        if self.editor is None:
            super().keyPressEvent(event)
            return
        if event.isAutoRepeat():
            event.accept()
            return
        name = key_name_for_event(event)
        if name is None:
            super().keyPressEvent(event)
            return
        self._pressed_key_names[event.nativeScanCode() or event.key()] = name
        self.editor.on_key_down(name)
        event.accept()

    def keyReleaseEvent(self, event: QtGui.QKeyEvent) -> None:
        if self.editor is None:
            super().keyReleaseEvent(event)
            return
        if event.isAutoRepeat():
            event.accept()
            return
        name = self._pressed_key_names.pop(event.nativeScanCode() or event.key(), None)
        if name is None:
            name = key_name_for_event(event)
        if name is None:
            super().keyReleaseEvent(event)
            return
        self.editor.on_key_up(name)
        event.accept()

    def focusOutEvent(self, event: QtGui.QFocusEvent) -> None:
        super().focusOutEvent(event)
        self._pressed_key_names.clear()
        if self.editor is not None:
            self.editor.on_blur()
