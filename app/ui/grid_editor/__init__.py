"""网格连线编辑器的 PyQt6 宿主

对外入口 `init_grid_editor()`：把编辑器视图挂到给定的 QWidget 上，返回销毁函数。
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from PyQt6 import QtWidgets

from engine.grid_editor.actions import ActionListener
from engine.grid_editor.config import GridEditorConfig, KeyBindings
from engine.utils.logging.logger import log_info

from app.ui.grid_editor.frame_clock import QtFrameClock
from app.ui.grid_editor.grid_editor_view import GridEditorView
from app.ui.grid_editor.primitive_items import QtPrimitive


def init_grid_editor(
    mounting_point: QtWidgets.QWidget,
    size: Optional[int] = None,
    keys: Optional[Mapping[str, str]] = None,
    listener: Optional[ActionListener] = None,
) -> Callable[[], None]:
    """创建网格编辑器并挂载到 mounting_point

    Args:
        mounting_point: 承载编辑器视图的 QWidget（没有布局时自动创建纵向布局）
        size: 网格边长，None 表示使用 settings.DEFAULT_GRID_SIZE
        keys: 按键覆盖表（grab/zoom_in/zoom_in_precise/zoom_out/zoom_out_precise/unselect，
            也接受 zoomIn 这类驼峰写法）
        listener: 动作回调 listener(action_type, payload)

    Returns:
        无参销毁函数；重复调用安全
    """
    if not isinstance(mounting_point, QtWidgets.QWidget):
        raise TypeError(f"mounting_point 必须为 QWidget，当前为 {type(mounting_point).__name__}")

    config_kwargs = {"keys": KeyBindings.from_mapping(keys), "listener": listener}
    if size is not None:
        config_kwargs["size"] = size
    config = GridEditorConfig(**config_kwargs)

    view = GridEditorView(config, parent=mounting_point)
    layout = mounting_point.layout()
    if layout is None:
        layout = QtWidgets.QVBoxLayout(mounting_point)
        layout.setContentsMargins(0, 0, 0, 0)
    layout.addWidget(view)
    log_info("[BOOT] 网格编辑器已挂载，size={}", config.size)

    def dispose() -> None:
        view.detach()

    return dispose


__all__ = [
    "init_grid_editor",
    "GridEditorView",
    "QtFrameClock",
    "QtPrimitive",
]
