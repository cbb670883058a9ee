"""
引擎核心公共 API 导出点（稳定入口）。

仅暴露对外使用的接口；子模块默认内部。
"""

# Grid editor（交互引擎：模型/路由/视图变换/输入/状态机/调度）
from .grid_editor import (
    ActionType,
    GraphModel,
    GridBoundsError,
    GridEditor,
    GridEditorConfig,
    KeyBindings,
    Link,
    LinkPath,
    Point,
    ViewTransform,
    route,
)

# Utilities（工具函数）
from engine.utils.logging.logger import log_info, log_error, log_warn

# Configs（配置与设置）
from engine.configs.settings import settings, Settings

__all__ = [
    # grid editor
    "ActionType",
    "GraphModel",
    "GridBoundsError",
    "GridEditor",
    "GridEditorConfig",
    "KeyBindings",
    "Link",
    "LinkPath",
    "Point",
    "ViewTransform",
    "route",
    # logging
    "log_info",
    "log_error",
    "log_warn",
    # settings
    "settings",
    "Settings",
]
