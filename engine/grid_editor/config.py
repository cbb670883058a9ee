"""网格编辑器的构造期配置"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Mapping, Optional

from engine.configs.settings import settings
from engine.grid_editor.actions import ActionListener

# 驼峰命名 -> 字段名；两种写法都允许出现在覆盖表里
_CAMEL_CASE_ALIASES = {
    "zoomIn": "zoom_in",
    "zoomInPrecise": "zoom_in_precise",
    "zoomOut": "zoom_out",
    "zoomOutPrecise": "zoom_out_precise",
}


@dataclass(frozen=True)
class KeyBindings:
    """逻辑动作到按键名的映射（按键名与宿主上报的 key 文本一致）"""

    grab: str = " "
    zoom_in: str = "="
    zoom_in_precise: str = "+"
    zoom_out: str = "-"
    zoom_out_precise: str = "_"
    unselect: str = "Escape"

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"按键绑定 {f.name} 必须为非空字符串，当前为 {value!r}")

    @classmethod
    def from_mapping(cls, overrides: Optional[Mapping[str, str]] = None) -> "KeyBindings":
        """在默认绑定基础上应用覆盖表"""
        if not overrides:
            return cls()
        known = {f.name for f in fields(cls)}
        normalized = {}
        for name, key in overrides.items():
            field_name = _CAMEL_CASE_ALIASES.get(name, name)
            if field_name not in known:
                raise ValueError(f"未知的按键动作: {name}")
            normalized[field_name] = key
        return replace(cls(), **normalized)


@dataclass(frozen=True)
class GridEditorConfig:
    size: int = field(default_factory=lambda: settings.DEFAULT_GRID_SIZE)
    keys: KeyBindings = field(default_factory=KeyBindings)
    listener: Optional[ActionListener] = None

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or isinstance(self.size, bool) or self.size < 1:
            raise ValueError(f"网格尺寸必须为正整数，当前为 {self.size!r}")
        if not isinstance(self.keys, KeyBindings):
            raise ValueError("keys 必须为 KeyBindings 实例，请使用 KeyBindings.from_mapping() 构造")
