"""进程级用户设置（单例 `settings`）。

属性统一使用大写名称，启动入口通过 `set_config_path(root)` + `load()`
读取 `<root>/.grid_editor/settings.json`；文件不存在时保持默认值。
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

SETTINGS_DIR_NAME = ".grid_editor"
SETTINGS_FILE_NAME = "settings.json"


class Settings:
    """网格编辑器的全局开关集合。"""

    # 默认值表：只有出现在这里的键才会被 load/save 处理
    DEFAULTS: Dict[str, Any] = {
        # 信息级日志（log_info）总开关
        "LOG_VERBOSE": False,
        # 每帧交互追踪日志（[FRAME] 前缀），排查输入问题时打开
        "INTERACTION_VERBOSE": False,
        # 未显式指定 size 时的网格边长
        "DEFAULT_GRID_SIZE": 21,
    }

    def __init__(self) -> None:
        self._config_path: Optional[Path] = None
        self.reset()

    def reset(self) -> None:
        for key, value in self.DEFAULTS.items():
            setattr(self, key, value)

    def set_config_path(self, root: Path | str) -> None:
        self._config_path = Path(root) / SETTINGS_DIR_NAME / SETTINGS_FILE_NAME

    @property
    def config_path(self) -> Optional[Path]:
        return self._config_path

    def get(self, name: str, default: Any = None) -> Any:
        return getattr(self, name, default)

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in self.DEFAULTS}

    def load(self) -> None:
        """从配置文件读取设置；未知键忽略，类型不匹配的值回退为默认值。"""
        if self._config_path is None or not self._config_path.is_file():
            return
        raw = json.loads(self._config_path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"设置文件格式错误（期望 JSON 对象）：{self._config_path}")
        for key, default_value in self.DEFAULTS.items():
            if key not in raw:
                continue
            value = raw[key]
            if type(value) is type(default_value):
                setattr(self, key, value)
            else:
                setattr(self, key, default_value)

    def save(self) -> None:
        if self._config_path is None:
            raise RuntimeError("尚未设置配置路径，请先调用 set_config_path()")
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(
            json.dumps(self.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


settings = Settings()
