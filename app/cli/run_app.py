from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

# 确保从项目根导入
WORKSPACE_ROOT = Path(__file__).resolve().parents[2]
if str(WORKSPACE_ROOT) not in sys.path:
    sys.path.insert(0, str(WORKSPACE_ROOT))

from engine.utils.logging.console_sanitizer import install_ascii_safe_print

# 安装全局 ASCII 安全打印（避免 Windows 控制台编码问题）
install_ascii_safe_print()

from PyQt6 import QtWidgets  # noqa: E402
from app.ui.grid_editor import init_grid_editor  # noqa: E402
from engine.configs.settings import settings  # noqa: E402
from engine.grid_editor.actions import ActionType  # noqa: E402
from engine.utils.logging.logger import log_info  # noqa: E402

APP_TITLE = "网格连线编辑器"


def _describe_payload(action_type: ActionType, payload: object) -> str:
    if action_type == ActionType.ADD_POINT:
        return f"({payload.x}, {payload.y}) key={payload.key}"
    return f"{payload.start.key} -> {payload.end.key}"


def _on_action(action_type: ActionType, payload: object) -> None:
    log_info("[ACTION] {} {}", action_type.value, _describe_payload(action_type, payload))


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=APP_TITLE)
    parser.add_argument("--size", type=int, default=None, help="网格边长（默认读取设置 DEFAULT_GRID_SIZE）")
    parser.add_argument("--verbose", action="store_true", help="打印每帧交互追踪日志")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # 在应用创建前尽早加载用户设置
    settings.set_config_path(WORKSPACE_ROOT)
    settings.load()
    # GUI 入口统一在启动阶段打开信息级日志，确保控制台可见关键进度
    settings.LOG_VERBOSE = True
    if args.verbose:
        settings.INTERACTION_VERBOSE = True

    log_info("[BOOT] 准备创建 QApplication 实例")
    app = QtWidgets.QApplication(sys.argv[:1])

    window = QtWidgets.QMainWindow()
    window.setWindowTitle(APP_TITLE)
    container = QtWidgets.QWidget(window)
    window.setCentralWidget(container)
    dispose = init_grid_editor(container, size=args.size, listener=_on_action)
    app.aboutToQuit.connect(dispose)

    window.resize(720, 720)
    window.show()
    log_info("[BOOT] 主窗口已显示：右键放置点，左键选择/连线，空白处拖动平移，=/-/+/_ 与滚轮缩放")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
