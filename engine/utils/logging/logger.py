"""统一日志接口。

- `log_info`：信息级日志，仅在 `settings.LOG_VERBOSE` 打开时输出；
- `log_warn` / `log_error`：始终输出到 stderr。

消息模板使用 `str.format` 的 `{}` 占位符，参数按位置传入，
只有在确实需要输出时才会格式化。
"""

from __future__ import annotations

import sys

from engine.configs.settings import settings
from engine.utils.logging.console_sanitizer import ascii_safe_print

__all__ = ["log_info", "log_warn", "log_error"]


def _format(message: object, args: tuple) -> str:
    text = message if isinstance(message, str) else str(message)
    if args:
        return text.format(*args)
    return text


def log_info(message: object, *args: object) -> None:
    if not settings.LOG_VERBOSE:
        return
    ascii_safe_print(_format(message, args), file=sys.stdout)


def log_warn(message: object, *args: object) -> None:
    ascii_safe_print("[WARN] " + _format(message, args), file=sys.stderr)


def log_error(message: object, *args: object) -> None:
    ascii_safe_print("[ERROR] " + _format(message, args), file=sys.stderr, flush=True)
