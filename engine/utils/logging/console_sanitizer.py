from __future__ import annotations

import builtins as _builtins
import sys
from typing import Any

__all__ = ["install_ascii_safe_print", "ascii_safe_print", "sanitize_console_text"]

_ASCII_REPLACEMENTS: dict[str, str] = {
    "✓": "[OK]",
    "✅": "[OK]",
    "✗": "[FAIL]",
    "❌": "[FAIL]",
    "⚠️": "[WARN]",
    "⚠": "[WARN]",
    "→": "->",
    "←": "<-",
    "↔": "<->",
    "×": "x",
    "…": "...",
    "—": "-",
    "–": "-",
    "·": "-",
    "•": "-",
    "●": "*",
    "○": "o",
}

_ORIGINAL_PRINT = _builtins.print


def sanitize_console_text(text: object) -> str:
    """把已知的问题符号替换为 ASCII 等价形式（中文内容保持不变）。"""
    result = text if isinstance(text, str) else str(text)
    for special_char, ascii_text in _ASCII_REPLACEMENTS.items():
        if special_char in result:
            result = result.replace(special_char, ascii_text)
    return result


def ascii_safe_print(*objects: object, **kwargs: Any) -> None:
    """以 ASCII 安全方式打印内容，不依赖全局 patch。"""
    separator = kwargs.get("sep", " ")
    line_ending = kwargs.get("end", "\n")
    output_file = kwargs.get("file", None) or sys.stdout
    flush_flag = bool(kwargs.get("flush", False))

    _ORIGINAL_PRINT(
        *[sanitize_console_text(obj) for obj in objects],
        sep=sanitize_console_text(separator),
        end=sanitize_console_text(line_ending),
        file=output_file,
        flush=flush_flag,
    )


def install_ascii_safe_print() -> None:
    """安装 ASCII 安全的全局 print，避免 Windows 控制台编码问题。

    仅在 CLI 入口调用；库代码统一走 logger，不依赖该全局替换。
    """

    _builtins.print = ascii_safe_print  # type: ignore[assignment]
