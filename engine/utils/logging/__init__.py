"""Logging 相关工具子包

提供统一日志与控制台输出清理等功能：
- logger：log_info/log_warn/log_error 等统一日志接口
- console_sanitizer：控制台输出内容清洗
"""

__all__ = ["logger", "console_sanitizer"]
