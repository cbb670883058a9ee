"""Utilities 工具包

目前只包含 logging 子包：统一日志与控制台输出清洗。
"""

__all__ = ["logging"]
