"""配置子包

- settings：进程级用户设置单例
"""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
