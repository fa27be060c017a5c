"""配置"""

from .settings import AppSettings

__all__ = ["AppSettings"]
