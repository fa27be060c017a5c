"""工具函数"""

from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
