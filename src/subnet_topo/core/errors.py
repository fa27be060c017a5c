"""拓扑校验错误

所有错误都在出错的调用点同步抛出，由直接调用者处理。
"""

from __future__ import annotations

from typing import Any


class TopologyError(ValueError):
    """拓扑相关错误的基类"""


class AmbiguousPlacement(TopologyError):
    """同时提供了两个放置选择器"""

    def __init__(self) -> None:
        super().__init__("subnets_to_use 与 subnet_name 最多只能提供一个")


class UnknownSubnetGroup(TopologyError):
    """按名称选择时没有匹配的子网"""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"没有名为 {name!r} 的子网")


class TopologyMismatch(TopologyError):
    """导出时子网数量与可用区数量不一致"""

    def __init__(self, subnet_type: Any, expected: int, actual: int) -> None:
        self.subnet_type = subnet_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{getattr(subnet_type, 'value', subnet_type)} 子网数量 ({actual}) "
            f"必须与可用区数量 ({expected}) 一致"
        )


class MalformedImport(TopologyError):
    """导入的 id/名称列表长度与可用区数量不一致"""

    def __init__(self, field: str, expected: int, actual: int) -> None:
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{field} 的条目数 ({actual}) 必须与可用区数量 ({expected}) 一致"
        )


class UnresolvedImportValue(TopologyError):
    """导入引用在输出表中找不到对应的导出值"""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"无法解析导入引用: {token}")


class ContextLookupMissing(TopologyError):
    """上下文中没有记录对应查询键的网络"""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"上下文中缺少网络查询结果: {key}")


__all__ = [
    "TopologyError",
    "AmbiguousPlacement",
    "UnknownSubnetGroup",
    "TopologyMismatch",
    "MalformedImport",
    "UnresolvedImportValue",
    "ContextLookupMissing",
]
