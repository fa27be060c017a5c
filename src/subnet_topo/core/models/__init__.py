"""
Models 包 - 子网拓扑数据模型

此包包含子网、网络拓扑以及导出值模型。
"""

# 基础
from .base import BaseConfig

# 子网与依赖
from .subnet import Subnet
from .dependency import Dependable, DependencyList

# 编解码与导出值
from .exported import ExportedTopology
from .subnet_group import SubnetGroupValues, export_subnet_group, import_subnet_group

# 网络拓扑
from .network import NetworkTopology
from .description import SubnetDescription, TopologyDescription

__all__ = [
    # 基础
    "BaseConfig",
    # 子网与依赖
    "Subnet",
    "Dependable",
    "DependencyList",
    # 编解码与导出值
    "ExportedTopology",
    "SubnetGroupValues",
    "export_subnet_group",
    "import_subnet_group",
    # 网络拓扑
    "NetworkTopology",
    "SubnetDescription",
    "TopologyDescription",
]
