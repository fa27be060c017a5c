"""
核心模块初始化
导出主要的类型、错误和模型
"""

from .types import (
    AvailabilityZone, SubnetType, PlacementRequest, SELECTION_ORDER,
    Success, Failure, Result
)

from .errors import (
    TopologyError, AmbiguousPlacement, UnknownSubnetGroup, TopologyMismatch,
    MalformedImport, UnresolvedImportValue, ContextLookupMissing
)

from .models import (
    Subnet, NetworkTopology, ExportedTopology, DependencyList,
    TopologyDescription, export_subnet_group, import_subnet_group
)

from .outputs import import_value, is_import_token, resolve_import_values
from .placement import resolve_placement

__all__ = [
    # 类型
    'AvailabilityZone', 'SubnetType', 'PlacementRequest', 'SELECTION_ORDER',
    'Success', 'Failure', 'Result',

    # 错误
    'TopologyError', 'AmbiguousPlacement', 'UnknownSubnetGroup', 'TopologyMismatch',
    'MalformedImport', 'UnresolvedImportValue', 'ContextLookupMissing',

    # 模型
    'Subnet', 'NetworkTopology', 'ExportedTopology', 'DependencyList',
    'TopologyDescription', 'export_subnet_group', 'import_subnet_group',

    # 函数
    'import_value', 'is_import_token', 'resolve_import_values', 'resolve_placement',
]
