"""网络拓扑模块"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from pydantic import Field

from .base import BaseConfig
from .dependency import DependencyList
from .exported import ExportedTopology
from .subnet import Subnet
from .subnet_group import export_subnet_group, import_subnet_group
from ..outputs import export_name, import_value
from ..placement import resolve_placement
from ..types import AvailabilityZone, PlacementRequest, SELECTION_ORDER, SubnetType
from ...utils.logging import get_logger

if TYPE_CHECKING:
    from ...lookup import NetworkLookupProps

logger = get_logger(__name__)

VPC_ID_OUTPUT = "VpcId"


class NetworkTopology(BaseConfig):
    """网络拓扑

    子网分为公有、私有、隔离三组。非空的组必须每个可用区恰好一个子网，
    顺序与 availability_zones 一致。构造后不可变。
    """

    vpc_id: str = Field(description="网络标识")
    availability_zones: Tuple[AvailabilityZone, ...] = Field(description="可用区列表")
    public_subnets: Tuple[Subnet, ...] = Field(default=(), description="公有子网")
    private_subnets: Tuple[Subnet, ...] = Field(default=(), description="私有子网")
    isolated_subnets: Tuple[Subnet, ...] = Field(default=(), description="隔离子网")

    dependency_elements: Tuple[Any, ...] = Field(default=(), description="构成网络的依赖项")
    internet_dependencies: Tuple[Any, ...] = Field(default=(), description="互联网连通所需的依赖项")

    @classmethod
    def import_from(cls, exported: Union[ExportedTopology, Mapping[str, Any]]) -> NetworkTopology:
        """从导出值重建网络拓扑

        Raises:
            MalformedImport: 任一子网组的 id/名称数量与可用区数量不一致
        """
        if not isinstance(exported, ExportedTopology):
            exported = ExportedTopology.from_values(exported)

        zones = exported.availability_zones
        groups: Dict[SubnetType, list] = {}
        for subnet_type in SubnetType:
            ids_field, names_field = ExportedTopology.field_labels(subnet_type)
            groups[subnet_type] = import_subnet_group(
                exported.ids_for(subnet_type),
                exported.names_for(subnet_type),
                subnet_type,
                zones,
                ids_field,
                names_field,
            )

        topology = cls(
            vpc_id=exported.vpc_id,
            availability_zones=zones,
            public_subnets=tuple(groups[SubnetType.PUBLIC]),
            private_subnets=tuple(groups[SubnetType.PRIVATE]),
            isolated_subnets=tuple(groups[SubnetType.ISOLATED]),
        )
        logger.debug(
            "topology_imported",
            vpc_id=topology.vpc_id,
            zones=len(zones),
            **{f"{t.value}_subnets": len(groups[t]) for t in SubnetType},
        )
        return topology

    @classmethod
    def import_from_context(
        cls,
        context: Mapping[str, Any],
        props: NetworkLookupProps,
        account: str,
        region: str,
    ) -> NetworkTopology:
        """根据环境上下文中记录的查询结果导入网络"""
        from ...lookup import NetworkLookupProvider

        provider = NetworkLookupProvider(props, account=account, region=region)
        return cls.import_from(provider.lookup(context))

    @property
    def subnet_groups(self) -> Dict[SubnetType, Tuple[Subnet, ...]]:
        """按 私有 -> 公有 -> 隔离 排列的子网组"""
        return {subnet_type: self.subnets_of(subnet_type) for subnet_type in SELECTION_ORDER}

    def subnets_of(self, subnet_type: SubnetType | str) -> Tuple[Subnet, ...]:
        """获取指定类型的子网组"""
        groups = {
            SubnetType.ISOLATED: self.isolated_subnets,
            SubnetType.PRIVATE: self.private_subnets,
            SubnetType.PUBLIC: self.public_subnets,
        }
        return groups[SubnetType(subnet_type)]

    def subnets(self, placement: Optional[PlacementRequest] = None) -> Sequence[Subnet]:
        """返回符合放置请求的子网，默认为私有子网"""
        selected = resolve_placement(self.subnet_groups, placement)
        logger.debug(
            "placement_resolved",
            vpc_id=self.vpc_id,
            placement=placement.model_dump(exclude_none=True) if placement else {},
            subnets=[subnet.subnet_id for subnet in selected],
        )
        return selected

    def is_member(self, subnet: Subnet, group: SubnetType | str) -> bool:
        """子网对象是否属于指定组

        只认对象身份：字段相同但独立构造的子网不算成员。
        """
        return any(candidate is subnet for candidate in self.subnets_of(group))

    def is_public_subnet(self, subnet: Subnet) -> bool:
        return self.is_member(subnet, SubnetType.PUBLIC)

    def export_to(self, scope: Optional[str] = None) -> ExportedTopology:
        """导出为扁平值

        指定 scope 时 vpcId 为导入引用，对应的字面值由 outputs(scope) 发布。

        Raises:
            TopologyMismatch: 任一非空子网组的数量与可用区数量不一致
        """
        az_count = len(self.availability_zones)
        values: Dict[str, Any] = {
            "vpcId": import_value(export_name(scope, VPC_ID_OUTPUT)) if scope else self.vpc_id,
            "availabilityZones": self.availability_zones,
        }
        for subnet_type in SubnetType:
            group = export_subnet_group(self.subnets_of(subnet_type), subnet_type, az_count)
            if not group.ids:
                continue
            ids_field, names_field = ExportedTopology.field_labels(subnet_type)
            values[ids_field] = group.ids
            values[names_field] = group.names

        exported = ExportedTopology.from_values(values)
        logger.debug("topology_exported", vpc_id=self.vpc_id, scope=scope, fields=sorted(values))
        return exported

    def outputs(self, scope: str) -> Dict[str, str]:
        """生产方需要发布的导出值：导出名称 -> 字面值"""
        return {export_name(scope, VPC_ID_OUTPUT): self.vpc_id}

    def internet_dependency(self) -> DependencyList:
        """互联网连通性的聚合依赖

        需要在互联网网关就绪后才能创建的资源依赖它即可。
        """
        return DependencyList(self.internet_dependencies)

    def __str__(self) -> str:
        return f"{self.vpc_id} ({len(self.availability_zones)} AZ)"
