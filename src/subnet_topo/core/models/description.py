"""拓扑描述模块

描述文件用于直接构造网络拓扑：
    vpcId: vpc-1
    availabilityZones: [a, b]
    subnets:
      private:
        - {id: sub-1, availabilityZone: a}
        - {id: sub-2, availabilityZone: b, name: App}
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import ConfigDict, Field

from .base import BaseConfig
from .network import NetworkTopology
from .subnet import Subnet
from ..types import AvailabilityZone, SubnetType


class SubnetDescription(BaseConfig):
    """子网描述"""
    model_config = ConfigDict(populate_by_name=True)

    subnet_id: str = Field(alias="id", description="子网标识")
    availability_zone: AvailabilityZone = Field(alias="availabilityZone", description="所在可用区")
    group_name: Optional[str] = Field(default=None, alias="name", description="子网组名称")

    def build(self) -> Subnet:
        return Subnet(
            subnet_id=self.subnet_id,
            availability_zone=self.availability_zone,
            group_name=self.group_name,
        )


class TopologyDescription(BaseConfig):
    """网络拓扑描述"""
    model_config = ConfigDict(populate_by_name=True)

    vpc_id: str = Field(alias="vpcId", description="网络标识")
    availability_zones: Tuple[AvailabilityZone, ...] = Field(alias="availabilityZones", description="可用区列表")
    subnets: Dict[SubnetType, Tuple[SubnetDescription, ...]] = Field(default_factory=dict, description="按类型分组的子网")

    def build(self) -> NetworkTopology:
        """直接构造网络拓扑，不做额外校验"""
        groups = {
            SubnetType(subnet_type): tuple(item.build() for item in items)
            for subnet_type, items in self.subnets.items()
        }
        return NetworkTopology(
            vpc_id=self.vpc_id,
            availability_zones=self.availability_zones,
            public_subnets=groups.get(SubnetType.PUBLIC, ()),
            private_subnets=groups.get(SubnetType.PRIVATE, ()),
            isolated_subnets=groups.get(SubnetType.ISOLATED, ()),
        )
