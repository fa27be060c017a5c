"""导出值模块

ExportedTopology 是网络拓扑的扁平表示，字段名（别名）是下游使用者依赖的稳定契约。
字段缺失表示网络没有该类型的子网，而不是“未知”。
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ConfigDict, Field

from .base import BaseConfig
from ..types import AvailabilityZone, SubnetType


class ExportedTopology(BaseConfig):
    """导出的网络拓扑值"""

    model_config = ConfigDict(populate_by_name=True)

    vpc_id: str = Field(alias="vpcId", description="网络标识或导入引用")
    availability_zones: Tuple[AvailabilityZone, ...] = Field(alias="availabilityZones", description="可用区列表")

    public_subnet_ids: Optional[Tuple[str, ...]] = Field(default=None, alias="publicSubnetIds")
    public_subnet_names: Optional[Tuple[str, ...]] = Field(default=None, alias="publicSubnetNames")
    private_subnet_ids: Optional[Tuple[str, ...]] = Field(default=None, alias="privateSubnetIds")
    private_subnet_names: Optional[Tuple[str, ...]] = Field(default=None, alias="privateSubnetNames")
    isolated_subnet_ids: Optional[Tuple[str, ...]] = Field(default=None, alias="isolatedSubnetIds")
    isolated_subnet_names: Optional[Tuple[str, ...]] = Field(default=None, alias="isolatedSubnetNames")

    @staticmethod
    def field_labels(subnet_type: SubnetType | str) -> Tuple[str, str]:
        """子网类型对应的 (id 字段名, 名称字段名)"""
        prefix = SubnetType(subnet_type).field_prefix
        return f"{prefix}SubnetIds", f"{prefix}SubnetNames"

    def ids_for(self, subnet_type: SubnetType | str) -> Optional[Tuple[str, ...]]:
        return getattr(self, f"{SubnetType(subnet_type).value}_subnet_ids")

    def names_for(self, subnet_type: SubnetType | str) -> Optional[Tuple[str, ...]]:
        return getattr(self, f"{SubnetType(subnet_type).value}_subnet_names")

    def to_values(self) -> Dict[str, Any]:
        """转换为以契约字段名为键的值字典，缺失的字段不输出"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> ExportedTopology:
        """从值字典创建，未知字段会被拒绝"""
        return cls.model_validate(dict(values))
