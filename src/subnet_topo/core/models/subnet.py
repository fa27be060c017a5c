"""子网引用模块"""
from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import Field

from .base import BaseConfig
from ..types import AvailabilityZone, SubnetId, SubnetType


class Subnet(BaseConfig):
    """单个子网的引用

    网络只认可自己创建或构造时传入的子网对象。字段完全相同但独立构造的
    两个 Subnet 在成员判断中互不等同，比较一律使用 `is`。
    """

    subnet_id: SubnetId = Field(description="子网标识")
    availability_zone: AvailabilityZone = Field(description="所在可用区")
    group_name: Optional[str] = Field(default=None, description="子网组名称，缺省时取子网类型的默认名称")
    dependency_elements: Tuple[Any, ...] = Field(default=(), description="构成该子网的依赖项")

    @classmethod
    def from_existing(
        cls,
        subnet_id: str,
        availability_zone: str,
        group_name: Optional[str] = None,
    ) -> Subnet:
        """引用一个已存在的子网，每次调用都会分配新的对象"""
        return cls(
            subnet_id=subnet_id,
            availability_zone=availability_zone,
            group_name=group_name,
        )

    def name_or_default(self, subnet_type: SubnetType | str) -> str:
        """获取子网组名称，仅在为 None 时使用所属类型的默认名称，空字符串照常保留"""
        if self.group_name is not None:
            return self.group_name
        return SubnetType(subnet_type).canonical_name

    def __str__(self) -> str:
        return f"{self.subnet_id}@{self.availability_zone}"
