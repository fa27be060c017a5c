"""子网组编解码

在按可用区排列的子网列表与扁平的 id/名称列表之间转换。
第 i 个子网总是对应可用区列表的第 i 项，两者的数量必须一起变化。
"""
from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence

from .subnet import Subnet
from ..errors import MalformedImport, TopologyMismatch
from ..types import SubnetType


class SubnetGroupValues(NamedTuple):
    """一个子网组导出后的两个平行列表"""
    ids: List[str]
    names: List[str]


def export_subnet_group(
    subnets: Sequence[Subnet],
    subnet_type: SubnetType | str,
    expected_az_count: int,
) -> SubnetGroupValues:
    """导出子网组

    子网列表为空时返回两个空列表，由调用者决定是否记为缺失。

    Raises:
        TopologyMismatch: 子网数量与可用区数量不一致
    """
    subnet_type = SubnetType(subnet_type)
    if subnets and len(subnets) != expected_az_count:
        raise TopologyMismatch(subnet_type, expected_az_count, len(subnets))

    return SubnetGroupValues(
        ids=[subnet.subnet_id for subnet in subnets],
        names=[subnet.name_or_default(subnet_type) for subnet in subnets],
    )


def _check_length(values: Sequence[str], expected: int, field_label: str) -> None:
    if len(values) != expected:
        raise MalformedImport(field_label, expected, len(values))


def import_subnet_group(
    ids: Optional[Sequence[str]],
    names: Optional[Sequence[str]],
    subnet_type: SubnetType | str,
    availability_zones: Sequence[str],
    ids_field: str,
    names_field: str,
) -> List[Subnet]:
    """导入子网组

    ids 为 None 表示拓扑中没有该类型的子网。names 为 None 时所有子网使用
    子网类型的默认名称。

    Raises:
        MalformedImport: ids 或 names 的长度与可用区数量不一致
    """
    if ids is None:
        return []

    subnet_type = SubnetType(subnet_type)
    _check_length(ids, len(availability_zones), ids_field)
    if names is not None:
        _check_length(names, len(availability_zones), names_field)

    return [
        Subnet(
            subnet_id=subnet_id,
            availability_zone=zone,
            group_name=names[i] if names is not None else subnet_type.canonical_name,
        )
        for i, (subnet_id, zone) in enumerate(zip(ids, availability_zones))
    ]
