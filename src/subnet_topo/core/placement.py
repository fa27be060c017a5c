"""
子网放置解析
根据放置请求从网络的三个子网组中选出子网
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Sequence, Tuple

from .errors import AmbiguousPlacement, UnknownSubnetGroup
from .types import PlacementRequest, SELECTION_ORDER, SubnetType

if TYPE_CHECKING:
    from .models.subnet import Subnet

SubnetGroups = Mapping[SubnetType, Sequence["Subnet"]]


def select_by_name(groups: SubnetGroups, name: str) -> Tuple["Subnet", ...]:
    """按子网组名称跨所有类型选择，保持 私有 -> 公有 -> 隔离 的顺序"""
    selected = tuple(
        subnet
        for subnet_type in SELECTION_ORDER
        for subnet in groups.get(subnet_type, ())
        if subnet.name_or_default(subnet_type) == name
    )
    if not selected:
        raise UnknownSubnetGroup(name)
    return selected


def resolve_placement(
    groups: SubnetGroups,
    placement: Optional[PlacementRequest] = None,
) -> Sequence["Subnet"]:
    """返回符合放置请求的子网

    Raises:
        AmbiguousPlacement: 同时指定了 subnets_to_use 和 subnet_name
        UnknownSubnetGroup: 按名称选择时没有匹配项
    """
    placement = placement or PlacementRequest()

    if placement.subnets_to_use is not None and placement.subnet_name is not None:
        raise AmbiguousPlacement()

    if placement.subnet_name is not None:
        return select_by_name(groups, placement.subnet_name)

    # 未指定时默认放在私有子网
    if placement.subnets_to_use is None:
        return groups[SubnetType.PRIVATE]

    return groups[SubnetType(placement.subnets_to_use)]
