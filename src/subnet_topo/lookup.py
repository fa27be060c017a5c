"""
环境上下文查询
根据部署环境（账号、区域）和过滤条件生成查询键，从上下文中取出预先记录的网络导出值
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import Field

from .core.errors import ContextLookupMissing
from .core.models.base import BaseConfig
from .core.models.exported import ExportedTopology
from .utils.logging import get_logger

logger = get_logger(__name__)

PROVIDER_NAME = "vpc-provider"


class NetworkLookupProps(BaseConfig):
    """网络查询条件，全部可选"""
    vpc_id: Optional[str] = Field(default=None, description="网络标识")
    vpc_name: Optional[str] = Field(default=None, description="Name 标签")
    is_default: Optional[bool] = Field(default=None, description="是否为默认网络")
    tags: Dict[str, str] = Field(default_factory=dict, description="标签过滤")

    @property
    def filter(self) -> Dict[str, str]:
        """转换为查询过滤条件"""
        filters = {f"tag:{key}": value for key, value in self.tags.items()}
        if self.vpc_name is not None:
            filters["tag:Name"] = self.vpc_name
        if self.vpc_id is not None:
            filters["vpc-id"] = self.vpc_id
        if self.is_default is not None:
            filters["isDefault"] = "true" if self.is_default else "false"
        return filters


class NetworkLookupProvider:
    """从上下文中查询网络"""

    def __init__(self, props: NetworkLookupProps, account: str, region: str):
        self.props = props
        self.account = account
        self.region = region

    @property
    def context_key(self) -> str:
        """确定性的查询键，各项按键名排序"""
        entries = {"account": self.account, "region": self.region}
        entries.update({f"filter.{key}": value for key, value in self.props.filter.items()})
        parts = [f"{key}={entries[key]}" for key in sorted(entries)]
        return ":".join([PROVIDER_NAME, *parts])

    def lookup(self, context: Mapping[str, Any]) -> ExportedTopology:
        """取出上下文中记录的导出值

        Raises:
            ContextLookupMissing: 上下文中没有该查询键
        """
        key = self.context_key
        values = context.get(key)
        if values is None:
            logger.warning("context_lookup_missing", key=key)
            raise ContextLookupMissing(key)
        logger.debug("context_lookup_hit", key=key)
        return ExportedTopology.from_values(values)


__all__ = ["NetworkLookupProps", "NetworkLookupProvider", "PROVIDER_NAME"]
