"""
核心类型定义
子网类型、可用区、放置请求以及操作结果类型
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union, Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field


# 基础 Pydantic 配置
class BaseTypeModel(BaseModel):
    """基础类型模型配置"""
    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        arbitrary_types_allowed=True,
    )


# 可用区只作为位置关联标记使用，不做解析
AvailabilityZone = Annotated[str, Field(description="可用区")]
SubnetId = Annotated[str, Field(description="子网标识")]


class SubnetType(str, Enum):
    """子网类型枚举"""
    ISOLATED = "isolated"
    PRIVATE = "private"
    PUBLIC = "public"

    @property
    def canonical_name(self) -> str:
        """未指定组名时使用的默认子网组名称"""
        names = {
            SubnetType.ISOLATED: "Isolated",
            SubnetType.PRIVATE: "Private",
            SubnetType.PUBLIC: "Public",
        }
        return names[self]

    @property
    def description(self) -> str:
        """获取路由描述"""
        descriptions = {
            SubnetType.ISOLATED: "无出站路由",
            SubnetType.PRIVATE: "经 NAT 网关出站，不接受入站连接",
            SubnetType.PUBLIC: "经互联网网关双向路由",
        }
        return descriptions[self]

    @property
    def field_prefix(self) -> str:
        """导出值中对应字段的前缀，如 publicSubnetIds 中的 public"""
        return self.value


# 按名称选择子网时的遍历顺序
SELECTION_ORDER = (SubnetType.PRIVATE, SubnetType.PUBLIC, SubnetType.ISOLATED)


class PlacementRequest(BaseTypeModel):
    """工作负载放置请求

    subnets_to_use 与 subnet_name 最多只能提供一个；都不提供时使用私有子网。
    """
    # 组名按原样比较
    model_config = ConfigDict(str_strip_whitespace=False)

    subnets_to_use: Optional[SubnetType] = Field(default=None, description="按子网类型选择")
    subnet_name: Optional[str] = Field(default=None, description="按子网组名称选择")


# 结果类型 - 支持位置参数
class Success(BaseTypeModel):
    """成功结果模型"""
    value: Any = Field(description="成功返回的值")
    message: Optional[str] = Field(default=None, description="成功消息")

    def __init__(self, *args, **kwargs):
        """支持 Success(value)、Success(value, message) 以及关键字参数"""
        if len(args) == 1 and not kwargs:
            super().__init__(value=args[0])
        elif len(args) == 2 and not kwargs:
            super().__init__(value=args[0], message=args[1])
        elif len(args) == 0:
            super().__init__(**kwargs)
        else:
            raise TypeError(f"Invalid arguments for Success: args={args}, kwargs={kwargs}")

    @computed_field
    @property
    def is_success(self) -> bool:
        return True


class Failure(BaseTypeModel):
    """失败结果模型"""
    error: str = Field(description="错误信息")
    error_code: Optional[str] = Field(default=None, description="错误代码")
    details: Optional[Dict[str, Any]] = Field(default=None, description="错误详情")

    def __init__(self, *args, **kwargs):
        """支持 Failure(error)、Failure(error, error_code) 以及关键字参数"""
        if len(args) == 1 and not kwargs:
            super().__init__(error=args[0])
        elif len(args) == 2 and not kwargs:
            super().__init__(error=args[0], error_code=args[1])
        elif len(args) == 0:
            super().__init__(**kwargs)
        else:
            raise TypeError(f"Invalid arguments for Failure: args={args}, kwargs={kwargs}")

    @computed_field
    @property
    def is_success(self) -> bool:
        return False

    @classmethod
    def from_exception(cls, exc: Exception, error_code: Optional[str] = None) -> 'Failure':
        """从异常创建失败结果"""
        return cls(
            error=str(exc),
            error_code=error_code or exc.__class__.__name__,
            details={"exception_type": exc.__class__.__name__}
        )


Result = Union[Success, Failure]
