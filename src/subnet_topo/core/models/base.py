"""基础模型类"""
from pydantic import BaseModel, ConfigDict


class BaseConfig(BaseModel):
    """基础模型类 - 所有拓扑模型的基类

    模型构造后不可变；嵌套的模型实例按原对象保存，不会被复制。
    标识、可用区和名称都是不透明的值，原样保存，不去除空白。
    """

    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        use_enum_values=True,  # 使用枚举值
        str_strip_whitespace=False,  # 值原样保存
        arbitrary_types_allowed=True,  # 依赖项可以是任意对象
        revalidate_instances='never',  # 保持子网对象身份
    )
