"""
跨部署输出
生产方发布导出值，使用方拿到的是导入引用，部署时再按输出表解析为字面值
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from .errors import UnresolvedImportValue
from .models.exported import ExportedTopology

IMPORT_TOKEN_PATTERN = re.compile(r"^\$\{ImportValue:(?P<name>[^{}]+)\}$")


def export_name(scope: str, logical_id: str) -> str:
    """导出值的全局名称"""
    return f"{scope}:{logical_id}"


def import_value(name: str) -> str:
    """生成指向导出值的导入引用"""
    return f"${{ImportValue:{name}}}"


def is_import_token(value: Any) -> bool:
    return isinstance(value, str) and IMPORT_TOKEN_PATTERN.match(value) is not None


def _resolve(value: Any, outputs: Mapping[str, str]) -> Any:
    if isinstance(value, list):
        return [_resolve(item, outputs) for item in value]
    if not is_import_token(value):
        return value
    name = IMPORT_TOKEN_PATTERN.match(value).group("name")
    if name not in outputs:
        raise UnresolvedImportValue(value)
    return outputs[name]


def resolve_import_values(bag: ExportedTopology, outputs: Mapping[str, str]) -> ExportedTopology:
    """把导出值中的导入引用替换为输出表里的字面值

    Raises:
        UnresolvedImportValue: 输出表中没有引用的导出名称
    """
    values = bag.to_values()
    return ExportedTopology.from_values(
        {key: _resolve(value, outputs) for key, value in values.items()}
    )
