"""
值文件读写
使用anyio进行异步文件操作，按后缀选择 YAML 或 JSON
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml
from anyio import Path as AsyncPath

from .core.types import Success, Failure, Result
from .core.models import ExportedTopology, NetworkTopology, TopologyDescription
from .utils.logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def is_yaml_path(path: Path) -> bool:
    return Path(path).suffix.lower() in YAML_SUFFIXES


def dump_values(values: Mapping[str, Any], fmt: str = "json") -> str:
    """把值字典渲染为文本"""
    if fmt == "yaml":
        return yaml.safe_dump(dict(values), sort_keys=False, allow_unicode=True)
    return json.dumps(dict(values), indent=2, ensure_ascii=False) + "\n"


def parse_values(content: str, yaml_format: bool) -> Dict[str, Any]:
    """解析值文本，顶层必须是映射"""
    data = yaml.safe_load(content) if yaml_format else json.loads(content)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"顶层必须是映射，实际为 {type(data).__name__}")
    return data


async def read_values(path: Path) -> Dict[str, Any]:
    """读取值文件"""
    content = await AsyncPath(path).read_text(encoding="utf-8")
    values = parse_values(content, is_yaml_path(path))
    logger.debug("values_read", path=str(path), keys=len(values))
    return values


async def write_values(path: Path, values: Mapping[str, Any]) -> Result:
    """写入值文件，格式由后缀决定"""
    try:
        target = AsyncPath(path)
        await target.parent.mkdir(parents=True, exist_ok=True)
        fmt = "yaml" if is_yaml_path(path) else "json"
        await target.write_text(dump_values(values, fmt), encoding="utf-8")
        logger.info("values_written", path=str(path), format=fmt)
        return Success(Path(path), f"已写入 {path}")
    except OSError as e:
        logger.error("values_write_failed", path=str(path), error=str(e))
        return Failure.from_exception(e)


async def load_exported(path: Path) -> ExportedTopology:
    """读取导出值文件"""
    return ExportedTopology.from_values(await read_values(path))


async def load_topology(path: Path) -> NetworkTopology:
    """读取拓扑描述文件并直接构造网络拓扑"""
    description = TopologyDescription.model_validate(await read_values(path))
    return description.build()
