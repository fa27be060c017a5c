from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .defaults import (
    CONTEXT_FILE_DEFAULT,
    ENV_PREFIX,
    JSON_LOGS_DEFAULT,
    OUTPUT_FORMAT_DEFAULT,
    OUTPUT_FORMATS,
    VERBOSE_DEFAULT,
)


class AppSettings(BaseSettings):
    """全局应用设置（可由环境变量/配置文件覆盖）"""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # 全局
    verbose: bool = Field(default=VERBOSE_DEFAULT, description="详细日志输出")
    json_logs: bool = Field(default=JSON_LOGS_DEFAULT, description="以 JSON 格式输出日志")
    output_format: str = Field(default=OUTPUT_FORMAT_DEFAULT, description="导出值的输出格式 (json/yaml)")

    # 导出
    export_scope: Optional[str] = Field(default=None, description="导出值的作用域，设置后 vpcId 以导入引用形式导出")

    # 上下文查询
    context_file: Path = Field(default=Path(CONTEXT_FILE_DEFAULT), description="上下文文件路径")
    account: Optional[str] = Field(default=None, description="部署账号")
    region: Optional[str] = Field(default=None, description="部署区域")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """验证输出格式"""
        v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"无效的输出格式: {v}。支持: {', '.join(OUTPUT_FORMATS)}")
        return v


__all__ = ["AppSettings"]
