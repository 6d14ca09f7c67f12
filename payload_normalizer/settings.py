"""payload-normalizer - 统一配置读取与校验.

目标:
- 将环境变量读取、默认值、校验集中到单一入口.
- 日志与字段映射覆盖文件只消费 Settings,不直接读取环境变量.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
- 配置是本项目唯一"大声失败"的地方: 非法取值在加载时直接抛出 ValidationError.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from payload_normalizer.core.constants.system_constants import LogLevel

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_ENVIRONMENT = "development"
DEFAULT_APP_NAME = "payload-normalizer"
APP_VERSION = "0.3.0"
DEFAULT_LOG_LEVEL = LogLevel.INFO.value


class Settings(BaseSettings):
    """运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT, validation_alias="NORMALIZER_ENV")
    app_name: str = Field(default=DEFAULT_APP_NAME, validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")
    log_json: bool = Field(default=False, validation_alias="LOG_JSON")

    # 为空时使用内置字段映射表
    field_mappings_path: Path | None = Field(default=None, validation_alias="FIELD_MAPPINGS_PATH")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        normalized = value.strip().upper()
        allowed = {level.value for level in LogLevel}
        if normalized not in allowed:
            msg = f"LOG_LEVEL must be one of {sorted(allowed)}"
            raise ValueError(msg)
        return normalized

    @field_validator("environment")
    @classmethod
    def _normalize_environment(cls, value: str) -> str:
        return value.lower()

    @property
    def is_production(self) -> bool:
        """当前是否为生产环境."""
        return self.environment == "production"

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()
