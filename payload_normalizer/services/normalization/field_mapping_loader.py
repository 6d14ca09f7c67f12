"""字段映射覆盖配置的加载工具.

YAML 结构::

    field_mappings:
      user:
        uid: [member_id, uid, id]
      list_page:
        page_size: [size, limit]

覆盖以字段为粒度替换内置候选键列表,校验在读取入口完成.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import yaml

from payload_normalizer.core.constants.field_mappings import CandidateKeys
from payload_normalizer.core.constants.system_constants import ErrorMessages
from payload_normalizer.errors import ConfigurationError
from payload_normalizer.services.normalization.field_resolver import FieldMappingTable, FieldResolver
from payload_normalizer.utils.structlog_config import get_normalization_logger

if TYPE_CHECKING:
    from payload_normalizer.settings import Settings

logger = get_normalization_logger()

_ROOT_KEY = "field_mappings"


class FieldMappingLoader:
    """负责加载并校验字段映射覆盖配置."""

    def __init__(self, config_path: str | Path, base: FieldMappingTable | None = None) -> None:
        """初始化加载器并立即读取配置.

        Args:
            config_path: YAML 配置文件路径.
            base: 被覆盖的基础映射表,缺省为内置表.

        Raises:
            ConfigurationError: 文件不存在或结构不合法.

        """
        self._config_path = Path(config_path)
        self._base = base or FieldMappingTable()
        self._table = self._base
        self.reload()

    @property
    def config_path(self) -> Path:
        """返回当前生效的配置文件路径."""
        return self._config_path

    @property
    def table(self) -> FieldMappingTable:
        """返回叠加覆盖后的映射表."""
        return self._table

    def reload(self) -> FieldMappingTable:
        """从磁盘重新加载覆盖配置.

        解析成功后整体替换为新的只读表,失败时保留旧表并抛出异常.

        Returns:
            FieldMappingTable: 新生效的映射表.

        Raises:
            ConfigurationError: 文件不存在、YAML 解析失败或结构不合法.

        """
        if not self._config_path.exists():
            msg = ErrorMessages.FIELD_MAPPING_FILE_NOT_FOUND.format(path=self._config_path)
            raise ConfigurationError(msg, extra={"path": str(self._config_path)})

        try:
            with self._config_path.open(encoding="utf-8") as buffer:
                raw_config = yaml.safe_load(buffer) or {}
        except yaml.YAMLError as exc:
            logger.exception("解析字段映射配置失败", path=str(self._config_path), error=str(exc))
            msg = f"{ErrorMessages.FIELD_MAPPING_INVALID}: {exc}"
            raise ConfigurationError(msg, extra={"path": str(self._config_path)}) from exc

        overrides = self._validate(raw_config)
        self._table = self._base.merged_with(overrides)
        logger.info(
            "field_mapping_config_loaded",
            path=str(self._config_path),
            entities=sorted(overrides),
            field_count=sum(len(fields) for fields in overrides.values()),
        )
        return self._table

    def _validate(self, raw_config: object) -> dict[str, dict[str, CandidateKeys]]:
        """校验并规范化覆盖配置.

        Args:
            raw_config: ``yaml.safe_load`` 的结果.

        Returns:
            实体 -> 字段 -> 去空白后的候选键元组.

        Raises:
            ConfigurationError: 结构不合法或引用了未知实体/字段.

        """
        if not isinstance(raw_config, Mapping):
            self._fail("配置根节点必须是映射")
        section = raw_config.get(_ROOT_KEY) or {}
        if not isinstance(section, Mapping):
            self._fail(f"{_ROOT_KEY} 必须是映射")

        normalized: dict[str, dict[str, CandidateKeys]] = {}
        for entity, fields in section.items():
            if entity not in self._base.entities:
                self._fail(f"未知实体类型: {entity}")
            if not isinstance(fields, Mapping):
                self._fail(f"{entity} 的字段配置必须是映射")

            known_fields = self._base.fields(entity)
            entity_overrides: dict[str, CandidateKeys] = {}
            for field_name, keys in fields.items():
                if field_name not in known_fields:
                    self._fail(f"{entity} 未声明字段: {field_name}")
                entity_overrides[field_name] = self._normalize_keys(entity, field_name, keys)
            normalized[entity] = entity_overrides
        return normalized

    def _normalize_keys(self, entity: str, field_name: str, keys: object) -> CandidateKeys:
        if isinstance(keys, str):
            keys = [keys]
        if not isinstance(keys, list):
            self._fail(f"{entity}.{field_name} 的候选键必须是列表")
        cleaned = tuple(key.strip() for key in keys if isinstance(key, str) and key.strip())
        if not cleaned:
            self._fail(f"{entity}.{field_name} 至少需要一个有效候选键")
        return cleaned

    def _fail(self, reason: str) -> NoReturn:
        msg = f"{ErrorMessages.FIELD_MAPPING_INVALID}: {reason}"
        raise ConfigurationError(msg, extra={"path": str(self._config_path)})


def build_default_resolver(settings: Settings | None = None) -> FieldResolver:
    """构建默认解析器,配置了覆盖文件时叠加覆盖.

    Args:
        settings: 运行时设置,可选.

    Returns:
        FieldResolver: 绑定最终映射表的解析器.

    """
    if settings is None or settings.field_mappings_path is None:
        return FieldResolver()
    loader = FieldMappingLoader(settings.field_mappings_path)
    return FieldResolver(loader.table)
