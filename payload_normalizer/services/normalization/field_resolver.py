"""字段解析引擎.

按候选键优先级从原始记录中取值: 返回第一个"存在"的值,否则返回默认值.
"存在"指键存在且值不为 None,与真值判断无关: 0、False、"" 都是合法取值,
由调用方在之后自行做类型转换.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TypeVar

from payload_normalizer.core.constants.field_mappings import (
    DEFAULT_FIELD_MAPPINGS,
    CandidateKeys,
    FieldMappingSource,
    freeze_field_mappings,
)

DefaultT = TypeVar("DefaultT")

FieldPicker = Callable[[object, str, object], object]


def resolve_field(record: object, candidate_keys: Iterable[str], default: DefaultT) -> object | DefaultT:
    """按优先级解析单个字段.

    Args:
        record: 原始记录,非映射类型视为无数据.
        candidate_keys: 按优先级排列的候选源字段名.
        default: 所有候选键都缺失(或值为 None)时返回的默认值.

    Returns:
        第一个存在且非 None 的值,或 ``default``.

    Example:
        >>> resolve_field({"id": 5, "uid": 7}, ("uid", "id"), 0)
        7
        >>> resolve_field({"age": 0}, ("age",), 18)
        0

    """
    if not isinstance(record, Mapping):
        return default
    for key in candidate_keys:
        value = record.get(key)
        if value is not None:
            return value
    return default


@dataclass(frozen=True)
class FieldMappingTable:
    """只读字段映射表: 实体 -> 规范字段 -> 候选键序列."""

    mappings: Mapping[str, Mapping[str, CandidateKeys]] = field(default_factory=lambda: DEFAULT_FIELD_MAPPINGS)

    @property
    def entities(self) -> tuple[str, ...]:
        """返回表中声明的实体类型."""
        return tuple(self.mappings)

    def fields(self, entity: str) -> tuple[str, ...]:
        """返回实体声明的规范字段名,未知实体返回空元组."""
        return tuple(self.mappings.get(entity, {}))

    def candidates(self, entity: str, field_name: str) -> CandidateKeys:
        """返回规范字段的候选键,未声明时返回空元组."""
        return self.mappings.get(entity, {}).get(field_name, ())

    def merged_with(self, overrides: FieldMappingSource) -> FieldMappingTable:
        """叠加覆盖项,返回新表.

        覆盖以字段为粒度整体替换候选键列表,未覆盖的字段保持原值.

        Args:
            overrides: 实体 -> 规范字段 -> 候选键序列.

        Returns:
            新的 FieldMappingTable,当前实例不变.

        """
        merged: dict[str, dict[str, CandidateKeys]] = {
            entity: dict(fields) for entity, fields in self.mappings.items()
        }
        for entity, fields in overrides.items():
            target = merged.setdefault(entity, {})
            for field_name, keys in fields.items():
                target[field_name] = tuple(keys)
        return FieldMappingTable(freeze_field_mappings(merged))


class FieldResolver:
    """绑定字段映射表的解析器.

    映射表在构造时注入且只读,可以安全地在多个线程间共享同一实例.
    """

    def __init__(self, table: FieldMappingTable | None = None) -> None:
        self._table = table or FieldMappingTable()

    @property
    def table(self) -> FieldMappingTable:
        """当前生效的字段映射表."""
        return self._table

    def resolve(self, record: object, entity: str, field_name: str, default: DefaultT) -> object | DefaultT:
        """按映射表中声明的候选键解析字段."""
        return resolve_field(record, self._table.candidates(entity, field_name), default)

    def for_entity(self, entity: str) -> FieldPicker:
        """返回绑定实体类型的取值函数 ``pick(record, field_name, default)``."""
        mapping = self._table.mappings.get(entity, {})

        def pick(record: object, field_name: str, default: DefaultT) -> object | DefaultT:
            return resolve_field(record, mapping.get(field_name, ()), default)

        return pick

    def __repr__(self) -> str:
        return f"FieldResolver(entities={self._table.entities!r})"


default_resolver = FieldResolver()
