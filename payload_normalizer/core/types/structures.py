"""通用结构化数据类型别名.

统一上游载荷与规范输出的类型声明,避免在各标准化模块中重复定义.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import TypeAlias, TypeVar

ScalarValue: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
JsonDict: TypeAlias = dict[str, JsonValue]
RawRecord: TypeAlias = Mapping[str, object]
Identifier: TypeAlias = int | str
StructlogEventDict: TypeAlias = MutableMapping[str, JsonValue]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]

T = TypeVar("T")
ItemNormalizer: TypeAlias = Callable[[RawRecord], T | None]


__all__ = [
    "Identifier",
    "ItemNormalizer",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "RawRecord",
    "ScalarValue",
    "StructlogEventDict",
    "T",
]
