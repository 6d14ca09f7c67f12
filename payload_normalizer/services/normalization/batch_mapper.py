"""批量转换工具."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from payload_normalizer.core.types.structures import ItemNormalizer
from payload_normalizer.utils.payload_converters import is_record

ItemT = TypeVar("ItemT")

_STRING_LIKE_TYPES = (str, bytes, bytearray)


def map_valid(raw_sequence: object, item_normalizer: ItemNormalizer[ItemT]) -> list[ItemT]:
    """对序列逐项应用单条标准化函数.

    先过滤掉非映射元素,再逐项转换,最后丢弃转换结果为 None 的项,顺序保持不变.

    Args:
        raw_sequence: 原始列表数据,非序列(含字符串)返回空列表.
        item_normalizer: 单条标准化函数,签名为 ``(RawRecord) -> T | None``.

    Returns:
        转换后的列表.

    Example:
        >>> map_valid([{}, None, 42, {"id": 1}], lambda item: item or None)
        [{'id': 1}]

    """
    if not isinstance(raw_sequence, Sequence) or isinstance(raw_sequence, _STRING_LIKE_TYPES):
        return []
    normalized = (item_normalizer(item) for item in raw_sequence if is_record(item))
    return [item for item in normalized if item is not None]
