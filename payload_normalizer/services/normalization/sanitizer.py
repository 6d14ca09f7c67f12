"""结构清理工具.

展示前的清理步骤: 去掉映射中的 None 与空字符串,去掉序列中的 None,
递归处理嵌套映射并丢弃清理后为空的嵌套映射.
与字段解析的"存在"判定不同,这里空字符串也视为无值.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

_STRING_LIKE_TYPES = (str, bytes, bytearray)


def sanitize(value: object, schema_hint: Mapping[str, object] | None = None) -> object:
    """清理任意嵌套结构,返回新对象,不修改输入.

    Args:
        value: 待清理的数据.
        schema_hint: 可选的字段白名单.提供映射时,只保留其中声明的键;
            键对应的值若仍为映射,则作为该嵌套记录的白名单继续向下传递.

    Returns:
        - None 输入返回 None;
        - 标量原样返回;
        - 序列返回去掉 None 元素后的新列表(浅层,不处理元素内部);
        - 映射返回只含有效值的新字典.

    Example:
        >>> sanitize({"a": 1, "b": "", "c": None, "d": {"e": None}, "f": [1, None]})
        {'a': 1, 'f': [1]}

    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return _sanitize_mapping(value, schema_hint)
    if _is_sequence(value):
        return _drop_none(value)
    return value


def _sanitize_mapping(record: Mapping[object, object], schema_hint: Mapping[str, object] | None) -> dict[object, object]:
    cleaned: dict[object, object] = {}
    for key, item in record.items():
        if item is None or (isinstance(item, str) and not item):
            continue
        if schema_hint is not None and key not in schema_hint:
            continue

        if isinstance(item, Mapping):
            nested_hint = schema_hint.get(key) if schema_hint is not None else None
            nested = _sanitize_mapping(item, nested_hint if isinstance(nested_hint, Mapping) else None)
            if nested:
                cleaned[key] = nested
        elif _is_sequence(item):
            cleaned[key] = _drop_none(item)
        else:
            cleaned[key] = item
    return cleaned


def _drop_none(items: Sequence[object]) -> list[object]:
    return [item for item in items if item is not None]


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES)
