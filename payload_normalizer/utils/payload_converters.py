"""上游载荷字段类型转换工具.

提供稳定的转换函数,将任意来源的原始值映射为具体的 str/int/float/bool/list 类型.
所有函数都是全函数: 无法解析时返回默认值,不抛异常,也不会产生 NaN/inf.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

_STRING_LIKE_TYPES = (str, bytes, bytearray)
_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def _parse_number(value: object) -> float | int | None:
    """解析数值,无法解析或非有限值返回 None."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (bytes, bytearray)):
        value = value.decode(errors="replace")
    if not isinstance(value, str):
        return None

    stripped = value.strip()
    if not stripped:
        return None
    try:
        return int(stripped, 10)
    except ValueError:
        pass
    try:
        parsed = float(stripped)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def as_int(value: object, *, default: int = 0) -> int:
    """转换为整数.

    浮点数按截断取整,数字字符串(含小数)同样处理.

    Args:
        value: 待转换的原始值.
        default: 无法转换时返回的默认值.

    Returns:
        转换后的整数.

    """
    parsed = _parse_number(value)
    if parsed is None:
        return default
    return int(parsed)


def as_float(value: object, *, default: float = 0.0) -> float:
    """转换为有限浮点数.

    Args:
        value: 待转换的原始值.
        default: 无法转换时返回的默认值.

    Returns:
        转换后的浮点数,保证不为 NaN/inf.

    """
    parsed = _parse_number(value)
    if parsed is None:
        return default
    try:
        return float(parsed)
    except OverflowError:
        return default


def as_count(value: object) -> int:
    """转换为非负计数."""
    return max(as_int(value, default=0), 0)


def as_str(value: object, *, default: str = "") -> str:
    """转换为字符串.

    数字按 ``str()`` 输出;布尔值与容器类型视为无法转换.

    Args:
        value: 待转换的原始值.
        default: 当值为空或无法转换时的默认字符串.

    Returns:
        转换后的字符串.

    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return value.decode(errors="replace")
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # 超过 int 转字符串的位数上限
            return default
    if isinstance(value, float):
        return str(value) if math.isfinite(value) else default
    return default


def as_bool(value: object, *, default: bool = False) -> bool:
    """转换为布尔值."""
    if value is None:
        return default

    result = default
    if isinstance(value, bool):
        result = value
    elif isinstance(value, float) and math.isnan(value):
        result = default
    elif isinstance(value, (int, float)):
        result = bool(value)
    elif isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            result = True
        elif normalized in _FALSE_STRINGS:
            result = False
    return result


def as_list(value: object) -> list[object]:
    """转换为列表.

    序列复制为新列表;单个非空字符串包装为单元素列表;其余返回空列表.
    """
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, Sequence) and not isinstance(value, _STRING_LIKE_TYPES):
        return list(value)
    return []


def as_identifier(value: object, *, default: int | str = 0) -> int | str:
    """校验标识符,仅接受 int/str(布尔值除外)."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, str)):
        return value
    return default


def is_record(value: object) -> bool:
    """判断值是否为记录(映射)类型."""
    return isinstance(value, Mapping)


def ensure_mapping(value: object) -> dict[str, object] | None:
    """确保值为映射类型,返回浅拷贝;否则返回 None."""
    if isinstance(value, Mapping):
        return dict(value)
    return None
