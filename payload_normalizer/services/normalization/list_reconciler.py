"""分页列表响应标准化.

不同提供方把页码、每页数量、总数放在不同的键下,列表本身也可能包在一层 ``data`` 信封里.
这里统一收敛为 CanonicalListPage.

已知限制:
- ``has_more`` 总是由提供方原始列表长度(过滤前)与每页数量推导,提供方显式给出的"是否还有更多"标记不会被读取.
- ``current_page``/``page_size`` 只做整数转换,不做下限保护,提供方返回 0 或负数时原样透出.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from payload_normalizer.core.constants.entity_kinds import EntityKind
from payload_normalizer.core.constants.pagination import (
    DEFAULT_CURRENT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TOTAL_COUNT,
)
from payload_normalizer.core.types.canonical import CanonicalListPage
from payload_normalizer.core.types.structures import ItemNormalizer
from payload_normalizer.services.normalization.batch_mapper import map_valid
from payload_normalizer.services.normalization.field_resolver import FieldResolver, default_resolver
from payload_normalizer.utils.payload_converters import as_count, as_int, is_record

ItemT = TypeVar("ItemT")

_STRING_LIKE_TYPES = (str, bytes, bytearray)


def empty_list_page() -> CanonicalListPage:
    """返回零值分页结构(每次返回新对象)."""
    return {
        "list": [],
        "current_page": DEFAULT_CURRENT_PAGE,
        "page_size": DEFAULT_PAGE_SIZE,
        "total_count": DEFAULT_TOTAL_COUNT,
        "has_more": False,
    }


def reconcile_list(
    raw_response: object,
    item_normalizer: ItemNormalizer[ItemT] | None = None,
    *,
    resolver: FieldResolver | None = None,
) -> CanonicalListPage:
    """标准化分页列表响应.

    Args:
        raw_response: 原始响应数据.
        item_normalizer: 可选的列表项标准化函数;提供时经 ``map_valid`` 逐项转换,
            否则列表项原样透传.
        resolver: 字段解析器,缺省使用内置映射表.

    Returns:
        CanonicalListPage.输入不是映射时返回零值分页结构.

    Example:
        >>> reconcile_list({"data": {"list": [1, 2, 3, 4, 5], "limit": 5}})["has_more"]
        True

    """
    if not is_record(raw_response):
        return empty_list_page()

    pick = (resolver or default_resolver).for_entity(EntityKind.LIST_PAGE)

    # 只拆一层信封,且信封必须是映射
    envelope = pick(raw_response, "envelope", None)
    data = envelope if is_record(envelope) else raw_response

    raw_items = pick(data, "list", None)
    if not isinstance(raw_items, Sequence) or isinstance(raw_items, _STRING_LIKE_TYPES):
        raw_items = []

    items = map_valid(raw_items, item_normalizer) if item_normalizer is not None else list(raw_items)
    page_size = as_int(pick(data, "page_size", DEFAULT_PAGE_SIZE), default=DEFAULT_PAGE_SIZE)

    return {
        "list": items,
        "current_page": as_int(pick(data, "current_page", DEFAULT_CURRENT_PAGE), default=DEFAULT_CURRENT_PAGE),
        "page_size": page_size,
        "total_count": as_count(pick(data, "total_count", DEFAULT_TOTAL_COUNT)),
        "has_more": len(raw_items) >= page_size,
    }
