"""实体类型常量.

标准化层支持的实体种类,同时也是字段映射表的一级键.
"""

from typing import ClassVar


class EntityKind:
    """实体类型常量."""

    USER = "user"
    CONTENT_ITEM = "content_item"
    COMMENT = "comment"
    ORDER = "order"
    PRODUCT = "product"

    # 列表分页不是独立实体,但在字段映射表中占用一个键
    LIST_PAGE = "list_page"

    ALL: ClassVar[tuple[str, ...]] = (USER, CONTENT_ITEM, COMMENT, ORDER, PRODUCT)

    MAPPED: ClassVar[tuple[str, ...]] = (*ALL, LIST_PAGE)
