"""规范输出结构.

每个标准化函数承诺的固定字段集合.字段总是存在,缺失来源时取文档化的默认值.
"""

from __future__ import annotations

from typing import Generic, TypedDict, TypeVar

from payload_normalizer.core.types.structures import Identifier, JsonDict, JsonValue

ItemT = TypeVar("ItemT")


class CanonicalUser(TypedDict):
    """标准化用户资料."""

    uid: Identifier
    nickname: str
    avatar: str
    sex: int
    age: int
    phone: str
    email: str
    follow_count: int
    fans_count: int
    like_count: int
    visitor_count: int
    is_verified: bool
    vip_status: int
    about_me: str
    interest_tags: list[JsonValue]


class CanonicalContentItem(TypedDict):
    """标准化内容条目(笔记/动态)."""

    id: Identifier
    type: int
    title: str
    content: str
    images: list[JsonValue]
    video: str
    audio: str
    user_info: CanonicalUser | None
    like_count: int
    comment_count: int
    share_count: int
    browse_count: int
    is_like: bool
    is_follow: bool
    is_collect: bool
    create_time: str
    update_time: str
    tags: list[JsonValue]
    topic_info: JsonDict | None


class CanonicalComment(TypedDict):
    """标准化评论.replies 原样透传,不做递归标准化."""

    id: Identifier
    content: str
    user_info: CanonicalUser | None
    like_count: int
    is_like: bool
    create_time: str
    parent_id: Identifier
    replies: list[JsonValue]


class CanonicalOrder(TypedDict):
    """标准化订单."""

    id: Identifier
    order_number: str
    status: int
    status_text: str
    total_amount: float
    pay_amount: float
    create_time: str
    pay_time: str
    products: list[JsonValue]


class CanonicalProduct(TypedDict):
    """标准化商品."""

    id: Identifier
    name: str
    image: str
    images: list[JsonValue]
    price: float
    original_price: float
    description: str
    sales_count: int
    stock: int
    is_hot: bool
    is_new: bool
    tags: list[JsonValue]


class CanonicalListPage(TypedDict, Generic[ItemT]):
    """标准化分页列表."""

    list: list[ItemT]
    current_page: int
    page_size: int
    total_count: int
    has_more: bool


__all__ = [
    "CanonicalComment",
    "CanonicalContentItem",
    "CanonicalListPage",
    "CanonicalOrder",
    "CanonicalProduct",
    "CanonicalUser",
]
