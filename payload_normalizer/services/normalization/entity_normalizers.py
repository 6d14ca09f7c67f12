"""实体标准化函数.

把各数据提供方形态各异的记录映射为固定字段的规范结构:
每个字段通过一次字段解析取值,再经过 payload_converters 做类型收敛.
输入不是映射时返回 None;字段缺失或无法解析时取默认值,从不抛异常.
"""

from __future__ import annotations

from payload_normalizer.core.constants.entity_kinds import EntityKind
from payload_normalizer.core.types.canonical import (
    CanonicalComment,
    CanonicalContentItem,
    CanonicalOrder,
    CanonicalProduct,
    CanonicalUser,
)
from payload_normalizer.services.normalization.field_resolver import FieldResolver, default_resolver
from payload_normalizer.utils.payload_converters import (
    as_bool,
    as_count,
    as_float,
    as_identifier,
    as_int,
    as_list,
    as_str,
    ensure_mapping,
    is_record,
)


class EntityNormalizers:
    """绑定字段解析器的一组实体标准化函数.

    实例无可变状态,可在多线程间共享.嵌套的作者信息每次调用都重新生成,
    不在调用之间缓存或共享.

    Example:
        >>> normalizers = EntityNormalizers()
        >>> normalizers.user({"id": 5, "uid": 7})["uid"]
        7

    """

    def __init__(self, resolver: FieldResolver | None = None) -> None:
        self._resolver = resolver or default_resolver
        self._user_field = self._resolver.for_entity(EntityKind.USER)
        self._content_field = self._resolver.for_entity(EntityKind.CONTENT_ITEM)
        self._comment_field = self._resolver.for_entity(EntityKind.COMMENT)
        self._order_field = self._resolver.for_entity(EntityKind.ORDER)
        self._product_field = self._resolver.for_entity(EntityKind.PRODUCT)

    @property
    def resolver(self) -> FieldResolver:
        """当前使用的字段解析器."""
        return self._resolver

    def user(self, raw: object) -> CanonicalUser | None:
        """标准化用户信息.

        Args:
            raw: 原始用户数据.

        Returns:
            CanonicalUser,输入不是映射时返回 None.

        """
        if not is_record(raw):
            return None
        pick = self._user_field
        return {
            "uid": as_identifier(pick(raw, "uid", 0)),
            "nickname": as_str(pick(raw, "nickname", "")),
            "avatar": as_str(pick(raw, "avatar", "")),
            "sex": as_int(pick(raw, "sex", 0)),
            "age": as_count(pick(raw, "age", 0)),
            "phone": as_str(pick(raw, "phone", "")),
            "email": as_str(pick(raw, "email", "")),
            "follow_count": as_count(pick(raw, "follow_count", 0)),
            "fans_count": as_count(pick(raw, "fans_count", 0)),
            "like_count": as_count(pick(raw, "like_count", 0)),
            "visitor_count": as_count(pick(raw, "visitor_count", 0)),
            "is_verified": as_bool(pick(raw, "is_verified", False)),
            "vip_status": as_int(pick(raw, "vip_status", 0)),
            "about_me": as_str(pick(raw, "about_me", "")),
            "interest_tags": as_list(pick(raw, "interest_tags", [])),
        }

    def content_item(self, raw: object) -> CanonicalContentItem | None:
        """标准化笔记/动态数据.

        作者信息递归调用用户标准化;作者缺失或不是映射时为 None,
        不会生成字段残缺的用户.时间字段保持原样,不做格式化.
        """
        if not is_record(raw):
            return None
        pick = self._content_field
        return {
            "id": as_identifier(pick(raw, "id", 0)),
            "type": as_int(pick(raw, "type", 1), default=1),
            "title": as_str(pick(raw, "title", "")),
            "content": as_str(pick(raw, "content", "")),
            "images": as_list(pick(raw, "images", [])),
            "video": as_str(pick(raw, "video", "")),
            "audio": as_str(pick(raw, "audio", "")),
            "user_info": self.user(pick(raw, "user_info", None)),
            "like_count": as_count(pick(raw, "like_count", 0)),
            "comment_count": as_count(pick(raw, "comment_count", 0)),
            "share_count": as_count(pick(raw, "share_count", 0)),
            "browse_count": as_count(pick(raw, "browse_count", 0)),
            "is_like": as_bool(pick(raw, "is_like", False)),
            "is_follow": as_bool(pick(raw, "is_follow", False)),
            "is_collect": as_bool(pick(raw, "is_collect", False)),
            "create_time": as_str(pick(raw, "create_time", "")),
            "update_time": as_str(pick(raw, "update_time", "")),
            "tags": as_list(pick(raw, "tags", [])),
            "topic_info": ensure_mapping(pick(raw, "topic_info", None)),
        }

    def comment(self, raw: object) -> CanonicalComment | None:
        """标准化评论数据.replies 原样透传,不做递归标准化."""
        if not is_record(raw):
            return None
        pick = self._comment_field
        return {
            "id": as_identifier(pick(raw, "id", 0)),
            "content": as_str(pick(raw, "content", "")),
            "user_info": self.user(pick(raw, "user_info", None)),
            "like_count": as_count(pick(raw, "like_count", 0)),
            "is_like": as_bool(pick(raw, "is_like", False)),
            "create_time": as_str(pick(raw, "create_time", "")),
            "parent_id": as_identifier(pick(raw, "parent_id", 0)),
            "replies": _passthrough_list(pick(raw, "replies", [])),
        }

    def order(self, raw: object) -> CanonicalOrder | None:
        """标准化订单数据.金额字段统一为有限浮点数,无法解析时为 0."""
        if not is_record(raw):
            return None
        pick = self._order_field
        return {
            "id": as_identifier(pick(raw, "id", ""), default=""),
            "order_number": as_str(pick(raw, "order_number", "")),
            "status": as_int(pick(raw, "status", 0)),
            "status_text": as_str(pick(raw, "status_text", "")),
            "total_amount": as_float(pick(raw, "total_amount", 0.0)),
            "pay_amount": as_float(pick(raw, "pay_amount", 0.0)),
            "create_time": as_str(pick(raw, "create_time", "")),
            "pay_time": as_str(pick(raw, "pay_time", "")),
            "products": _passthrough_list(pick(raw, "products", [])),
        }

    def product(self, raw: object) -> CanonicalProduct | None:
        """标准化商品数据."""
        if not is_record(raw):
            return None
        pick = self._product_field
        return {
            "id": as_identifier(pick(raw, "id", 0)),
            "name": as_str(pick(raw, "name", "")),
            "image": as_str(pick(raw, "image", "")),
            "images": as_list(pick(raw, "images", [])),
            "price": as_float(pick(raw, "price", 0.0)),
            "original_price": as_float(pick(raw, "original_price", 0.0)),
            "description": as_str(pick(raw, "description", "")),
            "sales_count": as_count(pick(raw, "sales_count", 0)),
            "stock": as_count(pick(raw, "stock", 0)),
            "is_hot": as_bool(pick(raw, "is_hot", False)),
            "is_new": as_bool(pick(raw, "is_new", False)),
            "tags": as_list(pick(raw, "tags", [])),
        }


def _passthrough_list(value: object) -> list[object]:
    # 列表原样返回(同一对象),其余形态收敛为空列表
    if isinstance(value, list):
        return value
    return []


default_normalizers = EntityNormalizers()

normalize_user = default_normalizers.user
normalize_content_item = default_normalizers.content_item
normalize_comment = default_normalizers.comment
normalize_order = default_normalizers.order
normalize_product = default_normalizers.product
