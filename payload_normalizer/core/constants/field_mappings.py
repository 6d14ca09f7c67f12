"""上游字段映射表.

规范字段 -> 候选源字段(按优先级排列).各数据提供方/版本的命名差异全部收敛在这里,
标准化逻辑本身不感知具体字段名.
表在导入时冻结,运行期只读,可通过 YAML 覆盖生成新的表(见 field_mapping_loader).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from payload_normalizer.core.constants.entity_kinds import EntityKind

CandidateKeys = tuple[str, ...]
EntityFieldMapping = Mapping[str, CandidateKeys]
FieldMappingSource = Mapping[str, EntityFieldMapping]


def freeze_field_mappings(source: FieldMappingSource) -> Mapping[str, Mapping[str, CandidateKeys]]:
    """将嵌套映射冻结为只读视图.

    Args:
        source: 实体 -> 规范字段 -> 候选键序列.

    Returns:
        两层 ``MappingProxyType``,候选键统一为 tuple.

    """
    return MappingProxyType(
        {
            entity: MappingProxyType({field: tuple(keys) for field, keys in fields.items()})
            for entity, fields in source.items()
        },
    )


_USER_FIELDS: dict[str, CandidateKeys] = {
    "uid": ("uid", "id", "user_id"),
    "nickname": ("nickname", "name", "user_name"),
    "avatar": ("avatar", "head_pic", "photo"),
    "sex": ("sex", "gender"),
    "age": ("age",),
    "phone": ("phone", "mobile"),
    "email": ("email",),
    "follow_count": ("follow_count", "follows"),
    "fans_count": ("fans_count", "followers"),
    "like_count": ("like_count", "likes"),
    "visitor_count": ("visitor_count", "visitors"),
    "is_verified": ("is_verified", "verified"),
    "vip_status": ("vip_status", "is_vip"),
    "about_me": ("about_me", "description", "bio"),
    "interest_tags": ("interest_tags", "tags"),
}

_CONTENT_ITEM_FIELDS: dict[str, CandidateKeys] = {
    "id": ("id",),
    "type": ("type",),
    "title": ("title",),
    "content": ("content", "text"),
    "images": ("images", "pics", "img"),
    "video": ("video", "video_url"),
    "audio": ("audio", "audio_url"),
    "user_info": ("user", "user_info"),
    "like_count": ("like_count", "likes"),
    "comment_count": ("comment_count", "comments"),
    "share_count": ("share_count", "shares"),
    "browse_count": ("browse_count", "views"),
    "is_like": ("is_like", "liked"),
    "is_follow": ("is_follow", "followed"),
    "is_collect": ("is_collect", "collected"),
    "create_time": ("create_time", "created_at"),
    "update_time": ("update_time", "updated_at"),
    "tags": ("tags",),
    "topic_info": ("topic_info", "topic"),
}

_COMMENT_FIELDS: dict[str, CandidateKeys] = {
    "id": ("id",),
    "content": ("content", "text"),
    "user_info": ("user", "user_info"),
    "like_count": ("like_count", "likes"),
    "is_like": ("is_like", "liked"),
    "create_time": ("create_time", "created_at"),
    "parent_id": ("parent_id", "pid"),
    "replies": ("replies", "children"),
}

_ORDER_FIELDS: dict[str, CandidateKeys] = {
    "id": ("id", "order_id"),
    "order_number": ("order_number", "order_sn"),
    "status": ("status", "order_status"),
    "status_text": ("status_text", "status_name"),
    "total_amount": ("total_amount", "pay_price", "price"),
    "pay_amount": ("pay_amount", "pay_price"),
    "create_time": ("create_time", "created_at"),
    "pay_time": ("pay_time", "paid_at"),
    "products": ("products", "items", "goods"),
}

_PRODUCT_FIELDS: dict[str, CandidateKeys] = {
    "id": ("id", "product_id"),
    "name": ("name", "title", "product_name"),
    "image": ("image", "pic", "img"),
    "images": ("images", "pics", "slider"),
    "price": ("price", "shop_price"),
    "original_price": ("original_price", "market_price"),
    "description": ("description", "info", "desc"),
    "sales_count": ("sales_count", "sales"),
    "stock": ("stock", "inventory"),
    "is_hot": ("is_hot", "hot"),
    "is_new": ("is_new", "new"),
    "tags": ("tags",),
}

_LIST_PAGE_FIELDS: dict[str, CandidateKeys] = {
    "envelope": ("data",),
    "list": ("list", "data", "items"),
    "current_page": ("page", "current_page"),
    "page_size": ("limit", "page_size", "per_page"),
    "total_count": ("total", "total_count", "count"),
}

DEFAULT_FIELD_MAPPINGS = freeze_field_mappings(
    {
        EntityKind.USER: _USER_FIELDS,
        EntityKind.CONTENT_ITEM: _CONTENT_ITEM_FIELDS,
        EntityKind.COMMENT: _COMMENT_FIELDS,
        EntityKind.ORDER: _ORDER_FIELDS,
        EntityKind.PRODUCT: _PRODUCT_FIELDS,
        EntityKind.LIST_PAGE: _LIST_PAGE_FIELDS,
    },
)

# 上游统一响应信封: {"status": 200, "msg": "...", "data": ...}
RESPONSE_STATUS_KEY = "status"
RESPONSE_MESSAGE_KEY = "msg"
RESPONSE_DATA_KEY = "data"
RESPONSE_SUCCESS_STATUS = 200
