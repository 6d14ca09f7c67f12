"""载荷标准化服务.

主要组成:
- field_resolver: 按候选键优先级取值的字段解析引擎
- entity_normalizers: 用户/内容/评论/订单/商品标准化
- list_reconciler: 分页列表响应标准化
- sanitizer: 递归结构清理
- batch_mapper: 批量过滤-转换-过滤
- registry: 按实体类型分派的统一入口
"""

from .batch_mapper import map_valid
from .entity_normalizers import (
    EntityNormalizers,
    normalize_comment,
    normalize_content_item,
    normalize_order,
    normalize_product,
    normalize_user,
)
from .field_mapping_loader import FieldMappingLoader, build_default_resolver
from .field_resolver import FieldMappingTable, FieldResolver, default_resolver, resolve_field
from .list_reconciler import empty_list_page, reconcile_list
from .registry import NormalizerRegistry, default_registry
from .response_envelope import extract_response_message, is_success_response, unwrap_response_data
from .sanitizer import sanitize

__all__ = [
    "EntityNormalizers",
    "FieldMappingLoader",
    "FieldMappingTable",
    "FieldResolver",
    "NormalizerRegistry",
    "build_default_resolver",
    "default_registry",
    "default_resolver",
    "empty_list_page",
    "extract_response_message",
    "is_success_response",
    "map_valid",
    "normalize_comment",
    "normalize_content_item",
    "normalize_order",
    "normalize_product",
    "normalize_user",
    "reconcile_list",
    "resolve_field",
    "sanitize",
    "unwrap_response_data",
]
