"""payload-normalizer - 异构上游载荷标准化.

把不同数据提供方返回的记录收敛为固定字段、固定类型的规范结构.
"""

from payload_normalizer.services.normalization import (
    NormalizerRegistry,
    map_valid,
    normalize_comment,
    normalize_content_item,
    normalize_order,
    normalize_product,
    normalize_user,
    reconcile_list,
    resolve_field,
    sanitize,
)
from payload_normalizer.settings import APP_VERSION

__version__ = APP_VERSION

__all__ = [
    "NormalizerRegistry",
    "__version__",
    "map_valid",
    "normalize_comment",
    "normalize_content_item",
    "normalize_order",
    "normalize_product",
    "normalize_user",
    "reconcile_list",
    "resolve_field",
    "sanitize",
]
