"""按实体类型索引的标准化入口.

调用方(展示层等)只需要给出实体类型与原始载荷,由注册表分派到对应的标准化函数.
未注册的实体类型属于调用方误用,抛出 ValidationError;载荷本身的畸形永远只降级为默认值.
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import TYPE_CHECKING

from payload_normalizer.core.constants.entity_kinds import EntityKind
from payload_normalizer.core.constants.system_constants import ErrorMessages
from payload_normalizer.errors import ValidationError
from payload_normalizer.services.normalization.batch_mapper import map_valid
from payload_normalizer.services.normalization.entity_normalizers import EntityNormalizers
from payload_normalizer.services.normalization.field_mapping_loader import build_default_resolver
from payload_normalizer.services.normalization.list_reconciler import reconcile_list
from payload_normalizer.utils.structlog_config import configure_logging, get_normalization_logger, log_debug

if TYPE_CHECKING:
    from collections.abc import Mapping

    from payload_normalizer.core.types.canonical import CanonicalListPage
    from payload_normalizer.services.normalization.field_resolver import FieldResolver
    from payload_normalizer.settings import Settings

logger = get_normalization_logger()

Normalizer = Callable[[object], object]


class NormalizerRegistry:
    """实体类型 -> 标准化函数的注册表.

    Attributes:
        resolver: 内置标准化函数共用的字段解析器.

    Example:
        >>> registry = NormalizerRegistry()
        >>> registry.normalize("user", {"uid": 7})["uid"]
        7

    """

    def __init__(self, resolver: FieldResolver | None = None) -> None:
        self._normalizers_impl = EntityNormalizers(resolver)
        self.resolver = self._normalizers_impl.resolver
        self._normalizers: dict[str, Normalizer] = {
            EntityKind.USER: self._normalizers_impl.user,
            EntityKind.CONTENT_ITEM: self._normalizers_impl.content_item,
            EntityKind.COMMENT: self._normalizers_impl.comment,
            EntityKind.ORDER: self._normalizers_impl.order,
            EntityKind.PRODUCT: self._normalizers_impl.product,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> NormalizerRegistry:
        """按设置构建注册表.

        先按设置配置日志(级别、JSON 输出、调试开关),配置了字段映射覆盖文件时一并加载.
        """
        configure_logging(settings)
        registry = cls(build_default_resolver(settings))
        logger.info(
            "normalizer_registry_initialized",
            kinds=list(registry.kinds),
            field_mappings_path=str(settings.field_mappings_path) if settings.field_mappings_path else None,
        )
        return registry

    @property
    def kinds(self) -> tuple[str, ...]:
        """已注册的实体类型."""
        return tuple(self._normalizers)

    @property
    def normalizers(self) -> Mapping[str, Normalizer]:
        """已注册标准化函数的只读视图."""
        return MappingProxyType(self._normalizers)

    def register(self, kind: str, normalizer: Normalizer) -> None:
        """注册或替换实体类型对应的标准化函数.

        Args:
            kind: 实体类型.
            normalizer: 签名为 ``(RawRecord) -> T | None`` 的函数.

        Raises:
            ValidationError: normalizer 不可调用或 kind 为空.

        """
        if not callable(normalizer):
            raise ValidationError(message_key="INVALID_NORMALIZER", extra={"kind": kind})
        if not isinstance(kind, str) or not kind.strip():
            raise ValidationError(ErrorMessages.UNKNOWN_ENTITY_KIND.format(kind=kind), extra={"kind": str(kind)})
        replaced = kind in self._normalizers
        self._normalizers[kind] = normalizer
        log_debug("注册实体标准化函数", module="normalization", kind=kind, replaced=replaced)

    def get(self, kind: str) -> Normalizer:
        """获取实体类型对应的标准化函数.

        Raises:
            ValidationError: 实体类型未注册.

        """
        normalizer = self._normalizers.get(kind)
        if normalizer is None:
            logger.warning("unknown_entity_kind", kind=str(kind), registered=list(self._normalizers))
            raise ValidationError(ErrorMessages.UNKNOWN_ENTITY_KIND.format(kind=kind), extra={"kind": str(kind)})
        return normalizer

    def normalize(self, kind: str, payload: object) -> object | None:
        """标准化单条记录,输入不是映射时返回 None."""
        return self.get(kind)(payload)

    def normalize_many(self, kind: str, raw_sequence: object) -> list[object]:
        """批量标准化,丢弃非映射输入与转换结果为 None 的项."""
        return map_valid(raw_sequence, self.get(kind))

    def normalize_list(self, kind: str, raw_response: object) -> CanonicalListPage:
        """标准化分页列表响应,列表项使用该实体类型的标准化函数."""
        return reconcile_list(raw_response, self.get(kind), resolver=self.resolver)


default_registry = NormalizerRegistry()
