"""payload-normalizer - 统一异常定义.

标准化路径本身从不抛异常,畸形载荷一律降级为默认值.
这里的异常只用于配置加载失败与调用方误用(如未注册的实体类型).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from payload_normalizer.core.constants.system_constants import ErrorCategory, ErrorMessages, ErrorSeverity

if TYPE_CHECKING:
    from payload_normalizer.core.types.structures import LoggerExtra


@dataclass(frozen=True, slots=True)
class ExceptionMetadata:
    """异常类型的分类、严重度与默认文案键."""

    category: ErrorCategory
    severity: ErrorSeverity
    default_message_key: str


class AppError(Exception):
    """标准化层异常基类.

    ``message`` 为空时按 ``message_key`` 查 ErrorMessages;``extra`` 供日志附加上下文.
    分类与严重度由子类的 ``metadata`` 决定.
    """

    metadata: ClassVar[ExceptionMetadata] = ExceptionMetadata(
        category=ErrorCategory.SYSTEM,
        severity=ErrorSeverity.HIGH,
        default_message_key="INTERNAL_ERROR",
    )

    def __init__(
        self,
        message: str | None = None,
        *,
        message_key: str | None = None,
        extra: LoggerExtra | None = None,
    ) -> None:
        self.message_key = message_key or self.metadata.default_message_key
        self.message = message or getattr(ErrorMessages, self.message_key, ErrorMessages.INTERNAL_ERROR)
        self.extra = dict(extra or {})
        super().__init__(self.message)

    @property
    def category(self) -> ErrorCategory:
        return self.metadata.category

    @property
    def severity(self) -> ErrorSeverity:
        return self.metadata.severity

    @property
    def recoverable(self) -> bool:
        """调用方修正参数后可重试的错误."""
        return self.severity in (ErrorSeverity.LOW, ErrorSeverity.MEDIUM)


class ValidationError(AppError):
    """注册表收到未知实体类型或不可调用的标准化函数."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.VALIDATION,
        severity=ErrorSeverity.LOW,
        default_message_key="VALIDATION_ERROR",
    )


class ConfigurationError(AppError):
    """字段映射覆盖文件缺失、无法解析或引用了未知实体/字段."""

    metadata = ExceptionMetadata(
        category=ErrorCategory.CONFIGURATION,
        severity=ErrorSeverity.HIGH,
        default_message_key="CONFIG_ERROR",
    )


__all__ = [
    "AppError",
    "ConfigurationError",
    "ExceptionMetadata",
    "ValidationError",
]
