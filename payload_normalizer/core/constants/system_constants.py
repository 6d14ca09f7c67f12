"""payload-normalizer - 系统级常量定义.

统一管理日志级别、错误分类/严重度与默认错误文案.
"""

from enum import Enum


class LogLevel(Enum):
    """日志级别枚举."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorMessages:
    """错误消息常量."""

    INTERNAL_ERROR = "内部错误"
    VALIDATION_ERROR = "数据验证失败"
    UNKNOWN_ENTITY_KIND = "未注册的实体类型: {kind}"
    INVALID_NORMALIZER = "实体转换函数必须可调用"
    CONFIG_ERROR = "配置错误"
    FIELD_MAPPING_FILE_NOT_FOUND = "字段映射配置文件不存在: {path}"
    FIELD_MAPPING_INVALID = "字段映射配置格式错误"
