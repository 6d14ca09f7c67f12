"""常量模块.

集中管理标准化层的常量,包括实体类型、字段映射表、分页默认值与错误文案.

主要常量:
- EntityKind: 实体类型常量
- DEFAULT_FIELD_MAPPINGS: 默认字段映射表
- ErrorMessages: 错误消息常量
- TimeConstants: 时间常量
"""

from .entity_kinds import EntityKind
from .field_mappings import DEFAULT_FIELD_MAPPINGS
from .pagination import DEFAULT_CURRENT_PAGE, DEFAULT_PAGE_SIZE, DEFAULT_TOTAL_COUNT
from .system_constants import ErrorCategory, ErrorMessages, ErrorSeverity, LogLevel
from .time_constants import TimeConstants

__all__ = [
    "DEFAULT_CURRENT_PAGE",
    "DEFAULT_FIELD_MAPPINGS",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TOTAL_COUNT",
    "EntityKind",
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "LogLevel",
    "TimeConstants",
]
