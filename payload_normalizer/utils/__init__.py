"""工具模块.

主要工具:
- payload_converters: 原始字段类型收敛
- structlog_config: 结构化日志配置
- time_utils: 时间解析与人性化展示
"""
