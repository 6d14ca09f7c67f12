"""payload-normalizer 的结构化日志配置与辅助函数."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, cast

import structlog

from payload_normalizer.settings import APP_VERSION, DEFAULT_APP_NAME, DEFAULT_ENVIRONMENT

if TYPE_CHECKING:
    from structlog.typing import BindableLogger, Processor

    from payload_normalizer.core.types.structures import JsonValue, StructlogEventDict
    from payload_normalizer.settings import Settings


class DebugFilter:
    """根据配置决定是否丢弃 DEBUG 日志的处理器.

    Attributes:
        enabled: 是否启用 DEBUG 日志.

    """

    def __init__(self, *, enabled: bool = False) -> None:
        self.enabled = enabled

    def set_enabled(self, *, enabled: bool) -> None:
        """设置是否启用 DEBUG 日志."""
        self.enabled = enabled

    def __call__(
        self,
        _logger: BindableLogger,
        method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """处理日志事件,未启用时丢弃 DEBUG 日志.

        Raises:
            structlog.DropEvent: 当 DEBUG 日志未启用时抛出,丢弃该日志.

        """
        level = str(event_dict.get("level", method_name)).upper()
        if level == "DEBUG" and not self.enabled:
            raise structlog.DropEvent
        return event_dict


class StructlogConfig:
    """structlog 配置核心类.

    负责配置处理器链与全局上下文.可以多次调用 ``configure``,
    处理器链只装配一次,后续调用只刷新设置相关的状态.

    Attributes:
        debug_filter: 调试日志过滤器.
        configured: 是否已配置标志.

    Example:
        >>> config = StructlogConfig()
        >>> config.configure(Settings.load())
        >>> logger = get_logger("normalization")

    """

    def __init__(self) -> None:
        self.debug_filter = DebugFilter(enabled=False)
        self.configured = False
        self.app_name = DEFAULT_APP_NAME
        self.app_version = APP_VERSION
        self.environment = DEFAULT_ENVIRONMENT
        self.log_json = False
        self.log_level = logging.INFO

    def configure(self, settings: Settings | None = None) -> None:
        """初始化 structlog 处理器(幂等).

        Args:
            settings: 运行时设置,可选.提供时刷新全局上下文与调试开关,
                并按需重新装配渲染器.

        """
        if settings is not None:
            self._apply_settings(settings)
            self.configured = False

        if self.configured:
            return

        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            self.debug_filter,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            self._add_global_context,
            self._get_renderer(),
        ]
        structlog.configure(
            processors=cast("list[Processor]", processors),
            context_class=dict,
            wrapper_class=structlog.make_filtering_bound_logger(self.log_level),
            logger_factory=structlog.PrintLoggerFactory(),
            cache_logger_on_first_use=False,
        )
        self.configured = True

    def _apply_settings(self, settings: Settings) -> None:
        self.app_name = settings.app_name
        self.app_version = settings.app_version
        self.environment = settings.environment
        self.log_json = settings.log_json
        self.log_level = logging.getLevelName(settings.log_level)
        self.debug_filter.set_enabled(enabled=settings.enable_debug_log)

    def _add_global_context(
        self,
        _logger: BindableLogger,
        _method_name: str,
        event_dict: StructlogEventDict,
    ) -> StructlogEventDict:
        """附加应用名、版本、环境等全局上下文.

        Returns:
            更新后的事件字典.

        """
        event_dict.setdefault("app_name", self.app_name)
        event_dict.setdefault("app_version", self.app_version)
        event_dict.setdefault("environment", self.environment)
        return event_dict

    def _get_renderer(self) -> Processor:
        """根据设置与终端能力返回渲染器."""
        if self.log_json:
            return structlog.processors.JSONRenderer()
        if sys.stdout.isatty():
            return structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=10),
            )
        return structlog.dev.ConsoleRenderer(colors=False)


structlog_config = StructlogConfig()


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """获取结构化日志记录器.

    Args:
        name: 日志记录器名称,通常使用模块名.

    Returns:
        绑定了 ``logger_name`` 的 structlog 日志记录器.

    Example:
        >>> logger = get_logger("normalization")
        >>> logger.info("field_mapping_config_loaded", entities=6)

    """
    structlog_config.configure()
    # 惰性代理,重新 configure 后模块级 logger 也会使用新的处理器链
    return structlog.get_logger(name, logger_name=name)


def configure_logging(settings: Settings) -> None:
    """按设置配置日志系统."""
    structlog_config.configure(settings)


def log_debug(message: str, module: str = "app", **kwargs: JsonValue) -> None:
    """记录调试级别日志,仅在启用调试日志时输出."""
    if not structlog_config.debug_filter.enabled:
        return
    get_logger("app").debug(message, module=module, **kwargs)


def get_normalization_logger() -> structlog.typing.FilteringBoundLogger:
    """返回标准化模块 logger."""
    return get_logger("normalization")
