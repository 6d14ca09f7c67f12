"""时间解析与人性化展示工具.

规范结构中的时间字段保持上游原样,展示层需要"多久前"、"昨天"这类文案时使用这里的函数.
基于 zoneinfo,统一按中国时区展示.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from payload_normalizer.core.constants.time_constants import TimeConstants

CHINA_TZ = ZoneInfo("Asia/Shanghai")

TimeInput = str | int | float | datetime | None

_LOOSE_DATE_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d")


class TimeFormats:
    """展示格式模板(YYYY/MM/DD/HH/mm/ss 占位)."""

    DATE = "YYYY-MM-DD"
    DATETIME = "YYYY-MM-DD HH:mm:ss"
    TIME = "HH:mm"
    SLASH_DATE = "YYYY/MM/DD"


class TimeUtils:
    """时间解析与人性化展示工具类.

    所有方法都是全函数: 无法解析的输入返回空字符串/0/False,不抛异常.
    需要"当前时间"的方法都接受 ``now`` 参数,便于测试固定时钟.
    """

    @staticmethod
    def now() -> datetime:
        """获取当前中国时间."""
        return datetime.now(CHINA_TZ)

    @staticmethod
    def _reference_now(now: datetime | None) -> datetime:
        # 无时区的参考时间按中国时区解释
        if now is None:
            return TimeUtils.now()
        if now.tzinfo is None:
            return now.replace(tzinfo=CHINA_TZ)
        return now.astimezone(CHINA_TZ)

    @staticmethod
    def parse_timestamp(value: TimeInput) -> int:
        """解析为毫秒时间戳.

        Args:
            value: 秒/毫秒数值时间戳、数值字符串、日期字符串或 datetime.
                大于 9999999999 的数值视为毫秒,否则视为秒.
                日期字符串兼容 ``YYYY-MM-DD HH:MM:SS``、``YYYY/MM/DD``(月日可不补零)与 ISO-8601,
                无时区信息时按中国时区解释.

        Returns:
            毫秒时间戳,空值或无法解析时返回 0.

        """
        if value is None or isinstance(value, bool):
            return 0
        if isinstance(value, datetime):
            return TimeUtils._datetime_to_millis(value)
        if isinstance(value, (int, float)):
            return TimeUtils._number_to_millis(value)
        if not isinstance(value, str):
            return 0

        text = value.strip()
        if not text:
            return 0
        try:
            return TimeUtils._number_to_millis(float(text))
        except ValueError:
            pass

        text = text.replace("/", "-")
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            parsed = TimeUtils._parse_loose_date(text)
        if parsed is None:
            return 0
        return TimeUtils._datetime_to_millis(parsed)

    @staticmethod
    def _parse_loose_date(text: str) -> datetime | None:
        # 月、日、时未补零的写法(如 2024-3-5 8:09)
        for fmt in _LOOSE_DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        return None

    @staticmethod
    def _number_to_millis(value: float) -> int:
        if not math.isfinite(value) or value <= 0:
            return 0
        if value > TimeConstants.MILLISECOND_TIMESTAMP_THRESHOLD:
            return int(value)
        return int(value * TimeConstants.MILLIS_PER_SECOND)

    @staticmethod
    def _datetime_to_millis(value: datetime) -> int:
        if value.tzinfo is None:
            value = value.replace(tzinfo=CHINA_TZ)
        try:
            return int(value.timestamp() * TimeConstants.MILLIS_PER_SECOND)
        except (OverflowError, OSError, ValueError):
            return 0

    @staticmethod
    def to_datetime(value: TimeInput) -> datetime | None:
        """转换为中国时区的 datetime,无法解析时返回 None."""
        timestamp = TimeUtils.parse_timestamp(value)
        if not timestamp:
            return None
        try:
            return datetime.fromtimestamp(timestamp / TimeConstants.MILLIS_PER_SECOND, tz=CHINA_TZ)
        except (OverflowError, OSError, ValueError):
            return None

    @staticmethod
    def format_relative_time(value: TimeInput, now: datetime | None = None) -> str:
        """相对时间格式化.

        不足 1 分钟为"刚刚",其后依次为"N分钟前"、"N小时前"、"N天前",
        超过 30 天显示"M月D日".

        Args:
            value: 待格式化的时间.
            now: 参考的当前时间,缺省为系统时间.

        Returns:
            相对时间描述,无法解析时返回空字符串.

        """
        target = TimeUtils.to_datetime(value)
        if target is None:
            return ""

        current = TimeUtils._reference_now(now)
        diff_seconds = (current - target).total_seconds()

        if diff_seconds < TimeConstants.ONE_MINUTE:
            return "刚刚"
        if diff_seconds < TimeConstants.ONE_HOUR:
            return f"{int(diff_seconds // TimeConstants.ONE_MINUTE)}分钟前"
        if diff_seconds < TimeConstants.ONE_DAY:
            return f"{int(diff_seconds // TimeConstants.ONE_HOUR)}小时前"
        if diff_seconds < TimeConstants.ONE_MONTH:
            return f"{int(diff_seconds // TimeConstants.ONE_DAY)}天前"
        return f"{target.month}月{target.day}日"

    @staticmethod
    def format_date(value: TimeInput, fmt: str = TimeFormats.DATE) -> str:
        """按 YYYY/MM/DD/HH/mm/ss 占位模板格式化.

        Example:
            >>> TimeUtils.format_date("2024-03-05 08:09:10", "YYYY/MM/DD HH:mm")
            '2024/03/05 08:09'

        """
        target = TimeUtils.to_datetime(value)
        if target is None:
            return ""
        return (
            fmt.replace("YYYY", f"{target.year:04d}")
            .replace("MM", f"{target.month:02d}")
            .replace("DD", f"{target.day:02d}")
            .replace("HH", f"{target.hour:02d}")
            .replace("mm", f"{target.minute:02d}")
            .replace("ss", f"{target.second:02d}")
        )

    @staticmethod
    def get_day(value: TimeInput) -> int | str:
        """获取日期中的日,无法解析时返回 'N/A'."""
        target = TimeUtils.to_datetime(value)
        if target is None:
            return "N/A"
        return target.day

    @staticmethod
    def get_month_day(value: TimeInput) -> str:
        """返回"M月D日"."""
        target = TimeUtils.to_datetime(value)
        if target is None:
            return ""
        return f"{target.month}月{target.day}日"

    @staticmethod
    def get_year_month_day(value: TimeInput) -> str:
        """返回"YYYY年M月D日"."""
        target = TimeUtils.to_datetime(value)
        if target is None:
            return ""
        return f"{target.year}年{target.month}月{target.day}日"

    @staticmethod
    def smart_format(value: TimeInput, now: datetime | None = None) -> str:
        """智能时间显示.

        今天显示"HH:mm",昨天显示"昨天",今年显示"M月D日",更早显示"YYYY/MM/DD".
        """
        target = TimeUtils.to_datetime(value)
        if target is None:
            return ""

        current = TimeUtils._reference_now(now)
        if target.date() == current.date():
            return TimeUtils.format_date(target, TimeFormats.TIME)
        if target.date() == (current - timedelta(days=1)).date():
            return "昨天"
        if target.year == current.year:
            return TimeUtils.get_month_day(target)
        return TimeUtils.format_date(target, TimeFormats.SLASH_DATE)

    @staticmethod
    def is_today(value: TimeInput, now: datetime | None = None) -> bool:
        """判断时间是否属于今天(中国时区)."""
        target = TimeUtils.to_datetime(value)
        if target is None:
            return False
        current = TimeUtils._reference_now(now)
        return target.date() == current.date()

    @staticmethod
    def is_yesterday(value: TimeInput, now: datetime | None = None) -> bool:
        """判断时间是否属于昨天(中国时区)."""
        target = TimeUtils.to_datetime(value)
        if target is None:
            return False
        current = TimeUtils._reference_now(now)
        return target.date() == (current - timedelta(days=1)).date()


time_utils = TimeUtils()
