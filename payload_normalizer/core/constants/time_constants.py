"""时间常量.

提供常用时间单位的秒数表示,避免在代码中使用魔法数字.
"""


class TimeConstants:
    """时间常量(秒数)."""

    ONE_MINUTE = 60
    ONE_HOUR = 3600
    ONE_DAY = 86400
    ONE_MONTH = 2592000  # 30天

    MILLIS_PER_SECOND = 1000

    # 大于该值的数值时间戳视为毫秒,否则视为秒
    MILLISECOND_TIMESTAMP_THRESHOLD = 9999999999
