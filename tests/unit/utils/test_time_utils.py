"""时间工具的单元测试."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from payload_normalizer.utils.time_utils import CHINA_TZ, TimeFormats, TimeUtils


def _seconds(value: datetime) -> int:
    return int(value.timestamp())


@pytest.mark.unit
def test_parse_timestamp_seconds_and_millis(fixed_now) -> None:
    seconds = _seconds(fixed_now)

    assert TimeUtils.parse_timestamp(seconds) == seconds * 1000
    assert TimeUtils.parse_timestamp(seconds * 1000) == seconds * 1000
    assert TimeUtils.parse_timestamp(str(seconds)) == seconds * 1000
    assert TimeUtils.parse_timestamp(fixed_now) == seconds * 1000


@pytest.mark.unit
def test_parse_timestamp_date_strings(fixed_now) -> None:
    expected = _seconds(fixed_now) * 1000

    assert TimeUtils.parse_timestamp("2025-01-15 12:00:00") == expected
    assert TimeUtils.parse_timestamp("2025/01/15 12:00:00") == expected
    assert TimeUtils.parse_timestamp("2025-01-15T04:00:00Z") == expected
    assert TimeUtils.parse_timestamp("2025-01-15T12:00:00+08:00") == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024/3/5", datetime(2024, 3, 5, tzinfo=CHINA_TZ)),
        ("2024-3-5", datetime(2024, 3, 5, tzinfo=CHINA_TZ)),
        ("2024/3/5 8:09", datetime(2024, 3, 5, 8, 9, tzinfo=CHINA_TZ)),
        ("2024/03/5 8:09:10", datetime(2024, 3, 5, 8, 9, 10, tzinfo=CHINA_TZ)),
    ],
)
def test_parse_timestamp_unpadded_dates(raw, expected) -> None:
    assert TimeUtils.parse_timestamp(raw) == _seconds(expected) * 1000
    assert TimeUtils.format_date(raw) == expected.strftime("%Y-%m-%d")


@pytest.mark.unit
@pytest.mark.parametrize("raw", [None, "", "  ", "yesterday", True, 0, -5, float("nan"), float("inf"), [1]])
def test_parse_timestamp_invalid_returns_zero(raw) -> None:
    assert TimeUtils.parse_timestamp(raw) == 0


@pytest.mark.unit
def test_to_datetime_uses_china_timezone() -> None:
    result = TimeUtils.to_datetime("2025-01-15T04:00:00Z")

    assert result is not None
    assert result.utcoffset() == timedelta(hours=8)
    assert (result.hour, result.minute) == (12, 0)
    assert TimeUtils.to_datetime("bad") is None


@pytest.mark.unit
@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=30), "刚刚"),
        (timedelta(minutes=5), "5分钟前"),
        (timedelta(minutes=59, seconds=59), "59分钟前"),
        (timedelta(hours=3), "3小时前"),
        (timedelta(days=2), "2天前"),
        (timedelta(days=29), "29天前"),
    ],
)
def test_format_relative_time(fixed_now, delta, expected) -> None:
    target = fixed_now - delta

    assert TimeUtils.format_relative_time(_seconds(target), now=fixed_now) == expected


@pytest.mark.unit
def test_format_relative_time_older_than_a_month(fixed_now) -> None:
    target = fixed_now - timedelta(days=45)

    assert TimeUtils.format_relative_time(target, now=fixed_now) == "12月1日"


@pytest.mark.unit
def test_format_relative_time_future_is_just_now(fixed_now) -> None:
    target = fixed_now + timedelta(hours=1)

    assert TimeUtils.format_relative_time(target, now=fixed_now) == "刚刚"


@pytest.mark.unit
def test_format_relative_time_accepts_naive_now(fixed_now) -> None:
    naive_now = fixed_now.replace(tzinfo=None)

    assert TimeUtils.format_relative_time(fixed_now - timedelta(hours=2), now=naive_now) == "2小时前"


@pytest.mark.unit
def test_format_relative_time_invalid_input() -> None:
    assert TimeUtils.format_relative_time("not a date") == ""
    assert TimeUtils.format_relative_time(None) == ""


@pytest.mark.unit
def test_format_date_templates() -> None:
    assert TimeUtils.format_date("2024-03-05 08:09:10") == "2024-03-05"
    assert TimeUtils.format_date("2024-03-05 08:09:10", TimeFormats.DATETIME) == "2024-03-05 08:09:10"
    assert TimeUtils.format_date("2024-03-05 08:09:10", "YYYY/MM/DD HH:mm") == "2024/03/05 08:09"
    assert TimeUtils.format_date(None) == ""


@pytest.mark.unit
def test_date_part_helpers() -> None:
    assert TimeUtils.get_day("2024-03-05") == 5
    assert TimeUtils.get_day("oops") == "N/A"
    assert TimeUtils.get_month_day("2024-03-05") == "3月5日"
    assert TimeUtils.get_year_month_day("2024-03-05") == "2024年3月5日"
    assert TimeUtils.get_month_day(None) == ""


@pytest.mark.unit
def test_smart_format(fixed_now) -> None:
    assert TimeUtils.smart_format(fixed_now - timedelta(hours=2), now=fixed_now) == "10:00"
    assert TimeUtils.smart_format(fixed_now - timedelta(days=1), now=fixed_now) == "昨天"
    assert TimeUtils.smart_format(datetime(2025, 1, 2, 9, 0, tzinfo=CHINA_TZ), now=fixed_now) == "1月2日"
    assert TimeUtils.smart_format(datetime(2024, 12, 31, 9, 0, tzinfo=CHINA_TZ), now=fixed_now) == "2024/12/31"
    assert TimeUtils.smart_format("", now=fixed_now) == ""


@pytest.mark.unit
def test_is_today_and_yesterday(fixed_now) -> None:
    # UTC 2025-01-14 20:00 即中国时间 2025-01-15 04:00
    early_utc = datetime(2025, 1, 14, 20, 0, tzinfo=UTC)

    assert TimeUtils.is_today(early_utc, now=fixed_now) is True
    assert TimeUtils.is_yesterday(early_utc, now=fixed_now) is False
    assert TimeUtils.is_yesterday(fixed_now - timedelta(days=1), now=fixed_now) is True
    assert TimeUtils.is_today("bad", now=fixed_now) is False
    assert TimeUtils.is_yesterday(None, now=fixed_now) is False
