# tests/unit/conftest.py
"""单元测试专用 fixtures.

提供环境隔离与固定时钟等通用 fixtures。
"""

from datetime import datetime

import pytest

from payload_normalizer.settings import Settings
from payload_normalizer.utils.structlog_config import structlog_config
from payload_normalizer.utils.time_utils import CHINA_TZ


@pytest.fixture(autouse=True)
def _unit_test_env(monkeypatch):
    """为 unit tests 强制注入隔离环境变量.

    目标:
    - 避免开发者本机环境变量(或 `.env`)影响测试稳定性
    - 字段映射总是从内置表开始
    """
    monkeypatch.setenv("NORMALIZER_ENV", "testing")
    for name in ("FIELD_MAPPINGS_PATH", "LOG_LEVEL", "LOG_JSON", "ENABLE_DEBUG_LOG", "APP_NAME"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_now():
    """固定的参考时间: 2025-01-15 12:00:00 (Asia/Shanghai)."""
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=CHINA_TZ)


@pytest.fixture
def malformed_values():
    """各种畸形输入,用于验证标准化函数的全函数性质."""
    return [
        None,
        0,
        1,
        -1,
        3.5,
        float("nan"),
        float("inf"),
        True,
        False,
        "",
        "   ",
        "not-a-record",
        b"bytes",
        [],
        [None, 1, "x"],
        (),
        set(),
        {},
        {"unexpected": object()},
        object(),
    ]


@pytest.fixture
def reset_logging():
    """测试结束后把全局日志配置恢复为默认设置."""
    yield structlog_config
    structlog_config.configure(Settings.model_construct())
