"""上游统一响应信封辅助函数.

约定的信封形态为 ``{"status": 200, "msg": "...", "data": ...}``.
所有函数对任意输入都返回值,不抛异常.
"""

from __future__ import annotations

from typing import TypeVar

from payload_normalizer.core.constants.field_mappings import (
    RESPONSE_DATA_KEY,
    RESPONSE_MESSAGE_KEY,
    RESPONSE_STATUS_KEY,
    RESPONSE_SUCCESS_STATUS,
)
from payload_normalizer.services.normalization.field_resolver import resolve_field
from payload_normalizer.utils.payload_converters import as_int, as_str, is_record

DefaultT = TypeVar("DefaultT")


def is_success_response(raw_response: object) -> bool:
    """判断响应状态码是否为成功(200)."""
    if not is_record(raw_response):
        return False
    status = as_int(resolve_field(raw_response, (RESPONSE_STATUS_KEY,), None), default=-1)
    return status == RESPONSE_SUCCESS_STATUS


def extract_response_message(raw_response: object) -> str:
    """提取响应提示文案,缺失时返回空字符串."""
    return as_str(resolve_field(raw_response, (RESPONSE_MESSAGE_KEY,), ""))


def unwrap_response_data(raw_response: object, default: DefaultT | None = None) -> object | DefaultT | None:
    """提取响应中的 data 字段.

    Args:
        raw_response: 原始响应.
        default: data 缺失、为 None 或响应不是映射时返回的值.

    Returns:
        data 字段的原始值或 ``default``.

    """
    return resolve_field(raw_response, (RESPONSE_DATA_KEY,), default)
