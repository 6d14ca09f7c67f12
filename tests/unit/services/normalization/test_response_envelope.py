"""响应信封辅助函数的单元测试."""

from __future__ import annotations

import pytest

from payload_normalizer.services.normalization.response_envelope import (
    extract_response_message,
    is_success_response,
    unwrap_response_data,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ({"status": 200, "msg": "ok", "data": {}}, True),
        ({"status": "200"}, True),
        ({"status": 500, "msg": "error"}, False),
        ({"msg": "no status"}, False),
        ({"status": None}, False),
        ({"status": "abc"}, False),
        (None, False),
        ([200], False),
    ],
)
def test_is_success_response(raw, expected) -> None:
    assert is_success_response(raw) is expected


@pytest.mark.unit
def test_extract_response_message() -> None:
    assert extract_response_message({"status": 200, "msg": "操作成功"}) == "操作成功"
    assert extract_response_message({"status": 200}) == ""
    assert extract_response_message({"msg": None}) == ""
    assert extract_response_message("oops") == ""


@pytest.mark.unit
def test_unwrap_response_data() -> None:
    payload = {"list": [1]}

    assert unwrap_response_data({"status": 200, "data": payload}) is payload
    assert unwrap_response_data({"status": 200, "data": 0}) == 0
    assert unwrap_response_data({"status": 200}) is None
    assert unwrap_response_data({"data": None}, default={}) == {}
    assert unwrap_response_data(None, default=[]) == []
