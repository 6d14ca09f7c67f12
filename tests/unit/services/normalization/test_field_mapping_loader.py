"""字段映射覆盖配置加载的单元测试."""

from __future__ import annotations

import pytest

from payload_normalizer.core.constants import EntityKind
from payload_normalizer.core.constants.system_constants import ErrorCategory
from payload_normalizer.errors import ConfigurationError
from payload_normalizer.services.normalization.field_mapping_loader import (
    FieldMappingLoader,
    build_default_resolver,
)
from payload_normalizer.settings import Settings


def _write_config(tmp_path, content: str):
    path = tmp_path / "field_mappings.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.unit
def test_overrides_replace_field_candidates(tmp_path) -> None:
    path = _write_config(
        tmp_path,
        "field_mappings:\n"
        "  user:\n"
        "    uid: [member_id, uid]\n"
        "    nickname: screen_name\n"
        "  list_page:\n"
        "    page_size: [' size ', limit]\n",
    )

    loader = FieldMappingLoader(path)

    assert loader.config_path == path
    assert loader.table.candidates(EntityKind.USER, "uid") == ("member_id", "uid")
    assert loader.table.candidates(EntityKind.USER, "nickname") == ("screen_name",)
    assert loader.table.candidates(EntityKind.LIST_PAGE, "page_size") == ("size", "limit")
    assert loader.table.candidates(EntityKind.USER, "avatar") == ("avatar", "head_pic", "photo")


@pytest.mark.unit
def test_empty_file_keeps_builtin_table(tmp_path) -> None:
    path = _write_config(tmp_path, "")

    loader = FieldMappingLoader(path)

    assert loader.table.candidates(EntityKind.USER, "uid") == ("uid", "id", "user_id")


@pytest.mark.unit
def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        FieldMappingLoader(tmp_path / "missing.yaml")

    assert exc_info.value.category is ErrorCategory.CONFIGURATION
    assert exc_info.value.recoverable is False
    assert exc_info.value.extra["path"].endswith("missing.yaml")


@pytest.mark.unit
@pytest.mark.parametrize(
    "content",
    [
        "field_mappings: [user]\n",
        "- just\n- a list\n",
        "field_mappings:\n  coupon:\n    code: [code]\n",
        "field_mappings:\n  user:\n    unknown_field: [x]\n",
        "field_mappings:\n  user: [uid]\n",
        "field_mappings:\n  user:\n    uid: {a: 1}\n",
        "field_mappings:\n  user:\n    uid: []\n",
        "field_mappings:\n  user:\n    uid: ['  ', 3]\n",
        "field_mappings: {user: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path, content) -> None:
    path = _write_config(tmp_path, content)

    with pytest.raises(ConfigurationError):
        FieldMappingLoader(path)


@pytest.mark.unit
def test_reload_failure_keeps_previous_table(tmp_path) -> None:
    path = _write_config(tmp_path, "field_mappings:\n  user:\n    uid: [member_id]\n")
    loader = FieldMappingLoader(path)

    path.write_text("field_mappings:\n  user:\n    uid: []\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        loader.reload()

    assert loader.table.candidates(EntityKind.USER, "uid") == ("member_id",)


@pytest.mark.unit
def test_reload_picks_up_changes(tmp_path) -> None:
    path = _write_config(tmp_path, "field_mappings:\n  user:\n    uid: [member_id]\n")
    loader = FieldMappingLoader(path)

    path.write_text("field_mappings:\n  user:\n    uid: [account_id]\n", encoding="utf-8")
    table = loader.reload()

    assert table.candidates(EntityKind.USER, "uid") == ("account_id",)
    assert loader.table is table


@pytest.mark.unit
def test_build_default_resolver_without_override() -> None:
    resolver = build_default_resolver(Settings())

    assert resolver.resolve({"uid": 1}, EntityKind.USER, "uid", 0) == 1
    assert build_default_resolver().resolve({"id": 2}, EntityKind.USER, "uid", 0) == 2


@pytest.mark.unit
def test_build_default_resolver_with_override(tmp_path, monkeypatch) -> None:
    path = _write_config(tmp_path, "field_mappings:\n  order:\n    id: [trade_no]\n")
    monkeypatch.setenv("FIELD_MAPPINGS_PATH", str(path))

    resolver = build_default_resolver(Settings())

    assert resolver.resolve({"trade_no": "T1", "id": "X"}, EntityKind.ORDER, "id", "") == "T1"
