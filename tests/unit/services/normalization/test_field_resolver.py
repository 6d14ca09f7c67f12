"""字段解析引擎的单元测试."""

from __future__ import annotations

import pytest

from payload_normalizer.core.constants import DEFAULT_FIELD_MAPPINGS, EntityKind
from payload_normalizer.services.normalization.field_resolver import (
    FieldMappingTable,
    FieldResolver,
    resolve_field,
)


@pytest.mark.unit
def test_first_candidate_wins() -> None:
    assert resolve_field({"id": 5, "uid": 7}, ("uid", "id", "user_id"), 0) == 7


@pytest.mark.unit
def test_falls_back_to_later_candidate() -> None:
    assert resolve_field({"user_id": 9}, ("uid", "id", "user_id"), 0) == 9


@pytest.mark.unit
@pytest.mark.parametrize("falsy", [0, False, "", [], {}])
def test_falsy_values_are_present(falsy) -> None:
    """存在性只看 None,0/False/空值都必须能被解析出来."""
    assert resolve_field({"a": falsy, "b": "fallback"}, ("a", "b"), "default") == falsy


@pytest.mark.unit
def test_none_value_is_absent() -> None:
    assert resolve_field({"a": None, "b": 2}, ("a", "b"), 0) == 2
    assert resolve_field({"a": None}, ("a",), "default") == "default"


@pytest.mark.unit
@pytest.mark.parametrize("record", [None, 42, "abc", [("a", 1)], object()])
def test_non_record_returns_default(record) -> None:
    assert resolve_field(record, ("a",), "default") == "default"


@pytest.mark.unit
def test_empty_candidates_return_default() -> None:
    assert resolve_field({"a": 1}, (), None) is None


@pytest.mark.unit
def test_table_lookup_and_unknown_names() -> None:
    table = FieldMappingTable()

    assert table.candidates(EntityKind.USER, "uid") == ("uid", "id", "user_id")
    assert table.candidates(EntityKind.USER, "missing") == ()
    assert table.candidates("missing", "uid") == ()
    assert set(EntityKind.MAPPED) == set(table.entities)
    assert "page_size" in table.fields(EntityKind.LIST_PAGE)


@pytest.mark.unit
def test_merged_with_returns_new_table() -> None:
    table = FieldMappingTable()

    merged = table.merged_with({EntityKind.USER: {"uid": ["member_id"]}})

    assert merged.candidates(EntityKind.USER, "uid") == ("member_id",)
    assert merged.candidates(EntityKind.USER, "nickname") == ("nickname", "name", "user_name")
    assert table.candidates(EntityKind.USER, "uid") == ("uid", "id", "user_id")


@pytest.mark.unit
def test_default_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_FIELD_MAPPINGS[EntityKind.USER]["uid"] = ("x",)  # type: ignore[index]
    with pytest.raises(TypeError):
        DEFAULT_FIELD_MAPPINGS["new_entity"] = {}  # type: ignore[index]


@pytest.mark.unit
def test_resolver_for_entity_uses_injected_table() -> None:
    table = FieldMappingTable().merged_with({EntityKind.USER: {"nickname": ["screen_name"]}})
    resolver = FieldResolver(table)
    pick = resolver.for_entity(EntityKind.USER)

    assert pick({"screen_name": "neo", "nickname": "ignored"}, "nickname", "") == "neo"
    assert resolver.resolve({"screen_name": "neo"}, EntityKind.USER, "nickname", "") == "neo"
    assert pick({}, "unknown_field", "d") == "d"
