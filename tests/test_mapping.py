from datetime import date, datetime
from decimal import Decimal

import pytest

from pineconer.errors import InvalidArgument
from pineconer.mapping import FlatTable, cast_value, flatten, normalize_items


def _assert_uniform(table):
    keys = [sorted(row) for row in table.rows]
    assert all(k == sorted(table.columns) for k in keys)


def test_empty_list():
    table = flatten([])
    assert len(table) == 0
    assert table.columns == ()


def test_missing_nested_field_gets_null():
    table = flatten([{"id": "a", "metadata": {"x": 1}}, {"id": "b"}])

    assert table.columns == ("id", "metadata_x")
    assert table[0] == {"id": "a", "metadata_x": 1}
    assert table[1] == {"id": "b", "metadata_x": None}


def test_order_preserved():
    table = flatten([{"id": "a"}, {"id": "b"}])
    assert table.column("id") == ["a", "b"]


def test_flat_records_pass_through():
    records = [{"id": "a", "metadata_x": 1}, {"id": "b", "score": 0.5}]
    table = flatten(records)

    assert table.columns == ("id", "metadata_x", "score")
    assert flatten(table.to_records()) == table


def test_query_matches_shape():
    matches = [
        {"id": "iris-1", "score": 0.99, "values": [5.1, 3.5], "metadata": {"species": "setosa"}},
        {"id": "iris-2", "score": 0.97, "metadata": {"species": "setosa", "sepal_width": 3.0}},
        {"id": "iris-3", "score": None},
    ]
    table = flatten(matches)

    assert table.columns == ("id", "score", "values", "metadata_species", "metadata_sepal_width")
    assert table[0]["values"] == [5.1, 3.5]
    assert table[1]["values"] is None
    assert table[2]["metadata_species"] is None
    assert table.column("score") == [0.99, 0.97, None]
    _assert_uniform(table)


def test_scalar_columns_come_before_nested_groups():
    table = flatten([
        {"document": {"text": "b"}, "index": 1},
        {"fields": {"chunk": "x"}, "document": {"lang": "en"}, "score": 0.2},
    ])
    assert table.columns == ("index", "score", "document_text", "document_lang", "fields_chunk")


def test_only_one_level_is_widened():
    table = flatten([{"id": "a", "metadata": {"tags": {"colour": "red"}, "n": 2}}])

    assert table.columns == ("id", "metadata_tags", "metadata_n")
    assert table[0]["metadata_tags"] == {"colour": "red"}


def test_empty_nested_record_adds_no_columns():
    assert flatten([{"id": "a", "metadata": {}}]).columns == ("id",)

    table = flatten([{"id": "a", "metadata": {}}, {"id": "b", "metadata": {"x": 1}}])
    assert table.columns == ("id", "metadata_x")
    assert table[0]["metadata_x"] is None


def test_null_nested_parent_is_treated_as_missing():
    table = flatten([{"id": "a", "metadata": None}, {"id": "b", "metadata": {"x": 1}}])
    assert table.columns == ("id", "metadata_x")


def test_mixed_types_are_kept():
    table = flatten([{"v": 1}, {"v": "one"}, {"v": None}, {"v": True}])
    assert table.column("v") == [1, "one", None, True]


def test_list_of_records_stays_opaque():
    table = flatten([{"id": "a", "chunks": [{"n": 1}]}])
    assert table[0]["chunks"] == [{"n": 1}]


def test_top_level_name_wins_over_widened_collision():
    table = flatten([{"meta_x": 1, "meta": {"x": 2}}])
    assert table.columns == ("meta_x",)
    assert table[0]["meta_x"] == 1


def test_flatten_is_deterministic():
    items = [{"b": 1, "m": {"y": 1, "x": 2}}, {"a": 2, "m": {"z": 3}}]
    assert flatten(items) == flatten(list(items))


def test_uniform_columns_across_irregular_items():
    items = [
        {"id": 1},
        {"id": 2, "metadata": {"a": 1}},
        {"name": "x", "metadata": {"b": 2}, "extra": {"c": 3}},
        {},
    ]
    table = flatten(items)
    assert len(table) == 4
    _assert_uniform(table)


@pytest.mark.parametrize("bad", [None, "abc", {"id": "a"}, 42])
def test_non_list_input_rejected(bad):
    with pytest.raises(InvalidArgument):
        flatten(bad)


def test_non_mapping_item_rejected():
    with pytest.raises(InvalidArgument, match="item 1"):
        flatten([{"id": "a"}, "b"])


def test_flat_table_accessors():
    table = FlatTable(("id", "n"), [{"id": "a"}])

    assert table[0] == {"id": "a", "n": None}
    assert list(table) == [{"id": "a", "n": None}]
    with pytest.raises(KeyError):
        table.column("missing")
    assert "rows=1" in repr(table)


def test_cast_columns():
    table = FlatTable(("id", "createdAt", "percent"), [
        {"id": "1", "createdAt": "2024-08-19T20:49:00.754Z", "percent": "42.5"},
        {"id": "2", "createdAt": None, "percent": "n/a"},
    ])
    cast = table.cast({"createdAt": "timestamp", "percent": "float"})

    assert isinstance(cast[0]["createdAt"], datetime)
    assert cast[0]["createdAt"].year == 2024
    assert cast[0]["percent"] == 42.5
    assert cast[1]["createdAt"] is None
    assert cast[1]["percent"] == "n/a"
    assert table[0]["percent"] == "42.5"


def test_cast_unknown_column():
    with pytest.raises(InvalidArgument):
        FlatTable(("id",), []).cast({"nope": "int"})


@pytest.mark.parametrize("val,col_type,expected", [
    ("3", "int", 3),
    ("1.5", "numeric", Decimal("1.5")),
    ("yes", "bool", True),
    (False, "bool", False),
    ("2024-01-02", "date", date(2024, 1, 2)),
    ({"a": 1}, "json", '{"a": 1}'),
    ("plain", "json", '{"value": "plain"}'),
    (7, "text", "7"),
    ("", "int", None),
    ([1, 2], None, [1, 2]),
])
def test_cast_value(val, col_type, expected):
    assert cast_value(val, col_type) == expected


def test_normalize_items():
    assert normalize_items({"data": [{"a": 1}], "usage": {}}, "data") == [{"a": 1}]
    assert normalize_items({"vectors": {"a": {"id": "a"}}}, "vectors") == [{"id": "a"}]
    assert normalize_items({"matches": []}, "matches") == []


@pytest.mark.parametrize("content", [None, {"matches": None}, {"matches": 3}, {"other": []}])
def test_normalize_items_nothing_list_like(content):
    assert normalize_items(content, "matches") is None
