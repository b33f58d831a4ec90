"""Tests for structured-data helpers."""

from __future__ import annotations

from prh.core.structured import as_str_dict, as_str_list, get_int, get_str, get_str_list, get_table


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict([]) is None


def test_as_str_list() -> None:
    assert as_str_list(["a", "b"]) == ["a", "b"]
    assert as_str_list(["a", 1]) is None
    assert as_str_list("ab") is None


def test_get_str_strips_and_rejects_blank() -> None:
    table: dict[str, object] = {"a": "  x ", "b": "   ", "c": 3}
    assert get_str(table, "a") == "x"
    assert get_str(table, "b") is None
    assert get_str(table, "c") is None


def test_get_int_rejects_bool() -> None:
    table: dict[str, object] = {"n": 4, "flag": True}
    assert get_int(table, "n") == 4
    assert get_int(table, "flag") is None


def test_get_table_and_list() -> None:
    table: dict[str, object] = {"t": {"k": "v"}, "l": ["x"]}
    assert get_table(table, "t") == {"k": "v"}
    assert get_table(table, "l") is None
    assert get_str_list(table, "l") == ["x"]
    assert get_str_list(table, "missing") is None
