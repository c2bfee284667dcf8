from __future__ import annotations

import pytest

from register_list.store import Number, RegisterEntry, RegisterStore, Text, Unprintable
from register_list.view import (
    PRINTABLE_TAGS,
    TypeTag,
    parse_type_filter,
    row_index_for_key,
    sort_entries,
    visible_rows,
)


def make_store() -> RegisterStore:
    return RegisterStore(
        [
            ("b", Text("bee")),
            ("2", Number(5)),
            ("a", Text("ay")),
            ("?", Unprintable()),
            ("z", Number(1)),
        ]
    )


def test_visible_rows_sorted_by_key() -> None:
    rows = visible_rows(make_store().entries())

    assert [row.key for row in rows] == ["2", "?", "a", "b", "z"]


def test_sorting_is_idempotent() -> None:
    once = sort_entries(make_store().entries())

    assert sort_entries(once) == once


def test_visible_rows_leave_store_order_alone() -> None:
    store = make_store()
    before = store.keys()

    visible_rows(store.entries(), "N")

    assert store.keys() == before


def test_filter_restricts_to_requested_tags() -> None:
    rows = visible_rows(make_store().entries(), {"N"})

    assert [row.key for row in rows] == ["2", "z"]


@pytest.mark.parametrize("spec", ["S", "N", "SN", "?", "[SN?]"])
def test_filtered_rows_are_subset_of_all(spec: str) -> None:
    entries = make_store().entries()

    everything = visible_rows(entries, PRINTABLE_TAGS)
    filtered = visible_rows(entries, spec)

    assert set(filtered) <= set(everything)


def test_parse_type_filter_accepts_strings_and_tags() -> None:
    assert parse_type_filter("[SN]") == {TypeTag.TEXT, TypeTag.NUMBER}
    assert parse_type_filter([TypeTag.FRAME, "W"]) == {TypeTag.FRAME, TypeTag.WINDOW}
    assert parse_type_filter(None) == PRINTABLE_TAGS


def test_parse_type_filter_reads_error_as_a_word() -> None:
    assert parse_type_filter("error") == {TypeTag.ERROR}
    assert parse_type_filter(TypeTag.ERROR) == {TypeTag.ERROR}
    assert parse_type_filter("N error") == {TypeTag.NUMBER, TypeTag.ERROR}
    assert parse_type_filter("[SN?]") == {
        TypeTag.TEXT,
        TypeTag.NUMBER,
        TypeTag.UNPRINTABLE,
    }


@pytest.mark.parametrize("spec", ["", "[]", "X"])
def test_parse_type_filter_rejects_bad_specs(spec: str) -> None:
    with pytest.raises(ValueError):
        parse_type_filter(spec)


def test_row_index_for_key() -> None:
    rows = (RegisterEntry("a", Text("x")), RegisterEntry("b", Number(1)))

    assert row_index_for_key(rows, "b") == 1
    assert row_index_for_key(rows, "q") is None
