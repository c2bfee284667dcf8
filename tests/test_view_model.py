from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import pytest

from register_list.errors import (
    HeaderRowSelected,
    InvalidOperationForType,
    InvalidRegisterValue,
    RegisterNotFound,
    UnclassifiableType,
)
from register_list.host import PromptCallback, RenderedLine
from register_list.store import (
    Location,
    Malformed,
    Marker,
    Number,
    RectangleBlock,
    RegisterStore,
    Text,
    Unprintable,
    WindowLayout,
)
from register_list.view import (
    HEADER_LINES,
    CopyRectangle,
    InsertText,
    JumpTo,
    NoOp,
    RegisterListViewModel,
    ViewSession,
    perform_action,
)


class RecordingHost:
    """Captures host primitive calls in order."""

    def __init__(self) -> None:
        self.trace: List[Tuple[str, Any]] = []

    def render_lines(self, lines: Sequence[RenderedLine], cursor_line: int) -> None:
        self.trace.append(("render", cursor_line))

    def move_cursor(self, line: int) -> None:
        self.trace.append(("move", line))

    def update_status(self, text: str) -> None:
        self.trace.append(("status", text))

    def close_view(self) -> None:
        self.trace.append(("close", None))

    def place_on_clipboard(self, text: str) -> None:
        self.trace.append(("clipboard", text))

    def insert_register(self, key: str) -> None:
        self.trace.append(("insert", key))

    def jump_to_register(self, key: str, payload: Any) -> None:
        self.trace.append(("jump", key))

    def prompt(self, label: str, initial: str, callback: PromptCallback) -> None:
        self.trace.append(("prompt", label))


def make_view(
    entries: Sequence[Tuple[str, Any]] = (("a", Text("hello")), ("2", Number(5))),
    session: ViewSession | None = None,
) -> RegisterListViewModel:
    return RegisterListViewModel(RegisterStore(entries), session)


def test_refresh_renders_header_and_rows() -> None:
    view = make_view()

    rendered = view.refresh()

    assert [line.text for line in rendered.lines] == [
        "% Key  Type  Value",
        "- ---  ----  -----",
        "  2    N     Number: 5",
        "  a    S     hello",
    ]
    assert rendered.cursor_line == HEADER_LINES


def test_refresh_is_idempotent_and_keeps_store_order() -> None:
    view = make_view()
    before = view.store.keys()

    first = view.refresh()
    second = view.refresh()

    assert first == second
    assert view.store.keys() == before


def test_bump_number_scenario() -> None:
    view = make_view()
    view.refresh()

    rendered = view.bump_row(view.line_for_key("2") or 0, 1)

    assert view.store.get("2") == Number(6)
    assert view.store.get("a") == Text("hello")
    assert rendered.lines[rendered.cursor_line].text == "  2    N     Number: 6"


def test_bump_round_trip_restores_value() -> None:
    view = make_view()
    view.refresh()
    line = view.line_for_key("2") or 0

    view.bump_row(line, 1)
    view.bump_row(line, -1)

    assert view.store.get("2") == Number(5)


def test_bump_requires_number() -> None:
    view = make_view()
    view.refresh()

    with pytest.raises(InvalidOperationForType):
        view.bump_row(view.line_for_key("a") or 0, 1)
    assert view.store.get("a") == Text("hello")


def test_delete_on_header_row_leaves_store_alone() -> None:
    view = make_view()
    view.refresh()

    with pytest.raises(HeaderRowSelected):
        view.delete_row(0)
    assert len(view.store) == 2


def test_line_past_rows_is_not_found() -> None:
    view = make_view()
    view.refresh()

    with pytest.raises(RegisterNotFound):
        view.delete_row(HEADER_LINES + 2)


def test_delete_keeps_cursor_on_same_row_index() -> None:
    view = make_view([("a", Text("x")), ("b", Text("y")), ("c", Text("z"))])
    view.refresh()

    rendered = view.delete_row(view.line_for_key("b") or 0)

    assert "b" not in view.store
    assert rendered.lines[rendered.cursor_line].text.startswith("  c")

    rendered = view.delete_row(view.line_for_key("c") or 0)

    assert rendered.lines[rendered.cursor_line].text.startswith("  a")


def test_deleting_the_only_row_leaves_cursor_on_a_rendered_line() -> None:
    view = make_view([("a", Text("x"))])
    view.refresh()

    rendered = view.delete_row(HEADER_LINES)

    assert rendered.rows == ()
    assert rendered.cursor_line == HEADER_LINES - 1
    assert rendered.cursor_line < len(rendered.lines)


def test_filter_numbers_only() -> None:
    view = make_view()

    rendered = view.refresh(type_filter={"N"})

    assert [row.key for row in rendered.rows] == ["2"]
    assert rendered.lines[HEADER_LINES].text.endswith("Number: 5")


def test_activate_text_row_inserts_after_closing() -> None:
    view = make_view()
    view.refresh()
    host = RecordingHost()

    action = view.activate_row(view.line_for_key("a") or 0)
    performed = perform_action(action, host)

    assert action == InsertText("a", "hello")
    assert performed is True
    assert host.trace == [("close", None), ("clipboard", "hello"), ("insert", "a")]
    assert view.session.last_key == "a"


def test_activate_rectangle_copies_joined_lines_then_inserts() -> None:
    view = make_view([("r", RectangleBlock(("ab", "cd")))])
    view.refresh()
    host = RecordingHost()

    action = view.activate_row(HEADER_LINES)
    perform_action(action, host)

    assert action == CopyRectangle("r", ("ab", "cd"))
    assert host.trace == [("close", None), ("clipboard", "ab\ncd"), ("insert", "r")]


def test_activate_location_and_window_jump() -> None:
    marker = Marker("notes", 3)
    view = make_view([("m", Location(marker)), ("w", WindowLayout("main"))])
    view.refresh()

    assert view.activate_row(HEADER_LINES) == JumpTo("m", Location(marker))
    assert isinstance(view.activate_row(HEADER_LINES + 1), JumpTo)


def test_unprintable_and_malformed_rows_are_no_ops() -> None:
    view = make_view([("?", Unprintable()), ("x", Malformed("truncated value"))])
    view.refresh(type_filter=["?", "error"])
    host = RecordingHost()

    quiet = view.activate_row(HEADER_LINES)
    broken = view.activate_row(HEADER_LINES + 1)

    assert quiet == NoOp("?", None)
    assert broken == NoOp("x", "truncated value")
    assert perform_action(broken, host) is False
    assert host.trace == []


def test_open_restores_last_activated_key() -> None:
    session = ViewSession()
    view = make_view(session=session)
    view.refresh()
    view.activate_row(view.line_for_key("a") or 0)

    reopened = make_view(session=session).open()

    assert reopened.lines[reopened.cursor_line].text == "  a    S     hello"


def test_open_defaults_to_first_row_when_last_key_hidden() -> None:
    session = ViewSession(last_key="a")
    view = make_view(session=session)

    rendered = view.refresh(type_filter="N", focus_key=session.last_key)

    assert rendered.cursor_line == HEADER_LINES


def test_elide_length_from_session() -> None:
    view = make_view(
        [("t", Text("abcdefghijklmnopqrst"))], ViewSession(elide_length=10)
    )

    rendered = view.refresh()

    assert rendered.lines[HEADER_LINES].text.endswith("abcdefg...")


def test_edit_value_for_text_and_number() -> None:
    view = make_view()
    view.refresh()

    view.edit_value(view.line_for_key("a") or 0, "bye")
    view.edit_value(view.line_for_key("2") or 0, " 41 ")

    assert view.store.get("a") == Text("bye")
    assert view.store.get("2") == Number(41)


def test_edit_value_rejections() -> None:
    view = make_view(
        [("2", Number(1)), ("w", WindowLayout("main")), ("x", Malformed("bad"))]
    )
    view.refresh(type_filter=["N", "W", "error"])

    with pytest.raises(InvalidRegisterValue):
        view.edit_value(view.line_for_key("2") or 0, "many")
    with pytest.raises(InvalidOperationForType):
        view.edit_value(view.line_for_key("w") or 0, "x")
    with pytest.raises(UnclassifiableType):
        view.edit_value(view.line_for_key("x") or 0, "x")
    assert view.store.get("2") == Number(1)


def test_rename_moves_entry_and_focus() -> None:
    view = make_view()
    view.refresh()

    rendered = view.rename_row(view.line_for_key("a") or 0, "z")

    assert "a" not in view.store
    assert view.store.get("z") == Text("hello")
    assert rendered.lines[rendered.cursor_line].text.startswith("  z")
