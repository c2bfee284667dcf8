"""Register-list view-model: renders the store and maps lines back to entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from register_list.errors import (
    HeaderRowSelected,
    InvalidOperationForType,
    InvalidRegisterValue,
    RegisterNotFound,
    UnclassifiableType,
)
from register_list.host import RenderedLine
from register_list.runtime.telemetry import span
from register_list.store.payloads import Number, RegisterEntry, StyleSpan, Text
from register_list.store.registers import RegisterStore, ensure_key

from .actions import Action, resolve_action
from .classify import TypeTag, classify, diagnose
from .formatting import FormatOptions, format_payload
from .rows import TypeFilterSpec, parse_type_filter, row_index_for_key, visible_rows
from .session import ViewSession

HEADER_STYLE = "register-list-header"
HEADER: Tuple[RenderedLine, ...] = (
    RenderedLine("% Key  Type  Value", (StyleSpan(0, 18, HEADER_STYLE),)),
    RenderedLine("- ---  ----  -----", (StyleSpan(0, 18, HEADER_STYLE),)),
)
HEADER_LINES = len(HEADER)


@dataclass(frozen=True, slots=True)
class RenderedView:
    lines: Tuple[RenderedLine, ...]
    rows: Tuple[RegisterEntry, ...]
    cursor_line: int

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)


def format_row(entry: RegisterEntry, tag: TypeTag, options: FormatOptions) -> RenderedLine:
    display = format_payload(entry.payload, tag, options)
    prefix = f"  {entry.key}    {tag.value:<4}  "
    styles = tuple(span.shift(len(prefix)) for span in display.spans)
    return RenderedLine(prefix + display.text, styles)


def bump_number(store: RegisterStore, entry: RegisterEntry, delta: int) -> RegisterEntry:
    """Replace a Number register with ``value + delta``."""

    current = store.get(entry.key)
    if current is None:
        raise RegisterNotFound(f"No register {entry.key!r}", key=entry.key)
    tag = classify(current)
    if tag is not TypeTag.NUMBER or not isinstance(current, Number):
        raise InvalidOperationForType("Increment", tag.value, key=entry.key)
    store.remove_entry(entry.key)
    return store.upsert_entry(entry.key, Number(current.value + delta))


class RegisterListViewModel:
    """Projects a ``RegisterStore`` into list lines and serves row commands.

    Line numbers are the displayed line indices, header included; the first
    register row is ``HEADER_LINES``. Every mutating command ends with a
    refresh and returns the new ``RenderedView``.
    """

    def __init__(
        self,
        store: RegisterStore,
        session: Optional[ViewSession] = None,
        *,
        logger_name: str | None = None,
    ) -> None:
        self.store = store
        self.session = session or ViewSession()
        self._logger_name = logger_name
        self._rows: Tuple[RegisterEntry, ...] = ()

    @property
    def rows(self) -> Tuple[RegisterEntry, ...]:
        return self._rows

    def open(self) -> RenderedView:
        return self.refresh(focus_key=self.session.last_key)

    def refresh(
        self,
        type_filter: TypeFilterSpec = None,
        fontify: Optional[bool] = None,
        *,
        focus_key: Optional[str] = None,
        focus_index: Optional[int] = None,
    ) -> RenderedView:
        if type_filter is not None:
            self.session.type_filter = parse_type_filter(type_filter)
        if fontify is not None:
            self.session.fontify = fontify

        with span(
            "list::refresh",
            logger_name=self._logger_name,
            component="view",
            metadata={"types": "".join(sorted(t.value for t in self.session.type_filter))},
        ) as handle:
            rows = visible_rows(self.store.entries(), self.session.type_filter)
            options = self.session.format_options
            lines = HEADER + tuple(
                format_row(entry, classify(entry.payload), options) for entry in rows
            )
            handle.add_metadata("rows", len(rows))

        self._rows = rows
        return RenderedView(lines, rows, self._cursor_line(focus_key, focus_index))

    def line_for_key(self, key: str) -> Optional[int]:
        index = row_index_for_key(self._rows, key)
        return None if index is None else HEADER_LINES + index

    def entry_at(self, line: int) -> RegisterEntry:
        offset = line - HEADER_LINES
        if offset < 0:
            raise HeaderRowSelected(line)
        if offset >= len(self._rows):
            raise RegisterNotFound(f"No register on line {line}")
        return self._rows[offset]

    def activate_row(self, line: int) -> Action:
        entry = self.entry_at(line)
        action = resolve_action(entry, classify(entry.payload))
        self.session.last_key = entry.key
        return action

    def delete_row(self, line: int) -> RenderedView:
        entry = self.entry_at(line)
        with span(
            "list::delete",
            logger_name=self._logger_name,
            component="view",
            metadata={"key": entry.key},
        ):
            self.store.remove_entry(entry.key)
        return self.refresh(focus_index=line - HEADER_LINES)

    def bump_row(self, line: int, delta: int) -> RenderedView:
        entry = self.entry_at(line)
        with span(
            "list::bump",
            logger_name=self._logger_name,
            component="view",
            metadata={"key": entry.key, "delta": delta},
        ):
            bump_number(self.store, entry, delta)
        return self.refresh(focus_key=entry.key)

    def edit_value(self, line: int, text: str) -> RenderedView:
        entry = self.entry_at(line)
        current = self.store.get(entry.key)
        if current is None:
            raise RegisterNotFound(f"No register {entry.key!r}", key=entry.key)
        tag = classify(current)
        if tag is TypeTag.TEXT:
            replacement: object = Text(text)
        elif tag is TypeTag.NUMBER:
            try:
                replacement = Number(int(text.strip()))
            except ValueError as exc:
                raise InvalidRegisterValue(
                    f"Not a number: {text!r}", key=entry.key
                ) from exc
        elif tag is TypeTag.ERROR:
            raise UnclassifiableType(diagnose(current) or "unknown", key=entry.key)
        else:
            raise InvalidOperationForType("Edit", tag.value, key=entry.key)
        self.store.upsert_entry(entry.key, replacement)
        return self.refresh(focus_key=entry.key)

    def rename_row(self, line: int, new_key: str) -> RenderedView:
        entry = self.entry_at(line)
        ensure_key(new_key)
        if new_key != entry.key:
            removed = self.store.remove_entry(entry.key)
            self.store.upsert_entry(new_key, removed.payload)
            if self.session.last_key == entry.key:
                self.session.last_key = new_key
        return self.refresh(focus_key=new_key)

    def _cursor_line(
        self, focus_key: Optional[str], focus_index: Optional[int]
    ) -> int:
        if focus_key is not None:
            line = self.line_for_key(focus_key)
            if line is not None:
                return line
        if not self._rows:
            # Nothing but the header is rendered.
            return HEADER_LINES - 1
        if focus_index is not None:
            return HEADER_LINES + max(0, min(focus_index, len(self._rows) - 1))
        return HEADER_LINES


__all__ = [
    "HEADER",
    "HEADER_LINES",
    "RegisterListViewModel",
    "RenderedView",
    "bump_number",
    "format_row",
]
