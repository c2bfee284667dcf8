"""Activation actions resolved per register type and their execution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

from register_list.host import RegisterHost
from register_list.runtime import telemetry
from register_list.store.payloads import Number, RectangleBlock, RegisterEntry, Text

from .classify import TypeTag, classify, diagnose


@dataclass(frozen=True, slots=True)
class NoOp:
    key: Optional[str] = None
    diagnostic: Optional[str] = None


@dataclass(frozen=True, slots=True)
class InsertText:
    key: str
    text: str = ""


@dataclass(frozen=True, slots=True)
class JumpTo:
    key: str
    payload: Any = None


@dataclass(frozen=True, slots=True)
class CopyRectangle:
    key: str
    lines: Tuple[str, ...] = ()


Action = Union[NoOp, InsertText, JumpTo, CopyRectangle]


def _insert_text(entry: RegisterEntry) -> Action:
    payload = entry.payload
    if isinstance(payload, Number):
        return InsertText(entry.key, str(payload.value))
    if isinstance(payload, Text):
        return InsertText(entry.key, payload.value)
    return _no_op(entry)


def _copy_rectangle(entry: RegisterEntry) -> Action:
    if isinstance(entry.payload, RectangleBlock):
        return CopyRectangle(entry.key, entry.payload.lines)
    return _no_op(entry)


def _jump_to(entry: RegisterEntry) -> Action:
    return JumpTo(entry.key, entry.payload)


def _no_op(entry: RegisterEntry) -> Action:
    return NoOp(entry.key, diagnose(entry.payload))


_ACTIONS: Dict[TypeTag, Callable[[RegisterEntry], Action]] = {
    TypeTag.UNPRINTABLE: _no_op,
    TypeTag.TEXT: _insert_text,
    TypeTag.NUMBER: _insert_text,
    TypeTag.RECTANGLE: _copy_rectangle,
    TypeTag.FRAME: _jump_to,
    TypeTag.MARKER: _jump_to,
    TypeTag.WINDOW: _jump_to,
    TypeTag.ERROR: _no_op,
}


def resolve_action(entry: RegisterEntry, tag: Optional[TypeTag] = None) -> Action:
    resolved = tag if tag is not None else classify(entry.payload)
    return _ACTIONS.get(resolved, _no_op)(entry)


def perform_action(action: Action, host: RegisterHost) -> bool:
    """Carry out ``action`` against the host; return ``False`` for no-ops.

    The list view is closed before any other primitive runs because clipboard,
    insert and jump all target whatever buffer is frontmost afterwards.
    """

    if isinstance(action, NoOp):
        return False
    with telemetry.span(
        "list::perform",
        component="actions",
        metadata={"action": type(action).__name__, "key": action.key},
    ):
        host.close_view()
        if isinstance(action, InsertText):
            host.place_on_clipboard(action.text)
            host.insert_register(action.key)
        elif isinstance(action, CopyRectangle):
            host.place_on_clipboard("\n".join(action.lines))
            host.insert_register(action.key)
        else:
            host.jump_to_register(action.key, action.payload)
    return True


__all__ = [
    "Action",
    "NoOp",
    "InsertText",
    "JumpTo",
    "CopyRectangle",
    "resolve_action",
    "perform_action",
]
