"""Capabilities the register list expects from its host editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence, Tuple

from register_list.store.payloads import StyleSpan


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """One display line plus the style hints that apply to it."""

    text: str
    styles: Tuple[StyleSpan, ...] = ()


PromptCallback = Callable[[str], None]


class RegisterHost(Protocol):
    """UI primitives the controller calls while executing list commands."""

    def render_lines(self, lines: Sequence[RenderedLine], cursor_line: int) -> None:
        """Replace the view contents and place the cursor."""
        ...

    def move_cursor(self, line: int) -> None: ...

    def update_status(self, text: str) -> None:
        """Show a transient, non-blocking status message."""
        ...

    def close_view(self) -> None:
        """Hide the list so the previously active buffer is frontmost."""
        ...

    def place_on_clipboard(self, text: str) -> None: ...

    def insert_register(self, key: str) -> None:
        """Insert the contents of register ``key`` at point."""
        ...

    def jump_to_register(self, key: str, payload: Any) -> None:
        """Move to a location or restore a window/frame layout."""
        ...

    def prompt(self, label: str, initial: str, callback: PromptCallback) -> None:
        """Ask the user for a line of input and pass it to ``callback``."""
        ...


__all__ = ["RenderedLine", "RegisterHost", "PromptCallback"]
