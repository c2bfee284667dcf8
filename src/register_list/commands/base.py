"""Shared context and result types for list commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from register_list.errors import RegisterListError
from register_list.host import RegisterHost
from register_list.runtime import telemetry
from register_list.view.model import HEADER_LINES, RegisterListViewModel, RenderedView


@dataclass(slots=True)
class CommandResult:
    """Outcome of one list command, mirrored to the host's status line."""

    consumed: bool = True
    status: str = "ok"
    message: Optional[str] = None
    closed: bool = False


@dataclass(frozen=True, slots=True)
class CommandArgs:
    """Arguments a key binding hands to its command.

    ``delta`` is the step for increment and decrement, ``types`` the type
    letters a filter command restricts the list to.
    """

    delta: int = 1
    types: Optional[str] = None


class ListBus:
    """Tiny event bus so adapters can observe what commands did."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ListContext:
    view: RegisterListViewModel
    host: RegisterHost
    bus: ListBus
    cursor_line: int = HEADER_LINES
    rendered: Optional[RenderedView] = None
    is_open: bool = False

    @property
    def line_count(self) -> int:
        return len(self.rendered.lines) if self.rendered else HEADER_LINES

    def focused_key(self) -> Optional[str]:
        try:
            return self.view.entry_at(self.cursor_line).key
        except RegisterListError:
            return None

    def show(self, rendered: RenderedView) -> None:
        self.rendered = rendered
        self.cursor_line = rendered.cursor_line
        self.host.render_lines(rendered.lines, rendered.cursor_line)
        self.bus.emit("list.render", rendered)


CommandHandler = Callable[[ListContext, CommandArgs], CommandResult]


def report_error(context: ListContext, exc: RegisterListError) -> CommandResult:
    """Surface a recoverable condition without touching the view."""

    message = str(exc)
    context.host.update_status(message)
    context.bus.emit("list.error", exc)
    telemetry.record_event(
        "list.error",
        level="warning",
        data={"error": type(exc).__name__, "message": message, "key": exc.key},
    )
    return CommandResult(status=type(exc).__name__, message=message)


def guarded(
    context: ListContext, operation: Callable[[], CommandResult]
) -> CommandResult:
    try:
        result = operation()
    except RegisterListError as exc:
        return report_error(context, exc)
    if result.message:
        context.host.update_status(result.message)
    return result


__all__ = [
    "CommandArgs",
    "CommandHandler",
    "CommandResult",
    "ListBus",
    "ListContext",
    "guarded",
    "report_error",
]
