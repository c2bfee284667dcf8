"""Controller that wires key events and UI callbacks to the register list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from register_list.commands import CommandResult, ListBus, ListContext, guarded
from register_list.host import PromptCallback, RenderedLine
from register_list.keymaps import (
    KeymapRegistry,
    KeymapResolver,
    key_token,
    load_default_keymaps,
)
from register_list.runtime import telemetry
from register_list.store import RegisterStore
from register_list.view import RegisterListViewModel, RenderedView, ViewSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the controller invokes on the hosting UI.

    Together they satisfy ``register_list.host.RegisterHost``.
    """

    render_lines: Callable[[Sequence[RenderedLine], int], None]
    move_cursor: Callable[[int], None] = _noop
    update_status: Callable[[str], None] = _noop
    close_view: Callable[[], None] = _noop
    place_on_clipboard: Callable[[str], None] = _noop
    insert_register: Callable[[str], None] = _noop
    jump_to_register: Callable[[str, Any], None] = _noop
    prompt: Callable[[str, str, PromptCallback], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class RegisterListController:
    """Dispatches keys through the keymap resolver into list commands.

    One controller outlives many openings of the view: its ``session`` keeps
    the type filter and the last activated key between them.
    """

    EVENTS = (
        "list.render",
        "list.error",
        "list.close",
        "register.activate",
        "register.delete",
        "register.bump",
        "register.edit",
        "register.rename",
    )

    def __init__(
        self,
        store: RegisterStore,
        hooks: TextualUIHooks,
        *,
        session: Optional[ViewSession] = None,
        keymap_registry: Optional[KeymapRegistry] = None,
        keymap_resolver: Optional[KeymapResolver] = None,
    ) -> None:
        self.hooks = hooks
        self.logger = telemetry.get_logger("register_list.controller")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="register_list.keymaps"
        )
        if keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="register_list.keymaps"
        )
        self.context = ListContext(
            view=RegisterListViewModel(
                store, session, logger_name="register_list.view"
            ),
            host=hooks,
            bus=ListBus(),
        )
        self._pending: List[str] = []
        self._subscribe_events()

    @property
    def view(self) -> RegisterListViewModel:
        return self.context.view

    @property
    def session(self) -> ViewSession:
        return self.context.view.session

    @property
    def cursor_line(self) -> int:
        return self.context.cursor_line

    @property
    def is_open(self) -> bool:
        return self.context.is_open

    def open(self) -> RenderedView:
        """Render the list, focusing the last activated key when visible."""

        self.context.is_open = True
        self._pending.clear()
        rendered = self.view.open()
        self.context.show(rendered)
        telemetry.record_event(
            "list.open",
            data={"rows": len(rendered.rows), "cursor": rendered.cursor_line},
        )
        return rendered

    def move_to(self, line: int) -> None:
        """Sync the cursor after the host moved it (e.g. a mouse click)."""

        self.context.cursor_line = max(0, min(line, self.context.line_count - 1))

    def handle_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> CommandResult:
        del text
        if not self.context.is_open:
            return CommandResult(consumed=False, status="closed")

        token = key_token(key, modifiers)
        self._log_state("key ->", key=token)
        self._pending.append(token)
        result = self.keymap_resolver.resolve(tuple(self._pending))

        if result.status == "pending":
            return CommandResult(status="pending", message=" ".join(self._pending))

        sequence = " ".join(self._pending)
        self._pending.clear()
        if result.status == "miss" or result.match is None:
            outcome = CommandResult(
                consumed=False, status="unbound", message=f"{sequence} is undefined"
            )
            self.hooks.update_status(outcome.message or "")
            return outcome

        match = result.match
        with telemetry.span(
            f"list::{match.command.id}",
            logger_name="register_list.controller",
            metadata={"key": sequence, "line": self.context.cursor_line},
        ):
            outcome = guarded(self.context, lambda: match.command.run(self.context))
        self._log_state("result <-", status=outcome.status, message=outcome.message)
        return outcome

    def _subscribe_events(self) -> None:
        for event in self.EVENTS:
            self.context.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        if name != "list.render":
            self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "open": self.context.is_open,
            "cursor": self.context.cursor_line,
            "types": "".join(sorted(t.value for t in self.session.type_filter)),
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["RegisterListController", "TextualUIHooks"]
