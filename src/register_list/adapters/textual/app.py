"""Executable Textual app: a scratch editor with a register list view."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from rich.text import Text as RichText
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Input, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use register_list.adapters.textual.app"
    ) from exc

from register_list.config import ListConfig
from register_list.host import PromptCallback, RenderedLine
from register_list.runtime import telemetry
from register_list.store import (
    FrameLayout,
    Location,
    Number,
    RectangleBlock,
    RegisterStore,
    Text,
    WindowLayout,
)
from register_list.view.model import HEADER_STYLE
from register_list.view.rows import parse_type_filter

from .controller import RegisterListController, TextualUIHooks

SCRATCH = "*scratch*"
FRAME_NAME = "register-list"

_STYLES = {HEADER_STYLE: "bold underline"}


def seed_demo_registers(store: RegisterStore) -> None:
    store.copy_to_register("a", "hello\tworld")
    store.number_to_register("2", 5)
    store.copy_rectangle_to_register("r", ["first", "second"])
    store.point_to_register("m", SCRATCH, 0)
    store.window_configuration_to_register("w", FRAME_NAME, {"cursor": (0, 0)})
    store.frame_configuration_to_register("f", {"cursor": (0, 0)})


@dataclass
class UIState:
    lines: Tuple[RenderedLine, ...] = ()
    cursor_line: int = 0
    prompt_callback: Optional[PromptCallback] = None


class RegisterListApp(App[None]):
    """Scratch TextArea plus a register list toggled with ctrl+r."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#editor {
		height: 1fr;
	}

	#register-list {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
		display: none;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#prompt {
		display: none;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("ctrl+r", "open_registers", "Registers"),
        ("ctrl+k", "copy_to_register", "Copy to register"),
        ("ctrl+p", "point_to_register", "Point to register"),
        ("ctrl+w", "window_to_register", "Window to register"),
    ]

    def __init__(self, *, config: ListConfig, demo: bool = False) -> None:
        super().__init__()
        self._config = config
        self._state = UIState()
        self.store = RegisterStore()
        if demo:
            seed_demo_registers(self.store)
        self.controller: RegisterListController | None = None
        self._editor: TextArea | None = None
        self._list_widget: Static | None = None
        self._status_widget: Static | None = None
        self._prompt_widget: Input | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._editor = TextArea("", id="editor")
        self._list_widget = Static("", id="register-list")
        self._status_widget = Static("", id="status-line")
        self._prompt_widget = Input(id="prompt")
        yield self._editor
        yield self._list_widget
        yield self._status_widget
        yield self._prompt_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            render_lines=self._render_lines,
            move_cursor=self._move_cursor,
            update_status=self._update_status,
            close_view=self._close_view,
            place_on_clipboard=self._place_on_clipboard,
            insert_register=self._insert_register,
            jump_to_register=self._jump_to_register,
            prompt=self._prompt,
            log=lambda line: telemetry.get_logger("register_list.app").debug(line),
        )
        self.controller = RegisterListController(
            self.store, hooks, session=self._config.new_session()
        )
        if self._editor:
            self._editor.focus()

    # Editor-side commands that create registers.

    def action_open_registers(self) -> None:
        if not self.controller or self.controller.is_open:
            return
        if self._list_widget:
            self._list_widget.display = True
        self.set_focus(None)
        self.controller.open()

    def action_copy_to_register(self) -> None:
        text = self._editor.selected_text if self._editor else ""
        self._prompt(
            "Copy selection to register: ",
            "",
            lambda key: self._store_command(
                lambda: self.store.copy_to_register(key, text)
            ),
        )

    def action_point_to_register(self) -> None:
        offset = self._cursor_offset()
        self._prompt(
            "Point to register: ",
            "",
            lambda key: self._store_command(
                lambda: self.store.point_to_register(key, SCRATCH, offset)
            ),
        )

    def action_window_to_register(self) -> None:
        snapshot = {"cursor": self._editor.cursor_location if self._editor else (0, 0)}
        self._prompt(
            "Window configuration to register: ",
            "",
            lambda key: self._store_command(
                lambda: self.store.window_configuration_to_register(
                    key, FRAME_NAME, snapshot
                )
            ),
        )

    def _store_command(self, command: Any) -> None:
        try:
            payload = command()
        except ValueError as exc:
            self._update_status(str(exc))
            return
        self._update_status(f"Stored {type(payload).__name__}")

    # Key routing.

    async def on_key(self, event: events.Key) -> None:
        if not self.controller or not self.controller.is_open:
            return
        if self._state.prompt_callback is not None:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text = normalized
        self.controller.handle_key(key, text=text)
        event.stop()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        callback = self._state.prompt_callback
        self._state.prompt_callback = None
        if self._prompt_widget:
            self._prompt_widget.display = False
        if callback is not None:
            callback(event.value)
        if self.controller and not self.controller.is_open and self._editor:
            self._editor.focus()

    # Host primitives handed to the controller.

    def _render_lines(self, lines: Sequence[RenderedLine], cursor_line: int) -> None:
        self._state.lines = tuple(lines)
        self._state.cursor_line = cursor_line
        self._repaint()

    def _move_cursor(self, line: int) -> None:
        self._state.cursor_line = line
        self._repaint()

    def _repaint(self) -> None:
        if not self._list_widget:
            return
        rendered = RichText()
        for index, line in enumerate(self._state.lines):
            start = len(rendered)
            rendered.append(line.text)
            for span in line.styles:
                style = _STYLES.get(span.style, span.style)
                rendered.stylize(style, start + span.start, start + span.end)
            if index == self._state.cursor_line:
                rendered.stylize("reverse", start, len(rendered))
            rendered.append("\n")
        self._list_widget.update(rendered)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _close_view(self) -> None:
        if self._list_widget:
            self._list_widget.display = False
        if self._editor:
            self._editor.focus()

    def _place_on_clipboard(self, text: str) -> None:
        self.copy_to_clipboard(text)

    def _insert_register(self, key: str) -> None:
        payload = self.store.get(key)
        if isinstance(payload, Text):
            text = payload.value
        elif isinstance(payload, Number):
            text = str(payload.value)
        elif isinstance(payload, RectangleBlock):
            text = "\n".join(payload.lines)
        else:
            self._update_status(f"Register {key} does not contain text")
            return
        if self._editor:
            self._editor.insert(text)

    def _jump_to_register(self, key: str, payload: Any) -> None:
        if not self._editor:
            return
        if isinstance(payload, Location):
            marker = payload.marker
            if marker.buffer != SCRATCH or marker.position is None:
                self._update_status(f"Register {key} points to a closed buffer")
                return
            self._editor.move_cursor(self._location_for_offset(marker.position))
        elif isinstance(payload, (WindowLayout, FrameLayout)):
            snapshot = payload.snapshot if isinstance(payload.snapshot, dict) else {}
            self._editor.move_cursor(tuple(snapshot.get("cursor", (0, 0))))
            self._update_status(f"Restored configuration from register {key}")

    def _prompt(self, label: str, initial: str, callback: PromptCallback) -> None:
        if not self._prompt_widget:
            return
        self._state.prompt_callback = callback
        self._prompt_widget.placeholder = label
        self._prompt_widget.value = initial
        self._prompt_widget.display = True
        self._prompt_widget.focus()

    # Helpers.

    def _cursor_offset(self) -> int:
        if not self._editor:
            return 0
        row, col = self._editor.cursor_location
        lines = self._editor.text.split("\n")
        return sum(len(line) + 1 for line in lines[:row]) + col

    def _location_for_offset(self, offset: int) -> Tuple[int, int]:
        lines = self._editor.text.split("\n") if self._editor else [""]
        running = 0
        for row, line in enumerate(lines):
            if offset <= running + len(line):
                return (row, offset - running)
            running += len(line) + 1
        return (len(lines) - 1, len(lines[-1]))

    @staticmethod
    def _normalize_key(event: events.Key) -> Optional[Tuple[str, Optional[str]]]:
        key = event.key
        if key in {"ctrl+c", "ctrl+q"}:
            return None
        named = {
            "escape": "ESC",
            "enter": "ENTER",
            "return": "ENTER",
            "up": "UP",
            "down": "DOWN",
            "delete": "DELETE",
        }
        if key in named:
            return (named[key], None)
        if event.character and event.character.isprintable():
            return (event.character, event.character)
        return (key.upper(), None)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse and edit registers.")
    parser.add_argument(
        "--types",
        help="Register types to list, e.g. 'SN' or 'N error' (default: all printable types)",
    )
    parser.add_argument(
        "--fontify",
        action="store_true",
        default=None,
        help="Keep display attributes of text registers",
    )
    parser.add_argument("--max-width", type=int, help="Clamp values to this width")
    parser.add_argument(
        "--elide-length", type=int, help="Shorten long text values with '...'"
    )
    parser.add_argument(
        "--demo", action="store_true", help="Start with a few sample registers"
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ListConfig:
    base = ListConfig.from_env()
    return ListConfig(
        type_filter=parse_type_filter(args.types) if args.types else base.type_filter,
        fontify=base.fontify if args.fontify is None else args.fontify,
        max_width=args.max_width or base.max_width,
        elide_length=args.elide_length or base.elide_length,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="quiet")
    app = RegisterListApp(config=build_config(args), demo=args.demo)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
