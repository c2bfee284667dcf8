"""List commands bound to keys in the register list."""

from __future__ import annotations

from register_list.store.payloads import Number, Text
from register_list.view.actions import NoOp, perform_action
from register_list.view.classify import PRINTABLE_TAGS

from .base import CommandArgs, CommandResult, ListContext, guarded


def activate_row(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    action = context.view.activate_row(context.cursor_line)
    if isinstance(action, NoOp):
        return CommandResult(
            status="noop",
            message=action.diagnostic or f"Nothing to do with register {action.key}",
        )
    perform_action(action, context.host)
    context.is_open = False
    context.bus.emit("register.activate", action)
    return CommandResult(status="activate", closed=True)


def delete_row(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    key = context.view.entry_at(context.cursor_line).key
    context.show(context.view.delete_row(context.cursor_line))
    context.bus.emit("register.delete", key)
    return CommandResult(status="delete", message=f"Deleted register {key}")


def bump_row(context: ListContext, args: CommandArgs) -> CommandResult:
    delta = args.delta
    key = context.view.entry_at(context.cursor_line).key
    context.show(context.view.bump_row(context.cursor_line, delta))
    context.bus.emit("register.bump", {"key": key, "delta": delta})
    return CommandResult(status="bump")


def edit_value(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    line = context.cursor_line
    entry = context.view.entry_at(line)
    payload = entry.payload
    if isinstance(payload, Text):
        initial = payload.value
    elif isinstance(payload, Number):
        initial = str(payload.value)
    else:
        initial = ""

    def apply(text: str) -> None:
        def run() -> CommandResult:
            context.show(context.view.edit_value(line, text))
            context.bus.emit("register.edit", entry.key)
            return CommandResult(status="edit", message=f"Updated register {entry.key}")

        guarded(context, run)

    context.host.prompt(f"Value for register {entry.key}: ", initial, apply)
    return CommandResult(status="prompt")


def rename_key(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    line = context.cursor_line
    entry = context.view.entry_at(line)

    def apply(text: str) -> None:
        def run() -> CommandResult:
            context.show(context.view.rename_row(line, text))
            context.bus.emit("register.rename", {"from": entry.key, "to": text})
            return CommandResult(
                status="rename", message=f"Moved register {entry.key} to {text}"
            )

        guarded(context, run)

    context.host.prompt(f"New key for register {entry.key}: ", entry.key, apply)
    return CommandResult(status="prompt")


def refresh(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    context.show(context.view.refresh(focus_key=context.focused_key()))
    return CommandResult(status="refresh")


def toggle_fontify(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    fontify = not context.view.session.fontify
    context.show(
        context.view.refresh(fontify=fontify, focus_key=context.focused_key())
    )
    state = "on" if fontify else "off"
    return CommandResult(status="fontify", message=f"Fontification {state}")


def filter_types(context: ListContext, args: CommandArgs) -> CommandResult:
    if not args.types:
        return show_all_types(context, args)
    types = args.types
    context.show(
        context.view.refresh(type_filter=types, focus_key=context.focused_key())
    )
    return CommandResult(status="filter", message=f"Showing types: {types}")


def show_all_types(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    context.show(
        context.view.refresh(
            type_filter=PRINTABLE_TAGS, focus_key=context.focused_key()
        )
    )
    return CommandResult(status="filter", message="Showing types: all")


def move_down(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    return _move(context, 1)


def move_up(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    return _move(context, -1)


def quit_view(context: ListContext, args: CommandArgs) -> CommandResult:
    del args
    context.host.close_view()
    context.is_open = False
    context.bus.emit("list.close", None)
    return CommandResult(status="quit", closed=True)


def _move(context: ListContext, step: int) -> CommandResult:
    target = max(0, min(context.cursor_line + step, context.line_count - 1))
    context.cursor_line = target
    context.host.move_cursor(target)
    return CommandResult(status="move")


__all__ = [
    "activate_row",
    "bump_row",
    "delete_row",
    "edit_value",
    "filter_types",
    "move_down",
    "move_up",
    "quit_view",
    "refresh",
    "rename_key",
    "show_all_types",
    "toggle_fontify",
]
