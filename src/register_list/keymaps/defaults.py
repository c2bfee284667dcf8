"""Built-in register list commands and their default keys."""

from __future__ import annotations

from typing import Iterable, Sequence

from register_list.commands import core as list_commands
from register_list.commands.base import CommandArgs
from register_list.view.classify import PRINTABLE_TAGS

from .models import KeyBinding, ListCommand
from .registry import KeymapRegistry

_TYPE_NAMES = {
    "S": "strings",
    "N": "numbers",
    "M": "markers",
    "R": "rectangles",
    "W": "window configurations",
    "F": "frame configurations",
    "?": "unprintable registers",
}

DEFAULT_COMMANDS: tuple[ListCommand, ...] = (
    ListCommand(
        id="list.activate",
        handler=list_commands.activate_row,
        description="Insert, copy or jump to the register at point",
    ),
    ListCommand(
        id="list.delete",
        handler=list_commands.delete_row,
        description="Delete the register at point",
    ),
    ListCommand(
        id="list.increment",
        handler=list_commands.bump_row,
        description="Increment the number register at point",
        args=CommandArgs(delta=1),
    ),
    ListCommand(
        id="list.decrement",
        handler=list_commands.bump_row,
        description="Decrement the number register at point",
        args=CommandArgs(delta=-1),
    ),
    ListCommand(
        id="list.edit_value",
        handler=list_commands.edit_value,
        description="Edit the value of the register at point",
    ),
    ListCommand(
        id="list.rename_key",
        handler=list_commands.rename_key,
        description="Move the register at point to another key",
    ),
    ListCommand(
        id="list.refresh",
        handler=list_commands.refresh,
        description="Redisplay the register list",
    ),
    ListCommand(
        id="list.toggle_fontify",
        handler=list_commands.toggle_fontify,
        description="Toggle display attributes on text registers",
    ),
    ListCommand(
        id="list.show_all",
        handler=list_commands.show_all_types,
        description="Show every register type",
    ),
    ListCommand(
        id="list.move_down",
        handler=list_commands.move_down,
        description="Next line",
    ),
    ListCommand(
        id="list.move_up",
        handler=list_commands.move_up,
        description="Previous line",
    ),
    ListCommand(
        id="list.quit",
        handler=list_commands.quit_view,
        description="Close the register list",
    ),
) + tuple(
    ListCommand(
        id=f"list.filter.{tag.value}",
        handler=list_commands.filter_types,
        description=f"Only show {_TYPE_NAMES[tag.value]}",
        args=CommandArgs(types=tag.value),
    )
    for tag in sorted(PRINTABLE_TAGS, key=lambda t: t.value)
)

# command id -> keys that run it
_DEFAULT_KEYS: dict[str, tuple[str, ...]] = {
    "list.activate": ("ENTER", "RETURN"),
    "list.delete": ("d", "DELETE"),
    "list.increment": ("+",),
    "list.decrement": ("-",),
    "list.edit_value": ("e",),
    "list.rename_key": ("r",),
    "list.refresh": ("g",),
    "list.toggle_fontify": ("t",),
    "list.show_all": ("A",),
    "list.move_down": ("j", "DOWN"),
    "list.move_up": ("k", "UP"),
    "list.quit": ("q", "ESC"),
    **{f"list.filter.{tag.value}": (tag.value,) for tag in PRINTABLE_TAGS},
}

DEFAULT_BINDINGS: tuple[KeyBinding, ...] = tuple(
    KeyBinding((key,), command_id)
    for command_id, keys in _DEFAULT_KEYS.items()
    for key in keys
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[KeyBinding] | None = None,
    exclude_keys: Sequence[str] | None = None,
) -> None:
    """Register the built-in commands and their keys.

    ``exclude_keys`` names key signatures to leave unbound. ``extra_bindings``
    are bound last with ``replace=True`` so hosts can rebind keys without
    first excluding the defaults.
    """

    excluded = set(exclude_keys or ())
    for command in DEFAULT_COMMANDS:
        registry.register_command(command, replace=replace)
    for binding in DEFAULT_BINDINGS:
        if binding.signature in excluded:
            continue
        registry.bind(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.bind(binding, replace=True)


__all__ = ["DEFAULT_BINDINGS", "DEFAULT_COMMANDS", "load_default_keymaps"]
