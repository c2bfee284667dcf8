"""List commands and the key bindings that run them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from register_list.commands.base import (
    CommandArgs,
    CommandHandler,
    CommandResult,
    ListContext,
)


def key_token(key: str, modifiers: Iterable[str] = ()) -> str:
    """Spell one key press the way bindings store it, e.g. ``CTRL+SHIFT+x``."""

    if not key:
        raise ValueError("key cannot be empty")
    mods = sorted({mod.strip().upper() for mod in modifiers if mod.strip()})
    return "+".join([*mods, key])


@dataclass(frozen=True, slots=True)
class ListCommand:
    id: str
    handler: CommandHandler
    description: str = ""
    args: CommandArgs = field(default_factory=CommandArgs)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("command id cannot be empty")

    def run(self, context: ListContext) -> CommandResult:
        return self.handler(context, self.args)


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Key tokens pressed in order, bound to a command id.

    The registry keys bindings by ``signature``, so one key sequence runs at
    most one command.
    """

    keys: tuple[str, ...]
    command_id: str

    def __post_init__(self) -> None:
        if not self.keys or not all(self.keys):
            raise ValueError("binding needs at least one non-empty key")
        if not self.command_id:
            raise ValueError("binding command_id cannot be empty")

    @classmethod
    def of(cls, keys: str, command_id: str) -> "KeyBinding":
        """Build a binding from space-separated tokens, e.g. ``"g g"``."""

        return cls(tuple(keys.split()), command_id)

    @property
    def signature(self) -> str:
        return " ".join(self.keys)


__all__ = ["KeyBinding", "ListCommand", "key_token"]
