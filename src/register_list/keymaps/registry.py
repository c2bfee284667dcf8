"""Registry of list commands and the key bindings that trigger them."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from register_list.runtime.telemetry import span

from .models import KeyBinding, ListCommand


class KeymapConflictError(RuntimeError):
    """Raised when a key sequence is already bound to another command."""

    def __init__(self, binding: KeyBinding, existing: KeyBinding) -> None:
        super().__init__(
            f"'{binding.signature}' is bound to '{existing.command_id}', "
            f"cannot bind it to '{binding.command_id}'"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns the list commands and one binding per key signature."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, ListCommand] = {}
        # key signature -> binding
        self._bindings: Dict[str, KeyBinding] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def command(self, command_id: str) -> ListCommand:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register_command(
        self, command: ListCommand, *, replace: bool = False
    ) -> ListCommand:
        with span(
            "keymaps::register_command",
            logger_name=self._logger_name,
            metadata={"command_id": command.id},
        ):
            if not replace and command.id in self._commands:
                raise ValueError(f"Command '{command.id}' already registered")
            self._commands[command.id] = command
            return command

    def bind(self, binding: KeyBinding, *, replace: bool = False) -> KeyBinding:
        with span(
            "keymaps::bind",
            logger_name=self._logger_name,
            metadata={"keys": binding.signature, "command_id": binding.command_id},
        ) as handle:
            if binding.command_id not in self._commands:
                handle.add_metadata("missing_command", binding.command_id)
                raise KeyError(
                    f"'{binding.signature}' references unknown command "
                    f"'{binding.command_id}'"
                )
            existing = self._bindings.get(binding.signature)
            if existing == binding:
                return binding
            if existing is not None and not replace:
                handle.add_metadata("conflict", existing.command_id)
                raise KeymapConflictError(binding, existing)
            self._bindings[binding.signature] = binding
            self._revision += 1
            return binding

    def unbind(self, signature: str) -> Optional[KeyBinding]:
        binding = self._bindings.pop(signature, None)
        if binding is not None:
            self._revision += 1
        return binding

    def lookup(self, signature: str) -> Optional[KeyBinding]:
        return self._bindings.get(signature)

    def bindings(self) -> Iterator[KeyBinding]:
        return iter(tuple(self._bindings.values()))


__all__ = ["KeymapRegistry", "KeymapConflictError"]
