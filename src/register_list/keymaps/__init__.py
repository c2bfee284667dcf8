"""Declarative key bindings for the register list."""

from .models import KeyBinding, ListCommand, key_token
from .registry import KeymapConflictError, KeymapRegistry
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import DEFAULT_BINDINGS, DEFAULT_COMMANDS, load_default_keymaps

__all__ = [
    "KeyBinding",
    "ListCommand",
    "key_token",
    "KeymapRegistry",
    "KeymapConflictError",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "DEFAULT_BINDINGS",
    "DEFAULT_COMMANDS",
    "load_default_keymaps",
]
