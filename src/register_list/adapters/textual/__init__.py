"""Textual host for the register list."""

from .controller import RegisterListController, TextualUIHooks

__all__ = ["RegisterListController", "TextualUIHooks"]
