"""Commands the register list runs in response to key bindings."""

from .base import (
    CommandArgs,
    CommandHandler,
    CommandResult,
    ListBus,
    ListContext,
    guarded,
    report_error,
)
from .core import (
    activate_row,
    bump_row,
    delete_row,
    edit_value,
    filter_types,
    move_down,
    move_up,
    quit_view,
    refresh,
    rename_key,
    show_all_types,
    toggle_fontify,
)

__all__ = [
    "CommandArgs",
    "CommandHandler",
    "CommandResult",
    "ListBus",
    "ListContext",
    "guarded",
    "report_error",
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
