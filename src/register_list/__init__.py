"""Browse, filter, edit and invoke editor registers from a list view."""

__all__ = [
    "adapters",
    "commands",
    "config",
    "errors",
    "host",
    "keymaps",
    "runtime",
    "store",
    "view",
]

__version__ = "0.1.0"
