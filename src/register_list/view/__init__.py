"""The register-list view-model and its building blocks."""

from .actions import (
    Action,
    CopyRectangle,
    InsertText,
    JumpTo,
    NoOp,
    perform_action,
    resolve_action,
)
from .classify import PRINTABLE_TAGS, TypeTag, classify, diagnose
from .formatting import DisplayString, FormatOptions, format_payload
from .model import (
    HEADER,
    HEADER_LINES,
    RegisterListViewModel,
    RenderedView,
    bump_number,
)
from .rows import parse_type_filter, row_index_for_key, sort_entries, visible_rows
from .session import ViewSession

__all__ = [
    "Action",
    "CopyRectangle",
    "DisplayString",
    "FormatOptions",
    "HEADER",
    "HEADER_LINES",
    "InsertText",
    "JumpTo",
    "NoOp",
    "PRINTABLE_TAGS",
    "RegisterListViewModel",
    "RenderedView",
    "TypeTag",
    "ViewSession",
    "bump_number",
    "classify",
    "diagnose",
    "format_payload",
    "parse_type_filter",
    "perform_action",
    "resolve_action",
    "row_index_for_key",
    "sort_entries",
    "visible_rows",
]
