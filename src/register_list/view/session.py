"""Per-view state carried between refreshes and view openings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .classify import PRINTABLE_TAGS, TypeTag
from .formatting import FormatOptions


@dataclass(slots=True)
class ViewSession:
    """State the controller keeps alive so reopening the list remembers it."""

    type_filter: FrozenSet[TypeTag] = field(default_factory=lambda: PRINTABLE_TAGS)
    fontify: bool = False
    max_width: Optional[int] = None
    elide_length: Optional[int] = None
    last_key: Optional[str] = None

    @property
    def format_options(self) -> FormatOptions:
        return FormatOptions(
            max_width=self.max_width,
            elide_length=self.elide_length,
            fontify=self.fontify,
        )


__all__ = ["ViewSession"]
