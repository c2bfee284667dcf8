"""Display strings for register payloads."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from register_list.store.payloads import (
    FrameLayout,
    Location,
    Number,
    RectangleBlock,
    StyleSpan,
    Text,
    WindowLayout,
)

from .classify import TypeTag

ELLIPSIS = "..."
RECTANGLE_SEPARATOR = "\\ "
UNKNOWN_TYPE = "[Error: unknow type]"

_CONTROL_WHITESPACE = re.compile(r"[\n\r\t]")


@dataclass(frozen=True, slots=True)
class FormatOptions:
    max_width: Optional[int] = None
    elide_length: Optional[int] = None
    fontify: bool = False


@dataclass(frozen=True, slots=True)
class DisplayString:
    text: str
    spans: Tuple[StyleSpan, ...] = ()

    def __str__(self) -> str:
        return self.text

    def truncate(self, limit: int) -> "DisplayString":
        limit = max(0, limit)
        if len(self.text) <= limit:
            return self
        return DisplayString(self.text[:limit], _clip_spans(self.spans, limit))


def _clip_spans(spans: Tuple[StyleSpan, ...], limit: int) -> Tuple[StyleSpan, ...]:
    clipped = (span.clip(limit) for span in spans)
    return tuple(span for span in clipped if span is not None)


def describe_marker(payload: Location) -> str:
    marker = payload.marker
    if marker.buffer is not None and marker.position is not None:
        return f"[Marker at point {marker.position} in buffer {marker.buffer}]"
    if marker.buffer is not None:
        return f"[Marker in buffer {marker.buffer}]"
    return "[Marker gone?]"


def _raw_display(payload: Any, tag: TypeTag) -> DisplayString:
    if tag is TypeTag.MARKER and isinstance(payload, Location):
        return DisplayString(describe_marker(payload))
    if tag is TypeTag.NUMBER and isinstance(payload, Number):
        return DisplayString(f"Number: {payload.value}")
    if tag is TypeTag.TEXT and isinstance(payload, Text):
        # Substitution is one-for-one so style offsets stay valid.
        return DisplayString(_CONTROL_WHITESPACE.sub(" ", payload.value), payload.styles)
    if tag is TypeTag.RECTANGLE and isinstance(payload, RectangleBlock):
        return DisplayString(RECTANGLE_SEPARATOR.join(payload.lines))
    if tag is TypeTag.WINDOW and isinstance(payload, WindowLayout):
        return DisplayString(f'[Window configuration in frame "{payload.frame_name}"]')
    if tag is TypeTag.FRAME and isinstance(payload, FrameLayout):
        return DisplayString("[Frame configuration]")
    return DisplayString(UNKNOWN_TYPE)


def format_payload(
    payload: Any, tag: TypeTag, options: FormatOptions = FormatOptions()
) -> DisplayString:
    """Render ``payload`` for the Value column.

    Text values longer than ``elide_length`` are shortened to that length,
    ending in ``"..."`` when there is room for it; every type is then
    hard-clamped to ``max_width``. Style spans only survive when ``fontify``
    is set.
    """

    display = _raw_display(payload, tag)
    if not options.fontify and display.spans:
        display = DisplayString(display.text)

    elide = options.elide_length
    if tag is TypeTag.TEXT and elide is not None and len(display.text) > elide:
        if elide <= len(ELLIPSIS):
            display = display.truncate(elide)
        else:
            kept = display.truncate(elide - len(ELLIPSIS))
            display = DisplayString(kept.text + ELLIPSIS, kept.spans)

    if options.max_width is not None:
        display = display.truncate(options.max_width)
    return display


__all__ = [
    "DisplayString",
    "FormatOptions",
    "ELLIPSIS",
    "RECTANGLE_SEPARATOR",
    "UNKNOWN_TYPE",
    "describe_marker",
    "format_payload",
]
