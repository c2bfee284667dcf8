"""Register payloads and the in-memory store."""

from .payloads import (
    PAYLOAD_TYPES,
    FrameLayout,
    Location,
    Malformed,
    Marker,
    Number,
    Payload,
    RectangleBlock,
    RegisterEntry,
    StyleSpan,
    Text,
    Unprintable,
    WindowLayout,
    payload_from_value,
)
from .registers import RegisterStore, ensure_key

__all__ = [
    "PAYLOAD_TYPES",
    "FrameLayout",
    "Location",
    "Malformed",
    "Marker",
    "Number",
    "Payload",
    "RectangleBlock",
    "RegisterEntry",
    "RegisterStore",
    "StyleSpan",
    "Text",
    "Unprintable",
    "WindowLayout",
    "ensure_key",
    "payload_from_value",
]
