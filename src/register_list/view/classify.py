"""Type tags and payload classification."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from register_list.store.payloads import (
    FrameLayout,
    Location,
    Malformed,
    Number,
    RectangleBlock,
    Text,
    Unprintable,
    WindowLayout,
)


class TypeTag(str, Enum):
    """Single-letter type shown in the list's Type column."""

    TEXT = "S"
    NUMBER = "N"
    MARKER = "M"
    RECTANGLE = "R"
    WINDOW = "W"
    FRAME = "F"
    UNPRINTABLE = "?"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


PRINTABLE_TAGS: FrozenSet[TypeTag] = frozenset(
    tag for tag in TypeTag if tag is not TypeTag.ERROR
)

_TAGS: Dict[type, TypeTag] = {
    Text: TypeTag.TEXT,
    Number: TypeTag.NUMBER,
    Location: TypeTag.MARKER,
    RectangleBlock: TypeTag.RECTANGLE,
    WindowLayout: TypeTag.WINDOW,
    FrameLayout: TypeTag.FRAME,
    Unprintable: TypeTag.UNPRINTABLE,
    Malformed: TypeTag.ERROR,
}


def classify(payload: Any) -> TypeTag:
    return _TAGS.get(type(payload), TypeTag.ERROR)


def diagnose(payload: Any) -> Optional[str]:
    """Explain why ``payload`` classifies as an error, else ``None``."""

    if isinstance(payload, Malformed):
        return payload.diagnostic
    if classify(payload) is TypeTag.ERROR:
        return f"unclassifiable register payload of type {type(payload).__name__}"
    return None


__all__ = ["TypeTag", "PRINTABLE_TAGS", "classify", "diagnose"]
