"""Register payload variants and the entry type that pairs them with a key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class StyleSpan:
    """Display attribute covering ``[start, end)`` of a string."""

    start: int
    end: int
    style: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def clip(self, limit: int) -> Optional["StyleSpan"]:
        if self.start >= limit:
            return None
        return StyleSpan(self.start, min(self.end, limit), self.style)

    def shift(self, offset: int) -> "StyleSpan":
        return StyleSpan(self.start + offset, self.end + offset, self.style)


@dataclass(slots=True)
class Marker:
    """Position inside a host buffer.

    ``buffer`` becomes ``None`` once the host closes the buffer; ``position``
    may be ``None`` while the buffer still exists.
    """

    buffer: Optional[str]
    position: Optional[int] = None

    @property
    def stale(self) -> bool:
        return self.buffer is None

    def detach(self) -> None:
        self.buffer = None
        self.position = None


@dataclass(frozen=True, slots=True)
class Text:
    value: str
    styles: Tuple[StyleSpan, ...] = ()


@dataclass(frozen=True, slots=True)
class Number:
    value: int


@dataclass(frozen=True, slots=True)
class Location:
    marker: Marker


@dataclass(frozen=True, slots=True)
class RectangleBlock:
    lines: Tuple[str, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "RectangleBlock":
        return cls(tuple(lines))


@dataclass(frozen=True, slots=True)
class WindowLayout:
    frame_name: str
    snapshot: Any = None


@dataclass(frozen=True, slots=True)
class FrameLayout:
    snapshot: Any = None


@dataclass(frozen=True, slots=True)
class Unprintable:
    raw: Any = None


@dataclass(frozen=True, slots=True)
class Malformed:
    diagnostic: str
    raw: Any = None


Payload = Union[
    Text,
    Number,
    Location,
    RectangleBlock,
    WindowLayout,
    FrameLayout,
    Unprintable,
    Malformed,
]

PAYLOAD_TYPES: Tuple[type, ...] = (
    Text,
    Number,
    Location,
    RectangleBlock,
    WindowLayout,
    FrameLayout,
    Unprintable,
    Malformed,
)


@dataclass(frozen=True, slots=True)
class RegisterEntry:
    key: str
    payload: Any


def payload_from_value(value: Any) -> Payload:
    """Wrap a plain host value in the matching payload variant."""

    if isinstance(value, PAYLOAD_TYPES):
        return value
    if isinstance(value, bool):
        return Malformed(f"boolean is not a register value: {value!r}", raw=value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, int):
        return Number(value)
    if isinstance(value, Marker):
        return Location(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return RectangleBlock(tuple(value))
    return Malformed(
        f"unsupported register value of type {type(value).__name__}", raw=value
    )


__all__ = [
    "StyleSpan",
    "Marker",
    "Text",
    "Number",
    "Location",
    "RectangleBlock",
    "WindowLayout",
    "FrameLayout",
    "Unprintable",
    "Malformed",
    "Payload",
    "PAYLOAD_TYPES",
    "RegisterEntry",
    "payload_from_value",
]
