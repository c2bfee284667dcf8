"""In-memory register store a host can hand to the register list."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from register_list.errors import (
    InvalidOperationForType,
    InvalidRegisterKey,
    RegisterNotFound,
)
from register_list.runtime import telemetry

from .payloads import (
    FrameLayout,
    Location,
    Marker,
    Number,
    RectangleBlock,
    RegisterEntry,
    StyleSpan,
    Text,
    WindowLayout,
)


def ensure_key(key: object) -> str:
    if not isinstance(key, str) or len(key) != 1:
        raise InvalidRegisterKey(key)
    return key


class RegisterStore:
    """Keyed register slots kept in insertion/mutation order.

    Writing to an existing key drops the old entry and appends the new one,
    so iteration order reflects the most recent mutations last.
    """

    def __init__(self, entries: Iterable[Tuple[str, Any]] = ()) -> None:
        self._slots: Dict[str, Any] = {}
        for key, payload in entries:
            self.upsert_entry(key, payload)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, key: object) -> bool:
        return key in self._slots

    def __iter__(self) -> Iterator[RegisterEntry]:
        return iter(self.entries())

    def entries(self) -> Tuple[RegisterEntry, ...]:
        return tuple(RegisterEntry(key, value) for key, value in self._slots.items())

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._slots)

    def get(self, key: str) -> Optional[Any]:
        return self._slots.get(key)

    def upsert_entry(self, key: str, payload: Any) -> RegisterEntry:
        ensure_key(key)
        self._slots.pop(key, None)
        self._slots[key] = payload
        telemetry.record_event(
            "register.upsert",
            level="debug",
            data={"key": key, "kind": type(payload).__name__},
        )
        return RegisterEntry(key, payload)

    def remove_entry(self, key: str) -> RegisterEntry:
        try:
            payload = self._slots.pop(key)
        except KeyError as exc:
            raise RegisterNotFound(f"No register {key!r}", key=key) from exc
        telemetry.record_event("register.remove", level="debug", data={"key": key})
        return RegisterEntry(key, payload)

    # Host commands that create registers.

    def copy_to_register(
        self, key: str, text: str, *, styles: Iterable[StyleSpan] = ()
    ) -> Text:
        payload = Text(text, tuple(styles))
        self.upsert_entry(key, payload)
        return payload

    def append_to_register(self, key: str, text: str) -> Text:
        existing = self._slots.get(key)
        if existing is None:
            return self.copy_to_register(key, text)
        if not isinstance(existing, Text):
            raise InvalidOperationForType("append", type(existing).__name__, key=key)
        payload = Text(existing.value + text, existing.styles)
        self.upsert_entry(key, payload)
        return payload

    def number_to_register(self, key: str, number: int) -> Number:
        payload = Number(int(number))
        self.upsert_entry(key, payload)
        return payload

    def increment_register(self, key: str, delta: int = 1) -> Number:
        existing = self._slots.get(key)
        if existing is None:
            raise RegisterNotFound(f"No register {key!r}", key=key)
        if not isinstance(existing, Number):
            raise InvalidOperationForType(
                "increment", type(existing).__name__, key=key
            )
        return self.number_to_register(key, existing.value + delta)

    def point_to_register(self, key: str, buffer: str, position: int) -> Location:
        payload = Location(Marker(buffer, position))
        self.upsert_entry(key, payload)
        return payload

    def copy_rectangle_to_register(
        self, key: str, lines: Iterable[str]
    ) -> RectangleBlock:
        payload = RectangleBlock.from_lines(lines)
        self.upsert_entry(key, payload)
        return payload

    def window_configuration_to_register(
        self, key: str, frame_name: str, snapshot: Any = None
    ) -> WindowLayout:
        payload = WindowLayout(frame_name, snapshot)
        self.upsert_entry(key, payload)
        return payload

    def frame_configuration_to_register(
        self, key: str, snapshot: Any = None
    ) -> FrameLayout:
        payload = FrameLayout(snapshot)
        self.upsert_entry(key, payload)
        return payload

    def close_buffer(self, name: str) -> int:
        """Detach every marker pointing into ``name``; return how many."""

        detached = 0
        for payload in self._slots.values():
            if isinstance(payload, Location) and payload.marker.buffer == name:
                payload.marker.detach()
                detached += 1
        return detached


__all__ = ["RegisterStore", "ensure_key"]
