"""Environment-driven defaults for new register list sessions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from register_list.runtime.telemetry import env, env_flag
from register_list.view.classify import PRINTABLE_TAGS, TypeTag
from register_list.view.rows import parse_type_filter
from register_list.view.session import ViewSession


def _env_int(name: str) -> Optional[int]:
    raw = env(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass(frozen=True)
class ListConfig:
    type_filter: FrozenSet[TypeTag] = PRINTABLE_TAGS
    fontify: bool = False
    max_width: Optional[int] = None
    elide_length: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ListConfig":
        types = env("TYPES")
        try:
            type_filter = parse_type_filter(types) if types else PRINTABLE_TAGS
        except ValueError:
            type_filter = PRINTABLE_TAGS
        return cls(
            type_filter=type_filter,
            fontify=env_flag("FONTIFY", False),
            max_width=_env_int("MAX_WIDTH"),
            elide_length=_env_int("ELIDE_LENGTH"),
        )

    def new_session(self) -> ViewSession:
        return ViewSession(
            type_filter=self.type_filter,
            fontify=self.fontify,
            max_width=self.max_width,
            elide_length=self.elide_length,
        )


__all__ = ["ListConfig"]
