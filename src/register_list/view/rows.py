"""Row projection: sorting, type filtering, and key lookup."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional, Sequence, Tuple, Union

from register_list.store.payloads import RegisterEntry

from .classify import PRINTABLE_TAGS, TypeTag, classify

TypeFilterSpec = Union[str, Iterable[Union[str, TypeTag]], None]


def parse_type_filter(spec: TypeFilterSpec) -> FrozenSet[TypeTag]:
    """Normalize ``"SN"``, ``"[SN]"``, ``"N error"`` or an iterable of tags.

    Letters in a string are one tag each; ``error`` is matched as a word.
    ``None`` means every printable tag.
    """

    if spec is None:
        return PRINTABLE_TAGS
    if isinstance(spec, TypeTag):
        return frozenset((spec,))
    if isinstance(spec, str):
        items: Iterable[Union[str, TypeTag]] = _split_letters(spec)
    else:
        items = spec
    tags = set()
    for item in items:
        try:
            tags.add(TypeTag(item))
        except ValueError as exc:
            raise ValueError(f"Unknown register type {item!r}") from exc
    if not tags:
        raise ValueError("Type filter cannot be empty")
    return frozenset(tags)


def _split_letters(spec: str) -> list[str]:
    items: list[str] = []
    for word in spec.strip().strip("[]").split():
        if word == TypeTag.ERROR.value:
            items.append(word)
        else:
            items.extend(word)
    return items


def sort_entries(entries: Iterable[RegisterEntry]) -> Tuple[RegisterEntry, ...]:
    return tuple(sorted(entries, key=lambda entry: str(entry.key)))


def visible_rows(
    entries: Iterable[RegisterEntry], type_filter: TypeFilterSpec = None
) -> Tuple[RegisterEntry, ...]:
    """Sorted projection of ``entries`` restricted to ``type_filter``.

    The input is never reordered; callers get a fresh tuple.
    """

    allowed = parse_type_filter(type_filter)
    return tuple(
        entry for entry in sort_entries(entries) if classify(entry.payload) in allowed
    )


def row_index_for_key(rows: Sequence[RegisterEntry], key: str) -> Optional[int]:
    for index, entry in enumerate(rows):
        if entry.key == key:
            return index
    return None


__all__ = [
    "TypeFilterSpec",
    "parse_type_filter",
    "row_index_for_key",
    "sort_entries",
    "visible_rows",
]
