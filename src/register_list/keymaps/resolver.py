"""Trie-based resolution of pending key tokens to list commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Sequence

from register_list.runtime.telemetry import span

from .models import KeyBinding, ListCommand
from .registry import KeymapRegistry


@dataclass(slots=True)
class TrieNode:
    binding: Optional[KeyBinding] = None
    children: Dict[str, "TrieNode"] = field(default_factory=dict)

    def child(self, token: str) -> "TrieNode":
        return self.children.setdefault(token, TrieNode())


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    binding: KeyBinding
    command: ListCommand


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: Literal["match", "pending", "miss"]
    match: Optional[ResolutionMatch] = None
    next_expected: tuple[str, ...] = ()


class KeymapResolver:
    """Walks a trie of the registry's bindings, rebuilt when the registry changes."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cached: Optional[tuple[int, TrieNode]] = None

    def resolve(self, tokens: Sequence[str]) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            metadata={"tokens": " ".join(tokens)},
        ) as handle:
            node = self._trie()
            for token in tokens:
                next_node = node.children.get(token)
                if next_node is None:
                    handle.add_metadata("status", "miss")
                    return ResolutionResult(status="miss")
                node = next_node

            if node.binding is not None:
                command = self._registry.command(node.binding.command_id)
                handle.add_metadata("status", "match")
                return ResolutionResult(
                    status="match", match=ResolutionMatch(node.binding, command)
                )
            if node.children:
                handle.add_metadata("status", "pending")
                return ResolutionResult(
                    status="pending", next_expected=tuple(sorted(node.children))
                )
            handle.add_metadata("status", "miss")
            return ResolutionResult(status="miss")

    def _trie(self) -> TrieNode:
        revision = self._registry.revision()
        if self._cached and self._cached[0] == revision:
            return self._cached[1]
        root = TrieNode()
        for binding in self._registry.bindings():
            node = root
            for token in binding.keys:
                node = node.child(token)
            node.binding = binding
        self._cached = (revision, root)
        return root


__all__ = ["KeymapResolver", "ResolutionMatch", "ResolutionResult"]
