from __future__ import annotations

import pytest

from register_list.commands import CommandArgs, CommandResult
from register_list.keymaps import (
    DEFAULT_BINDINGS,
    KeyBinding,
    KeymapConflictError,
    KeymapRegistry,
    KeymapResolver,
    ListCommand,
    key_token,
    load_default_keymaps,
)


def make_command(command_id: str, **args: object) -> ListCommand:
    return ListCommand(
        id=command_id,
        handler=lambda context, args: CommandResult(status=command_id),
        args=CommandArgs(**args),  # type: ignore[arg-type]
    )


def build_registry(*bindings: KeyBinding) -> KeymapRegistry:
    registry = KeymapRegistry()
    for command_id in {binding.command_id for binding in bindings}:
        registry.register_command(make_command(command_id))
    for binding in bindings:
        registry.bind(binding)
    return registry


def test_key_token_normalizes_modifiers() -> None:
    assert key_token("x", ("shift", "ctrl", "CTRL")) == "CTRL+SHIFT+x"
    assert key_token("+") == "+"
    with pytest.raises(ValueError):
        key_token("")


def test_binding_requires_keys() -> None:
    with pytest.raises(ValueError):
        KeyBinding((), "list.test")
    assert KeyBinding.of("g g", "list.test").keys == ("g", "g")


def test_binding_requires_registered_command() -> None:
    with pytest.raises(KeyError):
        KeymapRegistry().bind(KeyBinding.of("x", "list.test"))


def test_rebinding_a_key_conflicts_unless_replacing() -> None:
    registry = build_registry(KeyBinding.of("x", "list.test"))
    registry.register_command(make_command("list.other"))
    rival = KeyBinding.of("x", "list.other")

    with pytest.raises(KeymapConflictError):
        registry.bind(rival)

    registry.bind(rival, replace=True)
    assert registry.lookup("x") == rival
    assert list(registry.bindings()) == [rival]


def test_binding_the_same_command_twice_is_harmless() -> None:
    binding = KeyBinding.of("x", "list.test")
    registry = build_registry(binding)
    revision = registry.revision()

    registry.bind(KeyBinding.of("x", "list.test"))

    assert registry.revision() == revision


def test_resolver_match_pending_and_miss() -> None:
    registry = build_registry(KeyBinding.of("g g", "list.top"))
    resolver = KeymapResolver(registry)

    assert resolver.resolve(("g",)).status == "pending"
    assert resolver.resolve(("g",)).next_expected == ("g",)
    match = resolver.resolve(("g", "g"))
    assert match.status == "match"
    assert match.match is not None
    assert match.match.command.id == "list.top"
    assert resolver.resolve(("z",)).status == "miss"


def test_resolver_sees_bindings_added_later() -> None:
    registry = build_registry()
    resolver = KeymapResolver(registry)
    assert resolver.resolve(("x",)).status == "miss"

    registry.register_command(make_command("list.test"))
    registry.bind(KeyBinding.of("x", "list.test"))

    assert resolver.resolve(("x",)).status == "match"

    registry.unbind("x")

    assert resolver.resolve(("x",)).status == "miss"


def test_default_commands_carry_typed_args() -> None:
    registry = KeymapRegistry()
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry)

    plus = resolver.resolve(("+",)).match
    minus = resolver.resolve(("-",)).match
    numbers = resolver.resolve(("N",)).match

    assert plus is not None and plus.command.args.delta == 1
    assert minus is not None and minus.command.args.delta == -1
    assert numbers is not None and numbers.command.args.types == "N"
    assert {b.signature for b in DEFAULT_BINDINGS if b.command_id == "list.activate"} == {
        "ENTER",
        "RETURN",
    }


def test_default_keymaps_accept_overrides() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(
        registry,
        extra_bindings=[KeyBinding.of("d", "list.quit")],
        exclude_keys=["q"],
    )

    assert registry.lookup("d") == KeyBinding.of("d", "list.quit")
    assert registry.lookup("q") is None
    assert registry.lookup("DELETE") == KeyBinding.of("DELETE", "list.delete")


def test_command_runs_handler_with_its_args() -> None:
    seen: list[int] = []

    def handler(context: object, args: CommandArgs) -> CommandResult:
        seen.append(args.delta)
        return CommandResult(status="bump")

    command = ListCommand(id="list.bump", handler=handler, args=CommandArgs(delta=-3))

    result = command.run(None)  # type: ignore[arg-type]

    assert result.status == "bump"
    assert seen == [-3]
