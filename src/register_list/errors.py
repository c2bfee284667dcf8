"""Recoverable conditions raised by the register list."""

from __future__ import annotations

from typing import Optional


class RegisterListError(RuntimeError):
    """Base class; the controller reports these as status messages."""

    def __init__(self, message: str, *, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class HeaderRowSelected(RegisterListError):
    """The cursor sits on a header line rather than a register row."""

    def __init__(self, line: int) -> None:
        super().__init__("Cursor is on a header row")
        self.line = line


class RegisterNotFound(RegisterListError):
    """The line or key no longer maps to a register."""


class InvalidOperationForType(RegisterListError):
    def __init__(self, operation: str, tag: str, *, key: Optional[str] = None) -> None:
        super().__init__(f"{operation} is not valid for type {tag}", key=key)
        self.operation = operation
        self.tag = tag


class UnclassifiableType(RegisterListError):
    def __init__(self, diagnostic: str, *, key: Optional[str] = None) -> None:
        super().__init__(diagnostic, key=key)
        self.diagnostic = diagnostic


class InvalidRegisterValue(RegisterListError):
    pass


class InvalidRegisterKey(RegisterListError, ValueError):
    """Register keys are exactly one character."""

    def __init__(self, key: object) -> None:
        super().__init__(
            f"Invalid register key {key!r}",
            key=key if isinstance(key, str) else None,
        )


__all__ = [
    "RegisterListError",
    "HeaderRowSelected",
    "RegisterNotFound",
    "InvalidOperationForType",
    "UnclassifiableType",
    "InvalidRegisterValue",
    "InvalidRegisterKey",
]
