"""Exception types raised by the engine."""

from __future__ import annotations


class InvariantError(AssertionError):
    """An internal invariant was violated (a bug, not a user error)."""


class EmptySequenceError(ValueError):
    """A window cannot be defined over an empty sequence."""


class WindowSizeError(ValueError):
    """The requested window length is smaller than one."""


def check(condition: bool, message: str) -> None:
    """Raise :class:`InvariantError` with ``message`` unless ``condition`` holds."""

    if not condition:
        raise InvariantError(message)
