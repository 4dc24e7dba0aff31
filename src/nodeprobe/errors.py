"""
Exception hierarchy for nodeprobe.

Two families are kept apart. ``AssertionMismatch`` is how a
test fails, ``UsageError`` and its subclasses mean the test itself is written wrong.
"""

from __future__ import annotations

from typing import Any


class NodeProbeError(Exception):
    """Base exception for all nodeprobe errors."""

    pass


class AssertionMismatch(NodeProbeError, AssertionError):
    """Raised when an observed value does not match the expected one."""

    def __init__(self, expected: Any, actual: Any, message: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"expected {expected!r}, got {actual!r}")


class UsageError(NodeProbeError):
    """Raised when the library is driven in a way it does not support."""

    pass


class UnsupportedInteraction(UsageError):
    """Raised when an element cannot be interacted with."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Not able to interact with `{tag}` elements.")


class PreconditionViolation(UsageError):
    """Raised when an operation's precondition does not hold."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class UnknownProperty(UsageError, AttributeError):
    """Raised when a property name has no registered accessor."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        message = f"Property `{name}` not found on NodeList"
        if available:
            message += f" (available: {', '.join(sorted(available))})"
        super().__init__(message)
        # AttributeError.__init__ resets ``name``.
        self.name = name
