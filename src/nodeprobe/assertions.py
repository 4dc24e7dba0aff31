"""
Assertion-reporting sinks and a small fluent expectation API.

Sinks follow pytest's convention: a failed check raises ``AssertionMismatch``, which
is an ``AssertionError`` and therefore shows up as an ordinary test failure.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from typing import Any, List, Sized

import structlog

from .errors import AssertionMismatch, UsageError
from .protocols import AssertionSink

logger = structlog.get_logger(__name__)


def _same(expected: Any, actual: Any) -> bool:
    """Strict equality: types must agree, sequences are compared item by item."""
    if isinstance(expected, (list, tuple)) and isinstance(actual, (list, tuple)):
        return len(expected) == len(actual) and all(_same(e, a) for e, a in zip(expected, actual))
    return type(expected) is type(actual) and expected == actual


def _lines(value: Any) -> List[str]:
    if isinstance(value, str):
        return value.splitlines() or [""]
    if isinstance(value, (list, tuple)):
        return [repr(item) for item in value]
    return [repr(value)]


def render_diff(expected: Any, actual: Any) -> str:
    """Render a unified diff between two values, one item or line per row."""
    diff = difflib.unified_diff(
        _lines(expected),
        _lines(actual),
        fromfile="expected",
        tofile="actual",
        lineterm="",
    )
    return "\n".join(diff)


class RaisingAssertionSink:
    """Sink that raises on the first failed check."""

    def assert_equal(self, expected: Any, actual: Any) -> None:
        if _same(expected, actual):
            return
        message = f"Failed asserting that {actual!r} is identical to {expected!r}."
        diff = render_diff(expected, actual)
        if diff:
            message = f"{message}\n{diff}"
        self._fail(expected, actual, message)

    def assert_string_contains(self, haystack: str, needle: str) -> None:
        if needle in haystack:
            return
        self._fail(needle, haystack, f"Failed asserting that {haystack!r} contains {needle!r}.")

    def assert_count(self, expected: int, collection: Sized) -> None:
        actual = len(collection)
        if actual == expected:
            return
        self._fail(expected, actual, f"Failed asserting that actual size {actual} matches expected size {expected}.")

    def _fail(self, expected: Any, actual: Any, message: str) -> None:
        logger.debug("Assertion failed", expected=expected, actual=actual)
        raise AssertionMismatch(expected, actual, message)


@dataclass
class RecordingAssertionSink:
    """Soft-assertion sink.

    Failures are collected instead of raised, so a test can check several things
    about a page and see every mismatch at once. Call ``raise_if_failed()`` at the
    end of the test.
    """

    failures: List[AssertionMismatch] = field(default_factory=list)
    _delegate: RaisingAssertionSink = field(default_factory=RaisingAssertionSink, repr=False)

    def assert_equal(self, expected: Any, actual: Any) -> None:
        try:
            self._delegate.assert_equal(expected, actual)
        except AssertionMismatch as exc:
            self.failures.append(exc)

    def assert_string_contains(self, haystack: str, needle: str) -> None:
        try:
            self._delegate.assert_string_contains(haystack, needle)
        except AssertionMismatch as exc:
            self.failures.append(exc)

    def assert_count(self, expected: int, collection: Sized) -> None:
        try:
            self._delegate.assert_count(expected, collection)
        except AssertionMismatch as exc:
            self.failures.append(exc)

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def raise_if_failed(self) -> None:
        """Raise one AssertionMismatch summarising every recorded failure."""
        if not self.failures:
            return
        summary = "\n\n".join(f"[{i}] {failure}" for i, failure in enumerate(self.failures, start=1))
        raise AssertionMismatch(
            [f.expected for f in self.failures],
            [f.actual for f in self.failures],
            f"{len(self.failures)} soft assertion(s) failed:\n{summary}",
        )


class Expectation:
    """Fluent checks over a single value, reported through a sink.

    ```python
    response.query_selector("li").expect().to_have_count(3)
    response.query_selector("h1").expect("text").to_be("Welcome")
    ```
    """

    def __init__(self, value: Any, sink: AssertionSink) -> None:
        self.value = value
        self.sink = sink

    def to_be(self, expected: Any) -> Expectation:
        self.sink.assert_equal(expected, self.value)
        return self

    def to_contain(self, needle: str) -> Expectation:
        if not isinstance(self.value, str):
            raise UsageError(f"to_contain() needs a string value, got {type(self.value).__name__}")
        self.sink.assert_string_contains(self.value, needle)
        return self

    def to_have_count(self, expected: int) -> Expectation:
        self.sink.assert_count(expected, self.value)
        return self
