"""
Protocols for the collaborators a NodeList is built on.

Any parser, HTTP client or test runner can be plugged in as long as it satisfies
these structural interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol, Sized, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """A single matched node of a queried document."""

    def text(self) -> str:
        """Rendered text of the node and its descendants, markup stripped."""
        ...

    def inner_html(self) -> str:
        """Serialized markup of the node's children."""
        ...

    def tag_name(self) -> str:
        """Lowercase tag name, e.g. ``"a"``."""
        ...

    def attribute(self, name: str) -> str | None:
        """Attribute value, or None when the attribute is absent."""
        ...


@runtime_checkable
class ElementQuery(Protocol):
    """An ordered, read-only result of running a selector against a document."""

    def count(self) -> int: ...

    def element_at(self, index: int) -> Element: ...


@runtime_checkable
class Fetcher(Protocol):
    """Blocking HTTP GET used for link following."""

    def get(self, url: str) -> Any: ...


@runtime_checkable
class AssertionSink(Protocol):
    """Where assertion outcomes are reported.

    Each method either returns normally or registers a failure according to the
    host test framework's convention.
    """

    def assert_equal(self, expected: Any, actual: Any) -> None: ...

    def assert_string_contains(self, haystack: str, needle: str) -> None: ...

    def assert_count(self, expected: int, collection: Sized) -> None: ...
