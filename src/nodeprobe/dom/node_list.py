"""
NodeList: a view over the elements a selector matched.

A `NodeList` can hold one or many nodes, and what its accessors return depends on
that count. Reading the text of a single ``h1`` gives back a string:

```python
response.query_selector("h1").text() == "Welcome"
```

With several matches the same call gives a list, in document order:

```python
response.query_selector("li").text() == ["A", "B", "C"]
```

An empty match is always list-shaped (``[]``), never ``None`` and never an error.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional, TypeVar, Union
from urllib.parse import urljoin

import structlog

from ..assertions import Expectation, RaisingAssertionSink
from ..errors import PreconditionViolation, UnknownProperty, UnsupportedInteraction, UsageError
from ..protocols import AssertionSink, Element, ElementQuery, Fetcher
from .adapters import ElementSequence

logger = structlog.get_logger(__name__)

T = TypeVar("T")

NodeOrNodes = Union[T, List[T]]

LINK_TAGS = frozenset({"a"})


class NodeList:
    """Read-only, arity-collapsing wrapper around an element query."""

    # Property name -> zero-argument accessor, resolved by ``get()``.
    _ACCESSORS: Dict[str, Callable[[NodeList], Any]] = {
        "text": lambda nl: nl.text(),
        "inner_html": lambda nl: nl.inner_html(),
        "innerHTML": lambda nl: nl.inner_html(),
        "tag_name": lambda nl: nl.tag_name(),
        "count": lambda nl: nl.size(),
        "size": lambda nl: nl.size(),
    }

    def __init__(
        self,
        query: ElementQuery,
        *,
        sink: Optional[AssertionSink] = None,
        fetcher: Optional[Fetcher] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self._query = query
        self.sink: AssertionSink = sink if sink is not None else RaisingAssertionSink()
        self.fetcher = fetcher
        self.base_url = base_url

    def __repr__(self) -> str:
        return f"<NodeList size={self.size()}>"

    # --- size ---

    def size(self) -> int:
        """Number of matched elements."""
        return self._query.count()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[NodeList]:
        for i in range(self.size()):
            yield self._derive([self._query.element_at(i)])

    # --- accessors ---

    def get_node_or_nodes(self, extractor: Callable[[Element], T]) -> NodeOrNodes[T]:
        """Map ``extractor`` over every element, collapsing a single result.

        With exactly one element the extracted value is returned as is. Otherwise a
        list of values is returned in document order, which is empty for no match.
        """
        count = self._query.count()
        values = [extractor(self._query.element_at(i)) for i in range(count)]
        if count == 1:
            return values[0]
        return values

    def text(self) -> NodeOrNodes[str]:
        """Text content of the node or nodes, with HTML tags removed."""
        return self.get_node_or_nodes(lambda element: element.text())

    def inner_html(self) -> NodeOrNodes[str]:
        """Inner HTML of the node or nodes."""
        return self.get_node_or_nodes(lambda element: element.inner_html())

    def tag_name(self) -> NodeOrNodes[str]:
        return self.get_node_or_nodes(lambda element: element.tag_name())

    def attribute(self, name: str) -> NodeOrNodes[Optional[str]]:
        """Value of attribute ``name``; None for elements that do not carry it."""
        return self.get_node_or_nodes(lambda element: element.attribute(name))

    def get(self, name: str) -> Any:
        """Read a property by name, e.g. ``node_list.get("text")``."""
        accessor = self._ACCESSORS.get(name)
        if accessor is None:
            raise UnknownProperty(name, list(self._ACCESSORS))
        return accessor(self)

    def first(self) -> NodeList:
        """A NodeList over the first matched element only."""
        return self._derive([self._first_element()])

    def expect(self, name: Optional[str] = None) -> Expectation:
        """Start an expectation on the list itself or on one of its properties.

        ```python
        node_list.expect().to_have_count(10)
        node_list.expect("text").to_be("some text content")
        ```
        """
        value = self if name is None else self.get(name)
        return Expectation(value, self.sink)

    # --- assertions ---

    def assert_text_equals(self, expected: Any) -> NodeList:
        """Assert the text content matches ``expected``.

        When several nodes matched, ``expected`` has to be the list of their texts.
        """
        self.sink.assert_equal(expected, self.text())
        return self

    def assert_text_contains(self, needle: str) -> NodeList:
        """Assert ``needle`` is part of the text of the single matched node."""
        count = self.size()
        if count != 1:
            raise UsageError(
                f"assert_text_contains() needs exactly one matched node, got {count}; "
                "narrow the selector or iterate over the NodeList"
            )
        self.sink.assert_string_contains(self._query.element_at(0).text(), needle)
        return self

    def assert_count(self, expected: int) -> NodeList:
        """Assert the number of matched nodes."""
        self.sink.assert_count(expected, self)
        return self

    # --- interaction ---

    def follow(self) -> Any:
        """Follow the first matched link with a GET and return the fetcher's result.

        ```python
        response.query_selector("a.next").follow().assert_ok()
        ```
        """
        element = self._first_element()
        tag = element.tag_name()
        if tag not in LINK_TAGS:
            raise UnsupportedInteraction(tag)

        href = element.attribute("href")
        if href is None:
            raise PreconditionViolation("cannot follow a link without an href attribute")
        if self.fetcher is None:
            raise PreconditionViolation("no HTTP fetcher configured for following links")

        url = urljoin(self.base_url, href) if self.base_url else href
        logger.debug("Following link", href=href, url=url)
        return self.fetcher.get(url)

    # --- helpers ---

    def _first_element(self) -> Element:
        if self._query.count() == 0:
            raise PreconditionViolation("empty sequence: no element matched")
        return self._query.element_at(0)

    def _derive(self, elements: List[Element]) -> NodeList:
        return NodeList(
            ElementSequence(elements),
            sink=self.sink,
            fetcher=self.fetcher,
            base_url=self.base_url,
        )
