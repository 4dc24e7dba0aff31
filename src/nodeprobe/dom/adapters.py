"""
Element-query adapters over real HTML parsers.

selectolax is the default backend for speed; BeautifulSoup is available for
markup selectolax handles differently, or when ``soupsieve``'s selector dialect is
needed.
"""

from __future__ import annotations

from typing import List, Sequence

from bs4 import Tag
from selectolax.lexbor import LexborNode

from ..protocols import Element


def normalize_whitespace(text: str) -> str:
    """Trim and collapse runs of whitespace to a single space."""
    return " ".join(text.split())


class SelectolaxElement:
    """`Element` backed by a selectolax (lexbor) node.

    ``inner_html()`` is lexbor's own serialisation, e.g. ``<br>`` and double-quoted,
    entity-escaped attribute values.
    """

    __slots__ = ("node",)

    def __init__(self, node: LexborNode) -> None:
        self.node = node

    def text(self) -> str:
        return normalize_whitespace(self.node.text(deep=True))

    def inner_html(self) -> str:
        return "".join(child.html or "" for child in self.node.iter(include_text=True))

    def tag_name(self) -> str:
        return (self.node.tag or "").lower()

    def attribute(self, name: str) -> str | None:
        attributes = self.node.attributes
        if name not in attributes:
            return None
        # Boolean attributes (``<input disabled>``) carry no value.
        return attributes[name] or ""


class SoupElement:
    """`Element` backed by a BeautifulSoup tag.

    ``inner_html()`` is BeautifulSoup's own serialisation, e.g. ``<br/>``, so exact
    markup differs from the selectolax backend for the same document.
    """

    __slots__ = ("tag",)

    def __init__(self, tag: Tag) -> None:
        self.tag = tag

    def text(self) -> str:
        return normalize_whitespace(self.tag.get_text())

    def inner_html(self) -> str:
        return self.tag.decode_contents()

    def tag_name(self) -> str:
        return (self.tag.name or "").lower()

    def attribute(self, name: str) -> str | None:
        value = self.tag.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            # Multi-valued attributes such as ``class`` come back split.
            return " ".join(value)
        return str(value)


class ElementSequence:
    """`ElementQuery` over an already materialised, ordered list of elements."""

    __slots__ = ("_elements",)

    def __init__(self, elements: Sequence[Element]) -> None:
        self._elements: List[Element] = list(elements)

    def count(self) -> int:
        return len(self._elements)

    def element_at(self, index: int) -> Element:
        if not 0 <= index < len(self._elements):
            raise IndexError(f"element index {index} out of range for {len(self._elements)} element(s)")
        return self._elements[index]
