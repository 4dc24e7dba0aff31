"""
Parsed HTML documents that produce NodeLists.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Union

import structlog
from bs4 import BeautifulSoup
from selectolax.lexbor import LexborHTMLParser

from ..errors import UsageError
from ..protocols import AssertionSink, Element, Fetcher
from .adapters import ElementSequence, SelectolaxElement, SoupElement
from .node_list import NodeList

logger = structlog.get_logger(__name__)

Backend = Literal["selectolax", "bs4"]

DEFAULT_BACKEND: Backend = "selectolax"


class Document:
    """An HTML document that can be queried with CSS selectors.

    Text is normalised the same way on every backend, but ``inner_html()`` is the
    parser's own serialisation: exact-markup assertions are not portable between
    ``selectolax`` and ``bs4``.
    """

    def __init__(
        self,
        root: Union[LexborHTMLParser, BeautifulSoup],
        *,
        url: Optional[str] = None,
        sink: Optional[AssertionSink] = None,
        fetcher: Optional[Fetcher] = None,
    ) -> None:
        self.root = root
        self.url = url
        self.sink = sink
        self.fetcher = fetcher

    @classmethod
    def parse(
        cls,
        html: str,
        *,
        backend: Optional[Backend] = None,
        url: Optional[str] = None,
        sink: Optional[AssertionSink] = None,
        fetcher: Optional[Fetcher] = None,
    ) -> Document:
        """Parse ``html`` with the given backend (selectolax by default)."""
        backend = backend or DEFAULT_BACKEND
        root: Union[LexborHTMLParser, BeautifulSoup]
        if backend == "selectolax":
            root = LexborHTMLParser(html)
        elif backend == "bs4":
            root = BeautifulSoup(html, "html.parser")
        else:
            raise UsageError(f"Unknown parser backend: {backend!r}")
        logger.debug("Parsed document", backend=backend, url=url, size=len(html))
        return cls(root, url=url, sink=sink, fetcher=fetcher)

    @property
    def backend(self) -> Backend:
        return "bs4" if isinstance(self.root, BeautifulSoup) else "selectolax"

    def select(self, selector: str) -> List[Element]:
        """Elements matching ``selector``, in document order."""
        if not selector or not selector.strip():
            raise UsageError("selector must not be empty")
        if isinstance(self.root, BeautifulSoup):
            return [SoupElement(tag) for tag in self.root.select(selector)]
        return [SelectolaxElement(node) for node in self.root.css(selector)]

    def query_selector(
        self,
        selector: str,
        *,
        sink: Optional[AssertionSink] = None,
        fetcher: Optional[Fetcher] = None,
    ) -> NodeList:
        """Run ``selector`` and wrap the matches in a fresh NodeList."""
        return NodeList(
            ElementSequence(self.select(selector)),
            sink=sink if sink is not None else self.sink,
            fetcher=fetcher if fetcher is not None else self.fetcher,
            base_url=self.url,
        )
