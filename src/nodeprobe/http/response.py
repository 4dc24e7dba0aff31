"""
HTML-aware wrapper around an httpx response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import httpx

from ..assertions import RaisingAssertionSink
from ..dom.document import Backend, Document
from ..dom.node_list import NodeList
from ..protocols import AssertionSink

if TYPE_CHECKING:
    from .client import HttpFetcher


class HtmlResponse:
    """An HTTP response whose body can be queried with CSS selectors.

    ```python
    response = http.get("/")
    response.assert_ok()
    response.query_selector("h1").assert_text_equals("Welcome")
    ```
    """

    def __init__(
        self,
        response: httpx.Response,
        *,
        fetcher: Optional[HttpFetcher] = None,
        sink: Optional[AssertionSink] = None,
        backend: Optional[Backend] = None,
    ) -> None:
        self.response = response
        self.fetcher = fetcher
        self.sink: AssertionSink = sink if sink is not None else RaisingAssertionSink()
        self.backend = backend
        self._document: Optional[Document] = None

    def __repr__(self) -> str:
        return f"<HtmlResponse [{self.status_code}] {self.url}>"

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def url(self) -> str:
        return str(self.response.url)

    @property
    def text(self) -> str:
        return self.response.text

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def document(self) -> Document:
        """The parsed body, parsed on first access."""
        if self._document is None:
            self._document = Document.parse(
                self.text,
                backend=self.backend,
                url=self.url,
                sink=self.sink,
                fetcher=self.fetcher,
            )
        return self._document

    def query_selector(self, selector: str) -> NodeList:
        return self.document.query_selector(selector)

    def assert_status(self, expected: int) -> HtmlResponse:
        self.sink.assert_equal(expected, self.status_code)
        return self

    def assert_ok(self) -> HtmlResponse:
        return self.assert_status(200)
