"""
Synchronous HTTP client used to load pages and follow links.
"""

from __future__ import annotations

import time
from types import TracebackType
from typing import Optional, Type

import httpx
import structlog

from ..config.config import Settings
from ..protocols import AssertionSink
from .response import HtmlResponse

logger = structlog.get_logger(__name__)


class HttpFetcher:
    """Blocking page fetcher backed by ``httpx.Client``.

    Timeouts, redirects and headers come from ``Settings.http``. Transport errors
    are not retried and propagate as raised by httpx.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
        sink: Optional[AssertionSink] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.sink = sink
        self._transport = transport
        self._owns_client = client is None
        self.client = client or self._build_client()

    def _build_client(self) -> httpx.Client:
        http_config = self.settings.http
        headers = {"User-Agent": http_config.user_agent, **http_config.headers}
        return httpx.Client(
            base_url=http_config.base_url,
            timeout=httpx.Timeout(http_config.timeout),
            follow_redirects=http_config.follow_redirects,
            headers=headers,
            transport=self._transport,
        )

    def get(self, url: str) -> HtmlResponse:
        """GET ``url`` and wrap the result for DOM queries."""
        start = time.perf_counter()
        response = self.client.get(url)
        logger.info(
            "Fetched page",
            url=str(response.url),
            status=response.status_code,
            elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return HtmlResponse(
            response,
            fetcher=self,
            sink=self.sink,
            backend=self.settings.parser.backend,
        )

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> HttpFetcher:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()
