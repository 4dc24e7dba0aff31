"""
Shared fixtures for the nodeprobe test suite.

Network access is never needed: pages are served from ``httpx.MockTransport``.
"""

from typing import Callable, Dict, List

import httpx
import pytest

from nodeprobe.config import Settings, load_settings
from nodeprobe.http import HttpFetcher
from nodeprobe.observability import configure_logging

BASE_URL = "http://testserver"

HOME_PAGE = """
<html>
  <head><title>Home</title></head>
  <body>
    <h1>Welcome</h1>
    <ul class="menu">
      <li>A</li>
      <li>B</li>
      <li>C</li>
    </ul>
    <p class="intro">Hello <b>brave</b> new world</p>
    <a id="admin" href="/admin">Admin</a>
    <a id="external" href="http://other.test/page">Elsewhere</a>
    <a id="dead">No target</a>
  </body>
</html>
"""

ADMIN_PAGE = "<html><body><h1>Dashboard</h1></body></html>"


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


@pytest.fixture
def pages() -> Dict[str, str]:
    """Path -> HTML body served by the mock transport."""
    return {"/": HOME_PAGE, "/admin": ADMIN_PAGE}


@pytest.fixture
def request_log() -> List[httpx.Request]:
    return []


@pytest.fixture
def transport(pages: Dict[str, str], request_log: List[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        request_log.append(request)
        body = pages.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="<h1>Not Found</h1>")
        return httpx.Response(200, text=body, headers={"content-type": "text/html"})

    return httpx.MockTransport(handler)


@pytest.fixture
def settings() -> Settings:
    return Settings(http={"base_url": BASE_URL})


@pytest.fixture
def make_fetcher(settings: Settings, transport: httpx.MockTransport) -> Callable[..., HttpFetcher]:
    def factory(**kwargs) -> HttpFetcher:
        return HttpFetcher(settings, transport=transport, **kwargs)

    return factory


@pytest.fixture
def fetcher(make_fetcher):
    with make_fetcher() as f:
        yield f


@pytest.fixture(autouse=True)
def restore_logging():
    """Put back the session logging configuration a test (or the CLI) may have replaced."""
    yield
    configure_logging(load_settings().monitoring)
