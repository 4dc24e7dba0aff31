"""
pytest fixtures for end-to-end tests written with nodeprobe.

Registered through the ``pytest11`` entry point, so installing the package makes
the fixtures available everywhere:

```python
def test_home_page(http):
    response = http.get("/")
    response.assert_ok()
    response.query_selector("li").assert_count(3)
```
"""

from __future__ import annotations

from typing import Generator

import pytest
import structlog

from .assertions import RaisingAssertionSink, RecordingAssertionSink
from .config import Settings, load_settings
from .http import HttpFetcher
from .observability import configure_logging


def pytest_configure(config: pytest.Config) -> None:
    """Apply ``monitoring.log_level`` and ``log_file`` before any test runs."""
    configure_logging(load_settings().monitoring)


@pytest.fixture
def nodeprobe_settings() -> Settings:
    """Settings from ``nodeprobe.yaml`` in the working directory or the environment."""
    return load_settings()


@pytest.fixture
def assertion_sink() -> RaisingAssertionSink:
    return RaisingAssertionSink()


@pytest.fixture
def soft_assertions() -> Generator[RecordingAssertionSink, None, None]:
    """A recording sink; any collected failures are raised when the test finishes."""
    sink = RecordingAssertionSink()
    yield sink
    sink.raise_if_failed()


@pytest.fixture
def http(nodeprobe_settings: Settings, assertion_sink: RaisingAssertionSink) -> Generator[HttpFetcher, None, None]:
    """An HttpFetcher configured from ``nodeprobe_settings``, closed after the test."""
    with HttpFetcher(nodeprobe_settings, sink=assertion_sink) as fetcher:
        yield fetcher


@pytest.fixture(autouse=True)
def _nodeprobe_test_context(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    with structlog.contextvars.bound_contextvars(test_id=request.node.nodeid):
        yield
