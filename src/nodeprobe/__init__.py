"""
nodeprobe - DOM queries and assertions for end-to-end HTTP tests.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .assertions import Expectation, RaisingAssertionSink, RecordingAssertionSink
from .config import Settings
from .dom import Document, NodeList
from .errors import (
    AssertionMismatch,
    NodeProbeError,
    PreconditionViolation,
    UnknownProperty,
    UnsupportedInteraction,
    UsageError,
)
from .http import HtmlResponse, HttpFetcher

__all__ = [
    "__version__",
    "AssertionMismatch",
    "Document",
    "Expectation",
    "HtmlResponse",
    "HttpFetcher",
    "NodeList",
    "NodeProbeError",
    "PreconditionViolation",
    "RaisingAssertionSink",
    "RecordingAssertionSink",
    "Settings",
    "UnknownProperty",
    "UnsupportedInteraction",
    "UsageError",
]
