"""
HTTP fetching for end-to-end tests.
"""

from .client import HttpFetcher
from .response import HtmlResponse

__all__ = ["HtmlResponse", "HttpFetcher"]
