"""
DOM querying: parsed documents, element adapters and the NodeList wrapper.
"""

from .adapters import ElementSequence, SelectolaxElement, SoupElement, normalize_whitespace
from .document import Backend, Document
from .node_list import NodeList

__all__ = [
    "Backend",
    "Document",
    "ElementSequence",
    "NodeList",
    "SelectolaxElement",
    "SoupElement",
    "normalize_whitespace",
]
