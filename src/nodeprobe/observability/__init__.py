"""
Observability for nodeprobe: structured logging.
"""

from .logging import configure_logging

__all__ = ["configure_logging"]
