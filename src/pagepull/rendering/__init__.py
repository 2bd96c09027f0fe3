"""Rendered-HTML retrieval via a headless browser."""

from .browser import BrowserRenderer
from .protocols import PageRenderer

__all__ = [
    "BrowserRenderer",
    "PageRenderer",
]
