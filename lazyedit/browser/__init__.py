"""Directory browser controller, its registry, and row rendering."""

from __future__ import annotations

from .controller import DirectoryBrowser
from .registry import BrowserRegistry
from .rendering import adjust_scroll, format_tree_row, render_browser

__all__ = [
    "BrowserRegistry",
    "DirectoryBrowser",
    "adjust_scroll",
    "format_tree_row",
    "render_browser",
]
