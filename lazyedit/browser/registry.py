"""Explicit registry routing directory requests to the live browser.

Only one directory browser is expected at a time. The shell owns a single
registry, hands it to controllers through the host context, and tears it
down on exit.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..host import HostContext
    from .controller import DirectoryBrowser

logger = logging.getLogger(__name__)


class BrowserRegistry:
    """Tracks the live ``DirectoryBrowser`` instance, if any."""

    def __init__(self) -> None:
        self.live: DirectoryBrowser | None = None

    def register(self, browser: DirectoryBrowser) -> None:
        self.live = browser

    def unregister(self, browser: DirectoryBrowser) -> None:
        if self.live is browser:
            self.live = None

    def change_directory(self, path: Path) -> bool:
        """Point the live browser at ``path``; no-op when none is live."""
        if self.live is None:
            logger.debug("no live browser for %s", path)
            return False
        self.live.view(Path(path))
        return True

    def open(self, path: Path, ctx: HostContext) -> DirectoryBrowser:
        """Focus the live browser, creating one rooted at ``path`` if needed."""
        from .controller import DirectoryBrowser

        if self.live is not None:
            ctx.focus_window(self.live)
            return self.live
        browser = DirectoryBrowser(path, ctx.tree_source)
        self.register(browser)
        ctx.open_window(browser)
        return browser

    def teardown(self) -> None:
        self.live = None
