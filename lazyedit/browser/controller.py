"""Directory browser controller driving a ``TreeProjection``.

Keys map onto projection operations: arrows move or seek filter matches,
Space and Return toggle directories, Return on a file opens it, printable
characters grow the incremental name filter. The expansion set is loaded
from config on first activation and saved on every deactivation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..dialog import DialogLayout, InputDialog
from ..host import ProcessResult
from ..input import KeyComboBinding, KeyComboRegistry, keys
from ..runtime.config import EXPANDED_DIRS_KEY, RECENT_DIRS_KEY
from ..tree_model import TreeProjection, TreeSource

if TYPE_CHECKING:
    from ..host import HostContext

logger = logging.getLogger(__name__)


class DirectoryBrowser:
    """Controller for the hierarchical directory list."""

    def __init__(self, path: Path, source: TreeSource) -> None:
        self.source = source
        self.projection = TreeProjection(source, Path(path))
        self.scroll = 0
        self._keys = KeyComboRegistry().register_bindings(
            KeyComboBinding((keys.POLL,), lambda: False),
            KeyComboBinding((keys.ESCAPE,), self.projection.filter_clear),
            KeyComboBinding((keys.UP,), lambda: self.projection.move_selection(-1)),
            KeyComboBinding((keys.DOWN,), lambda: self.projection.move_selection(1)),
            KeyComboBinding((keys.LEFT,), lambda: self.projection.filter_seek(-1)),
            KeyComboBinding((keys.RIGHT,), lambda: self.projection.filter_seek(1)),
            KeyComboBinding((" ",), self.projection.toggle),
        )

    @property
    def root_path(self) -> Path:
        return self.projection.root_path

    def title(self) -> str:
        return str(self.projection.root_path)

    def help_items(self) -> list[tuple[str, str]]:
        return [("^O", "Open"), ("^N", "New File"), ("^Q", "Quit"), ("^D", "Directory")]

    def activate(self, ctx: HostContext) -> None:
        ctx.set_title(self.title())
        if not self.projection.expanded:
            paths = ctx.config.get(EXPANDED_DIRS_KEY)
            self.projection.expanded.update(Path(path) for path in paths)
            if paths:
                self.projection.needs_rebuild = True
        if self.projection.needs_rebuild:
            self.projection.rebuild()
            ctx.repaint()

    def deactivate(self, ctx: HostContext) -> None:
        """Persist the expansion set, dropping paths that are no longer directories."""
        kept = {path for path in self.projection.expanded if self.source.is_directory(path)}
        if len(kept) != len(self.projection.expanded):
            logger.debug("pruned %d stale expanded paths", len(self.projection.expanded) - len(kept))
        self.projection.expanded = kept
        ctx.config.set(EXPANDED_DIRS_KEY, sorted(str(path) for path in kept))

    def view(self, path: Path) -> None:
        """Re-root the browser at ``path``; rows rebuild on the next event."""
        if self.projection.change_root(Path(path)):
            self.scroll = 0
            logger.debug("browser root changed to %s", path)

    def process(self, ctx: HostContext, key: str) -> ProcessResult:
        repaint = False
        if self.projection.needs_rebuild:
            self.projection.rebuild()
            ctx.set_title(self.title())
            repaint = True
        if key == keys.CLOSE:
            return ProcessResult(False, True)
        if key in (keys.RETURN, keys.ENTER):
            repaint = self.key_return(ctx) or repaint
        elif key == keys.DIRECTORY:
            repaint = self.show_directory_dialog(ctx) or repaint
        elif key in self._keys:
            repaint = bool(self._keys.dispatch(key)) or repaint
        elif keys.is_printable(key):
            self.projection.filter_advance(key)
            repaint = True
        else:
            repaint = self.projection.filter_clear() or repaint
        return ProcessResult(True, repaint)

    def key_return(self, ctx: HostContext) -> bool:
        row = self.projection.selected_row()
        if row is None:
            return False
        if row.node.is_dir:
            return self.projection.toggle()
        self.projection.filter_clear()
        ctx.open_editor(row.path)
        return True

    def show_directory_dialog(self, ctx: HostContext) -> bool:
        InputDialog.show(
            DialogLayout(
                prompt="Directory",
                value=str(self.projection.root_path),
                options=ctx.config.get(RECENT_DIRS_KEY),
                commit=self._commit_directory,
            ),
            ctx,
        )
        return True

    def _commit_directory(self, ctx: HostContext, value: str) -> None:
        target = Path(value).expanduser()
        if not target.is_absolute():
            target = self.projection.root_path / target
        if not self.source.is_directory(target):
            ctx.show_result(f"Not a directory: {value}")
            return
        ctx.config.push_recent(RECENT_DIRS_KEY, str(target))
        ctx.registry.change_directory(target)


__all__ = ["DirectoryBrowser"]
