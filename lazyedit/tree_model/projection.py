"""Flat, filterable projection of a hierarchical tree.

The projection is a list of ``TreeRow`` values in pre-order, where a
directory's children follow it only while its path is in the expansion set.
Full rebuilds happen on structural change; ``toggle`` patches the list in
place by inserting or deleting the affected contiguous run of rows.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .source import TreeSource
from .types import TreeNode, TreeRow

logger = logging.getLogger(__name__)


class TreeProjection:
    """Rows, selection, name filter, and expansion state for one tree root."""

    def __init__(
        self,
        source: TreeSource,
        root_path: Path,
        expanded: Iterable[Path] | None = None,
    ) -> None:
        self.source = source
        self.root_path = Path(root_path)
        self.expanded: set[Path] = set(expanded or ())
        self.rows: list[TreeRow] = []
        self.selection = 0
        self.name_filter = ""
        self.needs_rebuild = True

    def __len__(self) -> int:
        return len(self.rows)

    def selected_row(self) -> TreeRow | None:
        if not self.rows:
            return None
        return self.rows[self.selection]

    # structure
    def rebuild(self, root: TreeNode | None = None) -> None:
        """Recompute every row from ``root`` and the expansion set.

        An empty result is replaced by a single placeholder row for the root
        so selection always has a target.
        """
        if root is None:
            root = self.source.root_node(self.root_path)
        self.rows = []
        self._insert_rows(0, 0, root)
        if not self.rows:
            self.rows.append(TreeRow(0, False, root))
        self.selection = min(self.selection, len(self.rows) - 1)
        self.needs_rebuild = False
        logger.debug("rebuilt projection for %s: %d rows", root.path, len(self.rows))

    def change_root(self, new_path: Path) -> bool:
        """Point the projection at ``new_path``; the next activation rebuilds."""
        new_path = Path(new_path)
        if new_path == self.root_path:
            return False
        self.root_path = new_path
        self.rows = []
        self.needs_rebuild = True
        return True

    def toggle(self, index: int | None = None) -> bool:
        """Expand or collapse the directory row at ``index`` (default: selection).

        Collapsing forgets only the row's own path; nested expansion below it
        is kept so re-expanding restores the previous shape.
        """
        self.filter_clear()
        if index is None:
            index = self.selection
        if not 0 <= index < len(self.rows):
            return False
        row = self.rows[index]
        if not row.node.is_dir:
            return False
        if row.expanded:
            self.expanded.discard(row.path)
            self.rows[index] = TreeRow(row.indent, False, row.node)
            removed = self._remove_rows(index + 1, row.indent + 1)
            if self.selection > index + removed:
                self.selection -= removed
            elif self.selection > index:
                self.selection = index
            logger.debug("collapsed %s (%d rows)", row.path, removed)
        else:
            self.expanded.add(row.path)
            self.rows[index] = TreeRow(row.indent, True, row.node)
            end = self._insert_rows(index + 1, row.indent + 1, row.node)
            if self.selection > index:
                self.selection += end - index - 1
            logger.debug("expanded %s (%d rows)", row.path, end - index - 1)
        return True

    def _insert_rows(self, index: int, indent: int, node: TreeNode) -> int:
        for child in self.source.children_of(node):
            expand = child.is_dir and child.path in self.expanded
            self.rows.insert(index, TreeRow(indent, expand, child))
            index += 1
            if expand:
                index = self._insert_rows(index, indent + 1, child)
        return index

    def _remove_rows(self, index: int, indent: int) -> int:
        end = index
        while end < len(self.rows) and self.rows[end].indent >= indent:
            end += 1
        del self.rows[index:end]
        return end - index

    # selection
    def move_selection(self, delta: int) -> bool:
        """Step the selection by ``delta`` rows, clamped to the list bounds."""
        cleared = self.filter_clear()
        if not self.rows:
            return cleared
        target = max(0, min(len(self.rows) - 1, self.selection + delta))
        if target == self.selection:
            return cleared
        self.selection = target
        return True

    # name filter
    def matches_filter(self, index: int) -> bool:
        if not 0 <= index < len(self.rows):
            return False
        return self.rows[index].name.startswith(self.name_filter)

    def filter_advance(self, ch: str) -> bool:
        """Grow the filter and jump to the first match at or after the selection."""
        self.name_filter += ch
        for index in range(self.selection, len(self.rows)):
            if self.matches_filter(index):
                self.selection = index
                return True
        return False

    def filter_seek(self, direction: int) -> bool:
        """Jump to the nearest match before (``-1``) or after (``1``) the selection."""
        if direction < 0:
            candidates = range(self.selection - 1, -1, -1)
        else:
            candidates = range(self.selection + 1, len(self.rows))
        for index in candidates:
            if self.matches_filter(index):
                self.selection = index
                return True
        return False

    def filter_clear(self) -> bool:
        if not self.name_filter:
            return False
        self.name_filter = ""
        return True


__all__ = ["TreeProjection"]
