"""Tree sources answering read-only child queries for the projection.

``StaticTreeSource`` serves prebuilt in-memory ``TreeNode`` trees.
``FilesystemTreeSource`` scans directories lazily with ``os.scandir`` and
caches each listing until the directory's mtime changes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from .types import TreeNode

logger = logging.getLogger(__name__)


class TreeSource(Protocol):
    """Read-only hierarchical structure consumed by ``TreeProjection``."""

    def root_node(self, path: Path) -> TreeNode: ...

    def children_of(self, node: TreeNode) -> Sequence[TreeNode]: ...

    def is_directory(self, path: Path) -> bool: ...


def safe_mtime_ns(path: Path) -> int | None:
    """Return ``st_mtime_ns`` for ``path`` or ``None`` on stat failure."""
    try:
        return int(path.stat().st_mtime_ns)
    except OSError:
        return None


class StaticTreeSource:
    """Tree source over an already-built node hierarchy."""

    def __init__(self, root: TreeNode) -> None:
        self.root = root
        self._index: dict[Path, TreeNode] = {}
        stack = [root]
        while stack:
            node = stack.pop()
            self._index[node.path] = node
            stack.extend(node.children)

    def root_node(self, path: Path) -> TreeNode:
        node = self._index.get(Path(path))
        if node is None:
            return TreeNode(Path(path), Path(path).name or str(path), True)
        return node

    def children_of(self, node: TreeNode) -> Sequence[TreeNode]:
        return node.children

    def is_directory(self, path: Path) -> bool:
        node = self._index.get(Path(path))
        return node is not None and node.is_dir


class FilesystemTreeSource:
    """Tree source backed by the local filesystem."""

    def __init__(self, show_hidden: bool = False) -> None:
        self.show_hidden = show_hidden
        self._listings: dict[Path, tuple[int | None, tuple[TreeNode, ...]]] = {}

    def root_node(self, path: Path) -> TreeNode:
        try:
            root = Path(path).resolve()
        except OSError:
            root = Path(path)
        return TreeNode(
            path=root,
            name=root.name or str(root),
            is_dir=root.is_dir(),
            mtime_ns=safe_mtime_ns(root),
        )

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def children_of(self, node: TreeNode) -> Sequence[TreeNode]:
        """List visible children of ``node`` sorted by case-folded name.

        Scan failures yield an empty listing; they are never raised.
        """
        if not node.is_dir:
            return ()
        directory_mtime_ns = safe_mtime_ns(node.path)
        cached = self._listings.get(node.path)
        if cached is not None and directory_mtime_ns is not None and cached[0] == directory_mtime_ns:
            return cached[1]

        children: list[TreeNode] = []
        try:
            with os.scandir(node.path) as entries:
                for child in entries:
                    name = child.name
                    if not self.show_hidden and name.startswith("."):
                        continue
                    try:
                        is_dir = child.is_dir()
                    except OSError:
                        is_dir = False
                    mtime_ns: int | None = None
                    try:
                        mtime_ns = int(child.stat().st_mtime_ns)
                    except OSError:
                        pass
                    children.append(
                        TreeNode(
                            path=node.path / name,
                            name=name,
                            is_dir=is_dir,
                            mtime_ns=None if is_dir else mtime_ns,
                        )
                    )
        except OSError as exc:
            logger.debug("cannot scan %s: %s", node.path, exc)
            return ()

        children.sort(key=lambda item: (item.name.casefold(), item.name))
        listing = tuple(children)
        self._listings[node.path] = (directory_mtime_ns, listing)
        return listing


__all__ = [
    "TreeSource",
    "StaticTreeSource",
    "FilesystemTreeSource",
    "safe_mtime_ns",
]
