"""Tree datatypes shared by tree sources, projection, and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TreeNode:
    """One file or directory owned by a tree source.

    ``children`` is only populated by in-memory sources; filesystem sources
    answer ``children_of`` lazily and leave it empty.
    """

    path: Path
    name: str
    is_dir: bool
    mtime_ns: int | None = None
    children: tuple["TreeNode", ...] = ()

    @property
    def is_file(self) -> bool:
        return not self.is_dir


@dataclass(frozen=True)
class TreeRow:
    """One visible row of the flat projection."""

    indent: int
    expanded: bool
    node: TreeNode

    @property
    def path(self) -> Path:
        return self.node.path

    @property
    def name(self) -> str:
        return self.node.name


__all__ = [
    "TreeNode",
    "TreeRow",
]
