"""Tree model: node/row datatypes, tree sources, and the flat projection.

The projection turns a read-only hierarchy plus a set of expanded directory
paths into the ordered row list shown by the directory browser.
"""

from __future__ import annotations

from .projection import TreeProjection
from .source import FilesystemTreeSource, StaticTreeSource, TreeSource, safe_mtime_ns
from .types import TreeNode, TreeRow

__all__ = [
    "TreeNode",
    "TreeRow",
    "TreeSource",
    "StaticTreeSource",
    "FilesystemTreeSource",
    "TreeProjection",
    "safe_mtime_ns",
]
