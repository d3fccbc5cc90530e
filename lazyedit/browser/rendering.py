"""Formatting helpers for directory browser rows and the scroll window."""

from __future__ import annotations

import time

from ..ansi import ANSI_ESCAPE_RE, display_width, fit_ansi_line
from ..tree_model import TreeRow
from ..ui_theme import DEFAULT_THEME, UITheme
from .controller import DirectoryBrowser

INDENT = "    "


def adjust_scroll(selection: int, scroll: int, visible_rows: int) -> int:
    """Return a scroll offset that keeps ``selection`` inside the viewport.

    The offset is kept while the selection stays visible; otherwise the
    selection is re-centered half a page from the top.
    """
    if visible_rows <= 0:
        return 0
    if scroll <= selection < scroll + visible_rows:
        return scroll
    return selection - min(visible_rows // 2, selection)


def format_mtime(mtime_ns: int) -> str:
    return time.strftime("%c", time.localtime(mtime_ns / 1_000_000_000))


def format_tree_row(
    row: TreeRow,
    name_filter: str,
    width: int,
    theme: UITheme | None = None,
) -> str:
    """Render one row: indent, expand marker, name, and a right-aligned mtime."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    is_dir = row.node.is_dir
    if row.expanded:
        marker = "- "
    elif is_dir:
        marker = "+ "
    else:
        marker = "  "
    color = active_theme.tree_dir if is_dir else active_theme.tree_file
    name = row.name
    if name_filter and name.startswith(name_filter):
        styled_name = (
            f"{active_theme.tree_filter_match}{name_filter}{reset}{color}{name[len(name_filter):]}"
        )
    else:
        styled_name = name
    suffix = "/" if is_dir else ""
    left = f"{INDENT * row.indent}{active_theme.tree_marker}{marker}{reset}{color}{styled_name}{suffix}{reset}"

    if is_dir or row.node.mtime_ns is None:
        return fit_ansi_line(left, width)
    stamp = format_mtime(row.node.mtime_ns) + " "
    gap = width - display_width(left) - len(stamp)
    if gap < 1:
        return fit_ansi_line(left, width)
    return f"{left}{' ' * gap}{active_theme.tree_mtime}{stamp}{reset}"


def render_browser(
    browser: DirectoryBrowser,
    width: int,
    height: int,
    active: bool = True,
    theme: UITheme | None = None,
) -> list[str]:
    """Render the visible window of rows, updating ``browser.scroll``."""
    active_theme = theme or DEFAULT_THEME
    projection = browser.projection
    browser.scroll = adjust_scroll(projection.selection, browser.scroll, height)
    lines: list[str] = []
    for index in range(browser.scroll, min(len(projection.rows), browser.scroll + height)):
        text = format_tree_row(projection.rows[index], projection.name_filter, width, active_theme)
        if active and index == projection.selection:
            text = active_theme.reverse + fit_ansi_line(ANSI_ESCAPE_RE.sub("", text), width) + active_theme.reset
        lines.append(text)
    while len(lines) < height:
        lines.append(" " * width)
    return lines


__all__ = [
    "adjust_scroll",
    "format_mtime",
    "format_tree_row",
    "render_browser",
]
