"""Full-frame composition: title bar, active window, dialog, help bar."""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import fit_ansi_line
from ..browser import DirectoryBrowser, render_browser
from ..dialog import dialog_height, render_dialog
from ..editor_view import EditorView
from ..ui_theme import DEFAULT_THEME, UITheme
from .shell import Shell


@dataclass(frozen=True)
class Frame:
    lines: list[str]
    cursor: tuple[int, int] | None


def format_help_bar(items: list[tuple[str, str]], width: int, theme: UITheme) -> str:
    parts = [f"{theme.help_key}{key}{theme.reset} {theme.help_dim}{label}{theme.reset}" for key, label in items]
    return fit_ansi_line("  ".join(parts), width) + theme.reset


def render_frame(shell: Shell, width: int, height: int, theme: UITheme | None = None) -> Frame:
    """Compose every screen row for the shell's current state.

    ``cursor`` is a 0-based ``(row, col)`` when the focused dialog wants a
    visible text cursor.
    """
    active_theme = theme or DEFAULT_THEME
    width = max(1, width)
    height = max(3, height)
    body_height = height - 2

    lines = [active_theme.title_bar + fit_ansi_line(shell.title, width) + active_theme.reset]

    window = shell.active_window
    if isinstance(window, DirectoryBrowser):
        body = render_browser(window, width, body_height, active=shell.dialog is None, theme=active_theme)
    elif isinstance(window, EditorView):
        body = window.render(width, body_height)
    else:
        body = [" " * width] * body_height

    cursor: tuple[int, int] | None = None
    dialog = shell.dialog
    if dialog is not None:
        rows = dialog_height(len(dialog.options), body_height)
        rendered = render_dialog(dialog, width, rows, active_theme)
        top = body_height - len(rendered.lines)
        body = body[:top] + rendered.lines
        if rendered.cursor_col is not None:
            cursor = (1 + top, rendered.cursor_col)
    lines.extend(body)

    if shell.status:
        lines.append(active_theme.status + fit_ansi_line(shell.status, width) + active_theme.reset)
    else:
        source = dialog if dialog is not None else window
        items = source.help_items() if source is not None else []
        lines.append(format_help_bar(items, width, active_theme))
    return Frame(lines, cursor)


def frame_to_ansi(frame: Frame) -> str:
    """Serialize a frame into cursor-addressed terminal output."""
    out = [f"\x1b[{row + 1};1H\x1b[0m{line}\x1b[K" for row, line in enumerate(frame.lines)]
    if frame.cursor is None:
        out.append("\x1b[?25l")
    else:
        row, col = frame.cursor
        out.append(f"\x1b[{row + 1};{col + 1}H\x1b[?25h")
    return "".join(out)


__all__ = [
    "Frame",
    "format_help_bar",
    "frame_to_ansi",
    "render_frame",
]
