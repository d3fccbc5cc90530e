"""Row rendering for input dialogs docked at the bottom of a window."""

from __future__ import annotations

from dataclasses import dataclass

from ..ansi import display_width, fit_ansi_line
from ..ui_theme import DEFAULT_THEME, UITheme
from .controller import InputDialog

QUICK_SELECT_LIMIT = 10
SUGGESTION_MARGIN = 2
CAPTION_WIDTH = 3


@dataclass(frozen=True)
class RenderedDialog:
    lines: list[str]
    cursor_col: int | None


def dialog_height(option_count: int, host_height: int) -> int:
    """Return dialog rows: the prompt plus one per option, capped at half the host."""
    return max(1, min(1 + option_count, host_height // 2))


def render_dialog(
    dialog: InputDialog,
    width: int,
    height: int,
    theme: UITheme | None = None,
) -> RenderedDialog:
    """Render the prompt row and as many suggestion rows as fit in ``height``.

    ``cursor_col`` is set only while the dialog has focus, shows its value,
    and is editing the field.
    """
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    base = active_theme.dialog
    show_value = dialog.layout.show_value
    selected = dialog.suggestion_index

    head = dialog.layout.prompt + (": " if show_value else "")
    prompt_row = base + head
    if show_value:
        if selected is None:
            prompt_row += active_theme.underline + dialog.value + reset + base
        else:
            prompt_row += dialog.value
    lines = [base + fit_ansi_line(prompt_row, width) + reset]

    option_width = max(0, width - 2 * SUGGESTION_MARGIN - CAPTION_WIDTH)
    for index, option in enumerate(dialog.options[: max(0, height - 1)]):
        if index < QUICK_SELECT_LIMIT and selected is not None:
            caption = f"{' ' * SUGGESTION_MARGIN}{index}: "
        else:
            caption = " " * (SUGGESTION_MARGIN + CAPTION_WIDTH)
        body = fit_ansi_line(option, option_width)
        if index == selected:
            body = reset + body + base
        row = base + active_theme.dialog_caption + caption + reset + base + body
        lines.append(fit_ansi_line(row, width) + reset)

    cursor_col: int | None = None
    cursor_pos = dialog.cursor_pos
    if dialog.has_focus and show_value and cursor_pos is not None:
        cursor_col = min(max(0, width - 1), display_width(head) + display_width(dialog.value[:cursor_pos]))
    return RenderedDialog(lines, cursor_col)


__all__ = [
    "RenderedDialog",
    "dialog_height",
    "render_dialog",
]
