"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the browser rows, dialogs, and shell chrome.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reverse: str
    underline: str
    reset: str
    title_bar: str
    status: str
    tree_marker: str
    tree_dir: str
    tree_file: str
    tree_mtime: str
    tree_filter_match: str
    dialog: str
    dialog_caption: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    underline="\033[4m",
    reset="\033[0m",
    title_bar="\033[1;7m",
    status="\033[38;5;229m",
    tree_marker="\033[38;5;44m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    tree_mtime="\033[2;38;5;250m",
    tree_filter_match="\033[4;1;38;5;81m",
    dialog="\033[7m",
    dialog_caption="\033[1;7m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    underline="\033[4m",
    reset="\033[0m",
    title_bar="\033[1;38;5;231;48;5;24m",
    status="\033[38;5;153m",
    tree_marker="\033[38;5;39m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    tree_mtime="\033[2;38;5;110m",
    tree_filter_match="\033[4;1;38;5;45m",
    dialog="\033[38;5;231;48;5;24m",
    dialog_caption="\033[1;38;5;231;48;5;24m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    underline="",
    reset="",
    title_bar="",
    status="",
    tree_marker="",
    tree_dir="",
    tree_file="",
    tree_mtime="",
    tree_filter_match="",
    dialog="",
    dialog_caption="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    candidate = str(name or "").strip().lower()
    return _THEMES.get(candidate, DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
