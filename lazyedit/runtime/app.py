"""Session bootstrap wiring terminal, config, tree source, and shell."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..editor import launch_editor
from ..tree_model import FilesystemTreeSource
from ..ui_theme import resolve_theme
from .config import ConfigStore
from .loop import run_main_loop
from .shell import Shell
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def build_shell(
    path: Path,
    terminal: TerminalController | None = None,
    config: ConfigStore | None = None,
    show_hidden: bool = False,
) -> Shell:
    """Create a shell with a browser on ``path`` (or its parent plus a file view)."""
    target = Path(path).resolve()
    external_editor = None
    if terminal is not None:
        def external_editor(file_path: Path) -> str | None:
            return launch_editor(file_path, terminal.disable_tui_mode, terminal.enable_tui_mode)

    shell = Shell(
        config if config is not None else ConfigStore(),
        FilesystemTreeSource(show_hidden=show_hidden),
        external_editor=external_editor,
    )
    if target.is_dir():
        shell.open_browser(target)
    else:
        shell.open_browser(target.parent)
        shell.open_editor(target)
    return shell


def run_shell(
    path: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    show_hidden: bool = False,
) -> None:
    """Run the interactive session rooted at ``path`` until the user quits."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    shell = build_shell(path, terminal=terminal, show_hidden=show_hidden)
    logger.info("starting session at %s", path)
    run_main_loop(shell, terminal, stdin_fd, theme=resolve_theme(theme_name, no_color=no_color))
