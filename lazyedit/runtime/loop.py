"""Main interactive event loop for the terminal UI.

Paints when the shell is dirty or the terminal was resized, then reads one
key (or a poll tick after ``poll_ms``) and hands it to the shell.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable

from ..input import read_key as default_read_key
from ..ui_theme import UITheme
from .screen import frame_to_ansi, render_frame
from .shell import Shell
from .terminal import TerminalController

POLL_INTERVAL_MS = 250

logger = logging.getLogger(__name__)


def run_main_loop(
    shell: Shell,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme | None = None,
    read_key: Callable[..., str] = default_read_key,
    poll_ms: int = POLL_INTERVAL_MS,
) -> None:
    """Run until the shell stops; events are handled strictly in arrival order."""
    last_size: tuple[int, int] | None = None
    with terminal.raw_mode():
        while shell.running:
            size = shutil.get_terminal_size((80, 24))
            current_size = (size.columns, size.lines)
            if current_size != last_size:
                last_size = current_size
                shell.dirty = True
            if shell.dirty:
                frame = render_frame(shell, size.columns, size.lines, theme)
                terminal.write(frame_to_ansi(frame))
                shell.dirty = False
            key = read_key(stdin_fd, timeout_ms=poll_ms)
            shell.handle_key(key)
    logger.debug("main loop finished")
