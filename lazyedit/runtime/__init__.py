"""Runtime: config store, terminal control, shell host, and the main loop.

Submodules are imported directly by callers; ``run_shell`` is resolved
lazily so controller modules can import ``runtime.config`` without pulling
in the shell.
"""

from __future__ import annotations


def run_shell(*args, **kwargs):
    """Lazily import and run the interactive shell session."""
    from .app import run_shell as _run_shell

    return _run_shell(*args, **kwargs)


__all__ = ["run_shell"]
