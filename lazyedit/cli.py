"""Command-line front door for lazyedit.

Parses CLI options, configures logging, resolves the target path, and
dispatches into the interactive shell runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .runtime import run_shell
from .runtime.logging_setup import configure_logging
from .ui_theme import available_theme_names

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse a directory tree and open files in a terminal shell."
    )
    parser.add_argument("path", nargs="?", default=None, help="File or directory. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--show-hidden", action="store_true", help="List dot-files in the browser.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for the session log file (default: WARNING).",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Session log file path.")
    return parser


def main(default_path: Path | None = None, argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the shell on a file or directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not sys.stdin.isatty():
        raise SystemExit("lazyedit needs an interactive terminal.")

    configure_logging(getattr(logging, args.log_level), args.log_file)
    run_shell(path, theme_name=args.theme, no_color=args.no_color, show_hidden=args.show_hidden)


if __name__ == "__main__":
    main()
