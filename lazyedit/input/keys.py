"""Normalized key tokens produced by ``read_key`` and consumed by controllers."""

from __future__ import annotations

POLL = ""

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
ALT_LEFT = "ALT_LEFT"
ALT_RIGHT = "ALT_RIGHT"

RETURN = "RETURN"
ENTER = "ENTER"
ESCAPE = "ESC"
TAB = "TAB"
BACKSPACE = "BACKSPACE"
DELETE = "DELETE"

CLOSE = "CTRL_W"
DIRECTORY = "CTRL_D"
OPEN = "CTRL_O"
NEW_FILE = "CTRL_N"
QUIT = "CTRL_Q"
EXECUTE = "CTRL_E"

CONTROL_BYTES: dict[bytes, str] = {
    b"\x17": CLOSE,
    b"\x04": DIRECTORY,
    b"\x0f": OPEN,
    b"\x0e": NEW_FILE,
    b"\x11": QUIT,
    b"\x05": EXECUTE,
    b"\t": TAB,
    b"\x08": BACKSPACE,
    b"\x7f": BACKSPACE,
    b"\r": RETURN,
    b"\n": ENTER,
}


def is_printable(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


def is_printable_ascii(key: str) -> bool:
    """Return whether ``key`` is one character in the ASCII range 32..127."""
    return len(key) == 1 and 32 <= ord(key) <= 127
