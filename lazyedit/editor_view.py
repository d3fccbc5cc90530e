"""Read-only file view standing in for the editor window.

Lines scroll with Up/Down; ``^E`` hands the file to ``$EDITOR`` through the
host and reloads it afterwards.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .ansi import fit_ansi_line
from .host import ProcessResult
from .input import KeyComboBinding, KeyComboRegistry, keys

if TYPE_CHECKING:
    from .host import HostContext


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
        except OSError:
            return ""
    return path.read_bytes().decode("utf-8", errors="replace")


class EditorView:
    """Controller showing one file's lines."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.lines: list[str] = []
        self.top = 0
        self._keys = KeyComboRegistry().register_bindings(
            KeyComboBinding((keys.UP,), lambda: self.scroll_by(-1)),
            KeyComboBinding((keys.DOWN,), lambda: self.scroll_by(1)),
        )
        self.reload()

    def title(self) -> str:
        return str(self.path)

    def help_items(self) -> list[tuple[str, str]]:
        return [("^E", "Edit"), ("^W", "Close"), ("^Q", "Quit")]

    def activate(self, ctx: HostContext) -> None:
        ctx.set_title(self.title())

    def deactivate(self, ctx: HostContext) -> None:
        pass

    def reload(self) -> None:
        self.lines = read_text(self.path).splitlines()
        self.top = max(0, min(self.top, len(self.lines) - 1))

    def scroll_by(self, delta: int) -> bool:
        top = max(0, min(max(0, len(self.lines) - 1), self.top + delta))
        if top == self.top:
            return False
        self.top = top
        return True

    def process(self, ctx: HostContext, key: str) -> ProcessResult:
        if key == keys.CLOSE:
            return ProcessResult(False, True)
        if key == keys.EXECUTE:
            message = ctx.external_editor(self.path)
            if message:
                ctx.show_result(message)
            self.reload()
            return ProcessResult(True, True)
        if key in self._keys:
            return ProcessResult(True, bool(self._keys.dispatch(key)))
        return ProcessResult(True, False)

    def render(self, width: int, height: int) -> list[str]:
        lines = [fit_ansi_line(line, width) for line in self.lines[self.top : self.top + height]]
        while len(lines) < height:
            lines.append(" " * width)
        return lines


__all__ = ["EditorView", "read_text"]
