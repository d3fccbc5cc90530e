"""Host-side contract shared by every controller.

Controllers receive a ``HostContext`` with each call and answer ``process``
with a ``ProcessResult``; they never reach the shell any other way.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, NamedTuple, Protocol

if TYPE_CHECKING:
    from .browser.registry import BrowserRegistry
    from .controller import Controller
    from .dialog.controller import InputDialog
    from .runtime.config import ConfigStore
    from .tree_model import TreeSource


class ProcessResult(NamedTuple):
    """Verdict for one delivered event."""

    keep_running: bool
    repaint: bool = False


class HostContext(Protocol):
    """Operations the shell exposes to the controller it is driving."""

    config: ConfigStore
    registry: BrowserRegistry
    tree_source: TreeSource

    def repaint(self) -> None: ...

    def set_title(self, title: str) -> None: ...

    def show_result(self, message: str) -> None: ...

    def show_dialog(self, dialog: InputDialog) -> None: ...

    def open_editor(self, path: Path) -> None: ...

    def open_window(self, controller: Controller) -> None: ...

    def focus_window(self, controller: Controller) -> bool: ...

    def external_editor(self, path: Path) -> str | None: ...

    def close_self(self) -> None: ...


__all__ = [
    "HostContext",
    "ProcessResult",
]
