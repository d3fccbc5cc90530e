"""Window manager hosting the active controllers.

The shell keeps an ordered list of windows plus at most one dialog, routes
each key to the dialog when one is shown and to the active window
otherwise, and closes whatever reports ``keep_running=False``. Controllers
reach the shell only through ``ShellContext``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..browser import BrowserRegistry, DirectoryBrowser
from ..controller import Controller
from ..dialog import DialogLayout, InputDialog
from ..editor_view import EditorView
from ..input import keys
from ..tree_model import TreeSource
from .config import RECENT_FILES_KEY, ConfigStore

logger = logging.getLogger(__name__)

ExternalEditor = Callable[[Path], "str | None"]


class ShellContext:
    """Host context handed to every controller call."""

    def __init__(self, shell: Shell) -> None:
        self.shell = shell

    @property
    def config(self) -> ConfigStore:
        return self.shell.config

    @property
    def registry(self) -> BrowserRegistry:
        return self.shell.registry

    @property
    def tree_source(self) -> TreeSource:
        return self.shell.tree_source

    def repaint(self) -> None:
        self.shell.dirty = True

    def set_title(self, title: str) -> None:
        if self.shell.title != title:
            self.shell.title = title
            self.shell.dirty = True

    def show_result(self, message: str) -> None:
        self.shell.status = message
        self.shell.dirty = True

    def show_dialog(self, dialog: InputDialog) -> None:
        self.shell.show_dialog(dialog)

    def open_editor(self, path: Path) -> None:
        self.shell.open_editor(path)

    def open_window(self, controller: Controller) -> None:
        self.shell.open_window(controller)

    def focus_window(self, controller: Controller) -> bool:
        return self.shell.focus_window(controller)

    def external_editor(self, path: Path) -> str | None:
        if self.shell.external_editor is None:
            return "Cannot edit: no terminal attached."
        return self.shell.external_editor(path)

    def close_self(self) -> None:
        self.shell.close_requested = True


class Shell:
    """Ordered windows, one optional dialog, and the global key bindings."""

    def __init__(
        self,
        config: ConfigStore,
        tree_source: TreeSource,
        external_editor: ExternalEditor | None = None,
    ) -> None:
        self.config = config
        self.tree_source = tree_source
        self.external_editor = external_editor
        self.windows: list[Controller] = []
        self.active_index = 0
        self.dialog: InputDialog | None = None
        self.title = ""
        self.status = ""
        self.dirty = True
        self.running = True
        self.close_requested = False
        self._registry: BrowserRegistry | None = None
        self.context = ShellContext(self)

    @property
    def registry(self) -> BrowserRegistry:
        if self._registry is None:
            self._registry = BrowserRegistry()
        return self._registry

    @property
    def active_window(self) -> Controller | None:
        if not self.windows:
            return None
        return self.windows[self.active_index]

    # windows
    def open_browser(self, path: Path) -> DirectoryBrowser:
        return self.registry.open(Path(path), self.context)

    def open_window(self, controller: Controller) -> None:
        current = self.active_window
        if current is not None:
            current.deactivate(self.context)
        self.windows.append(controller)
        self.active_index = len(self.windows) - 1
        logger.debug("opened window %s", controller.title())
        controller.activate(self.context)
        self.dirty = True

    def focus_window(self, controller: Controller) -> bool:
        for index, window in enumerate(self.windows):
            if window is controller:
                self.switch_to(index)
                return True
        return False

    def switch_to(self, index: int) -> None:
        if not self.windows:
            return
        index %= len(self.windows)
        if index == self.active_index:
            return
        self.windows[self.active_index].deactivate(self.context)
        self.active_index = index
        self.windows[index].activate(self.context)
        self.dirty = True

    def close_window(self, controller: Controller) -> None:
        if controller not in self.windows:
            return
        index = self.windows.index(controller)
        controller.deactivate(self.context)
        if isinstance(controller, DirectoryBrowser):
            self.registry.unregister(controller)
        del self.windows[index]
        logger.debug("closed window %s", controller.title())
        self.dirty = True
        if not self.windows:
            self.running = False
            return
        was_active = index == self.active_index
        if index < self.active_index:
            self.active_index -= 1
        self.active_index = min(self.active_index, len(self.windows) - 1)
        if was_active:
            self.windows[self.active_index].activate(self.context)

    def show_dialog(self, dialog: InputDialog) -> None:
        if self.dialog is not None and self.dialog is not dialog:
            self.dialog.deactivate(self.context)
        self.dialog = dialog
        dialog.activate(self.context)
        self.dirty = True

    def open_editor(self, path: Path) -> None:
        path = Path(path)
        for window in self.windows:
            if isinstance(window, EditorView) and window.path == path:
                self.focus_window(window)
                break
        else:
            self.open_window(EditorView(path))
        self.config.push_recent(RECENT_FILES_KEY, str(path))

    def base_directory(self) -> Path:
        live = self.registry.live
        if live is not None:
            return live.root_path
        return Path.cwd()

    def quit(self) -> None:
        if self.dialog is not None:
            self.dialog.deactivate(self.context)
            self.dialog = None
        for window in list(self.windows):
            window.deactivate(self.context)
        self.registry.teardown()
        self.running = False
        logger.debug("shell quit")

    # events
    def handle_key(self, key: str) -> bool:
        """Deliver one key and return whether the shell keeps running."""
        if key != keys.POLL and self.status:
            self.status = ""
            self.dirty = True
        if self.dialog is not None:
            self._deliver_to_dialog(self.dialog, key)
            return self.running
        if key == keys.QUIT:
            self.quit()
            return False
        if key == keys.OPEN:
            self.show_open_dialog()
            return self.running
        if key == keys.NEW_FILE:
            self.show_new_file_dialog()
            return self.running
        if key in (keys.ALT_LEFT, keys.ALT_RIGHT):
            self.switch_to(self.active_index + (1 if key == keys.ALT_RIGHT else -1))
            return self.running

        window = self.active_window
        if key == keys.DIRECTORY and not isinstance(window, DirectoryBrowser):
            self.open_browser(self.base_directory())
            return self.running
        if window is None:
            self.running = False
            return False
        self.close_requested = False
        result = window.process(self.context, key)
        if result.repaint:
            self.dirty = True
        if not result.keep_running or self.close_requested:
            self.close_requested = False
            self.close_window(window)
        return self.running

    def _deliver_to_dialog(self, dialog: InputDialog, key: str) -> None:
        result = dialog.process(self.context, key)
        if result.repaint:
            self.dirty = True
        if result.keep_running:
            return
        dialog.deactivate(self.context)
        if self.dialog is dialog:
            self.dialog = None
        self.dirty = True

    # dialogs
    def show_open_dialog(self) -> InputDialog:
        return InputDialog.show(
            DialogLayout(
                prompt="Open",
                options=self.config.get(RECENT_FILES_KEY),
                commit=lambda ctx, value: self.open_path(value, confirm_create=True),
            ),
            self.context,
        )

    def show_new_file_dialog(self) -> InputDialog:
        return InputDialog.show(
            DialogLayout(
                prompt="New file",
                commit=lambda ctx, value: self.open_path(value, confirm_create=False),
            ),
            self.context,
        )

    def resolve_path(self, value: str) -> Path:
        target = Path(value.strip()).expanduser()
        if not target.is_absolute():
            target = self.base_directory() / target
        return target

    def open_path(self, value: str, confirm_create: bool) -> None:
        """Open ``value`` as a file or directory, creating a missing file.

        Missing files are created immediately or after a yes/no prompt when
        ``confirm_create`` is set.
        """
        if not value.strip():
            return
        target = self.resolve_path(value)
        if target.is_dir():
            if not self.registry.change_directory(target):
                self.open_browser(target)
            return
        if target.exists():
            self.open_editor(target)
            return
        if not confirm_create:
            self.create_and_open(target)
            return
        InputDialog.show(
            DialogLayout(
                prompt=f"Create {target}?",
                value=str(target),
                show_value=False,
                yes=lambda ctx, _value: self.create_and_open(target),
                no=lambda ctx, _value: ctx.show_result("Not created"),
            ),
            self.context,
        )

    def create_and_open(self, target: Path) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.touch(exist_ok=True)
        except OSError as exc:
            logger.warning("cannot create %s: %s", target, exc)
            self.context.show_result(f"Cannot create {target}: {exc}")
            return
        if self.registry.live is not None:
            self.registry.live.projection.needs_rebuild = True
        self.open_editor(target)


__all__ = [
    "ExternalEditor",
    "Shell",
    "ShellContext",
]
