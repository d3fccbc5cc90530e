"""Modal single-line input dialog with an autocomplete suggestion list.

The dialog owns its value after construction and terminates through exactly
one outcome: commit, yes, no, or cancel. Once terminated it ignores further
events.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..host import ProcessResult
from ..input import KeyComboBinding, KeyComboRegistry, keys
from .state import DialogCallback, DialogLayout, DialogMode, FieldEditing, SuggestionSelected

if TYPE_CHECKING:
    from ..host import HostContext

logger = logging.getLogger(__name__)


class InputDialog:
    """Controller implementing the field-editing / suggestion state machine."""

    def __init__(self, layout: DialogLayout) -> None:
        self.layout = layout
        self.options: list[str] = list(layout.options)
        self.value = layout.value
        self.mode: DialogMode
        if not self.value and self.options:
            self.mode = SuggestionSelected(0)
            self.value = self.options[0]
        else:
            self.mode = FieldEditing(len(self.value))
        self.has_focus = False
        self.dirty = True
        self.outcome: str | None = None
        self._keys = KeyComboRegistry().register_bindings(
            KeyComboBinding((keys.LEFT,), self.arrow_left),
            KeyComboBinding((keys.RIGHT,), self.arrow_right),
            KeyComboBinding((keys.UP,), self.arrow_up),
            KeyComboBinding((keys.DOWN,), self.arrow_down),
            KeyComboBinding((keys.BACKSPACE,), self.delete_prev),
            KeyComboBinding((keys.DELETE,), self.delete_next),
        )

    @classmethod
    def show(cls, layout: DialogLayout, ctx: HostContext) -> InputDialog:
        """Create a dialog for ``layout`` and hand it to the host."""
        dialog = cls(layout)
        ctx.show_dialog(dialog)
        return dialog

    # controller contract
    def title(self) -> str:
        return self.layout.prompt

    def activate(self, ctx: HostContext) -> None:
        if not self.has_focus:
            self.has_focus = True
            self.dirty = True

    def deactivate(self, ctx: HostContext) -> None:
        if self.has_focus:
            self.has_focus = False
            self.dirty = True

    def help_items(self) -> list[tuple[str, str]]:
        items: list[tuple[str, str]] = []
        if not self.layout.show_value:
            items.extend([("Y", "Yes"), ("N", "No")])
        items.append(("^[", "Escape"))
        return items

    @property
    def terminated(self) -> bool:
        return self.outcome is not None

    @property
    def cursor_pos(self) -> int | None:
        if isinstance(self.mode, FieldEditing):
            return self.mode.cursor_pos
        return None

    @property
    def suggestion_index(self) -> int | None:
        if isinstance(self.mode, SuggestionSelected):
            return self.mode.index
        return None

    def process(self, ctx: HostContext, key: str) -> ProcessResult:
        """Apply one key; ``keep_running`` is false once the dialog terminates."""
        if self.terminated:
            return ProcessResult(False)
        if key in (keys.ESCAPE, keys.CLOSE):
            ctx.show_result("Cancelled")
            return self._terminate("cancelled", ctx, None)
        if key in (keys.RETURN, keys.ENTER):
            if not self.layout.show_value:
                return ProcessResult(True, self._take_dirty())
            return self._terminate("commit", ctx, self.layout.commit)
        if key in self._keys:
            self._keys.dispatch(key)
            return ProcessResult(True, self._take_dirty())
        if not keys.is_printable_ascii(key):
            return ProcessResult(True, self._take_dirty())

        if key.isdigit() and isinstance(self.mode, SuggestionSelected):
            self.select_suggestion(int(key))
            return self._terminate("commit", ctx, self.layout.commit)
        if not self.layout.show_value:
            if key in ("Y", "y"):
                return self._terminate("yes", ctx, self.layout.yes)
            if key in ("N", "n"):
                return self._terminate("no", ctx, self.layout.no)
        self.key_insert(key)
        return ProcessResult(True, self._take_dirty())

    def _terminate(self, outcome: str, ctx: HostContext, callback: DialogCallback | None) -> ProcessResult:
        self.outcome = outcome
        logger.debug("dialog %r finished: %s", self.layout.prompt, outcome)
        if callback is not None:
            callback(ctx, self.value)
        return ProcessResult(False, True)

    def _take_dirty(self) -> bool:
        dirty = self.dirty
        self.dirty = False
        return dirty

    # editing
    def arrow_left(self) -> None:
        if isinstance(self.mode, SuggestionSelected):
            self.select_field()
        elif self.mode.cursor_pos > 0:
            self.mode = FieldEditing(self.mode.cursor_pos - 1)
            self.dirty = True

    def arrow_right(self) -> None:
        if isinstance(self.mode, SuggestionSelected):
            self.mode = FieldEditing(0)
            self.dirty = True
        elif self.mode.cursor_pos < len(self.value):
            self.mode = FieldEditing(self.mode.cursor_pos + 1)
            self.dirty = True

    def arrow_up(self) -> None:
        if not isinstance(self.mode, SuggestionSelected):
            return
        if self.mode.index > 0:
            self.select_suggestion(self.mode.index - 1)
        else:
            self.select_field()

    def arrow_down(self) -> None:
        if isinstance(self.mode, SuggestionSelected):
            self.select_suggestion(self.mode.index + 1)
        else:
            self.select_suggestion(0)

    def delete_prev(self) -> None:
        if isinstance(self.mode, SuggestionSelected):
            self.select_field()
            return
        pos = self.mode.cursor_pos
        if pos == 0:
            return
        self.value = self.value[: pos - 1] + self.value[pos:]
        self.mode = FieldEditing(pos - 1)
        self.dirty = True

    def delete_next(self) -> None:
        if isinstance(self.mode, SuggestionSelected):
            self.select_field()
            return
        pos = self.mode.cursor_pos
        if pos >= len(self.value):
            return
        self.value = self.value[:pos] + self.value[pos + 1 :]
        self.dirty = True

    def key_insert(self, ch: str) -> None:
        self.select_field()
        pos = self.cursor_pos or 0
        self.value = self.value[:pos] + ch + self.value[pos:]
        self.mode = FieldEditing(pos + 1)
        self.dirty = True

    def select_suggestion(self, index: int) -> None:
        """Mirror option ``index`` into the value; out-of-range indices are ignored."""
        if not 0 <= index < len(self.options):
            return
        if self.mode == SuggestionSelected(index):
            return
        self.mode = SuggestionSelected(index)
        self.value = self.options[index]
        self.dirty = True

    def select_field(self) -> None:
        if isinstance(self.mode, FieldEditing):
            return
        self.mode = FieldEditing(len(self.value))
        self.dirty = True


__all__ = ["InputDialog"]
