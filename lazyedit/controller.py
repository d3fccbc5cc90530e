"""The closed set of controllers a shell window or dialog slot can hold.

Every member implements ``title``, ``help_items``, ``activate``,
``deactivate``, and ``process(ctx, key) -> ProcessResult``.
"""

from __future__ import annotations

from typing import Union

from .browser.controller import DirectoryBrowser
from .dialog.controller import InputDialog
from .editor_view import EditorView

Controller = Union[DirectoryBrowser, InputDialog, EditorView]

__all__ = [
    "Controller",
    "DirectoryBrowser",
    "EditorView",
    "InputDialog",
]
