"""Prompt dialogs: layout, input/suggestion state machine, and rendering."""

from __future__ import annotations

from .controller import InputDialog
from .rendering import RenderedDialog, dialog_height, render_dialog
from .state import DialogCallback, DialogLayout, DialogMode, FieldEditing, SuggestionSelected

__all__ = [
    "DialogCallback",
    "DialogLayout",
    "DialogMode",
    "FieldEditing",
    "InputDialog",
    "RenderedDialog",
    "SuggestionSelected",
    "dialog_height",
    "render_dialog",
]
