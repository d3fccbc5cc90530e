"""Dialog layout and the two-state input mode type.

A dialog is either editing its value as free text (``FieldEditing``, which
carries the cursor) or mirroring one entry of its option list
(``SuggestionSelected``, which carries the option index). No other fields
exist, so a cursor can never coexist with a selected suggestion.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..host import HostContext

DialogCallback = Callable[["HostContext", str], None]


@dataclass(frozen=True)
class FieldEditing:
    cursor_pos: int


@dataclass(frozen=True)
class SuggestionSelected:
    index: int


DialogMode = Union[FieldEditing, SuggestionSelected]


@dataclass
class DialogLayout:
    """Construction-time description of a prompt dialog.

    ``show_value=False`` makes a pure yes/no prompt: the value is hidden,
    Return does nothing, and ``Y``/``N`` invoke ``yes``/``no``.
    """

    prompt: str
    value: str = ""
    show_value: bool = True
    options: list[str] = field(default_factory=list)
    commit: DialogCallback | None = None
    yes: DialogCallback | None = None
    no: DialogCallback | None = None


__all__ = [
    "DialogCallback",
    "DialogLayout",
    "DialogMode",
    "FieldEditing",
    "SuggestionSelected",
]
