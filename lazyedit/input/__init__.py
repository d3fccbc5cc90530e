"""Keyboard input: raw byte decoding, key tokens, and key dispatch tables."""

from __future__ import annotations

from . import keys
from .decode import read_key
from .key_registry import KeyComboBinding, KeyComboRegistry

__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "keys",
    "read_key",
]
