"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing for arrows, delete, and alt-arrow combos.
"""

from __future__ import annotations

import codecs
import os
import select

from . import keys

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    text = decoder.decode(lead)
    while not text:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return decoder.decode(b"", final=True)
        text = decoder.decode(part)
    return text


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``keys.POLL`` when ``timeout_ms`` elapses without input.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return keys.POLL

        ch = os.read(fd, 1)
        if not ch:
            return keys.POLL

    token = keys.CONTROL_BYTES.get(ch)
    if token is not None:
        return token

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return keys.ESCAPE
    if seq in {b"b", b"B"}:
        return keys.ALT_LEFT
    if seq in {b"f", b"F"}:
        return keys.ALT_RIGHT
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return keys.ESCAPE
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return keys.ESCAPE
    if seq == b"A":
        return keys.UP
    if seq == b"B":
        return keys.DOWN
    if seq == b"C":
        return keys.RIGHT
    if seq == b"D":
        return keys.LEFT
    if seq == b"3":
        tail = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if tail == b"~":
            return keys.DELETE
        return keys.ESCAPE
    if seq == b"1":
        seq2 = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq2 != b";":
            return keys.ESCAPE
        seq3 = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        seq4 = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq3 in {b"3", b"9"} and seq4 == b"C":
            return keys.ALT_RIGHT
        if seq3 in {b"3", b"9"} and seq4 == b"D":
            return keys.ALT_LEFT
        return keys.ESCAPE
    return keys.ESCAPE
