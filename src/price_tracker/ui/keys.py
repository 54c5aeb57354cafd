from __future__ import annotations

from price_tracker.types import KeyEvent

ESC = b"\x1b"

_NAMED_BYTES = {
    b"\r": "enter",
    b"\n": "enter",
    b"\t": "tab",
    b"\x7f": "backspace",
    b"\x08": "backspace",
}

_ESCAPE_SEQUENCES = {
    b"\x1b[A": "up",
    b"\x1b[B": "down",
    b"\x1b[C": "right",
    b"\x1b[D": "left",
    b"\x1bOA": "up",
    b"\x1bOB": "down",
    b"\x1bOC": "right",
    b"\x1bOD": "left",
    b"\x1b[H": "home",
    b"\x1b[F": "end",
}


def utf8_continuation_bytes(lead: int) -> int:
    if 0xC0 <= lead <= 0xDF:
        return 1
    if 0xE0 <= lead <= 0xEF:
        return 2
    if 0xF0 <= lead <= 0xF7:
        return 3
    return 0


def parse_key(data: bytes) -> KeyEvent:
    """Translate the raw bytes of one keystroke into a `KeyEvent`."""
    if not data:
        return KeyEvent(code="unknown")
    if data == ESC:
        return KeyEvent(code="esc")
    if data in _ESCAPE_SEQUENCES:
        return KeyEvent(code=_ESCAPE_SEQUENCES[data])
    if data.startswith(ESC):
        rest = data[1:]
        if len(rest) > 1 and rest[:1] in (b"[", b"O"):
            return KeyEvent(code="unknown")
        # Terminals send Alt+key as ESC followed by the key.
        key = parse_key(rest)
        return KeyEvent(code=key.code, ctrl=key.ctrl, alt=True)
    if data in _NAMED_BYTES:
        return KeyEvent(code=_NAMED_BYTES[data])
    if len(data) == 1 and data[0] < 0x20:
        # Ctrl+A .. Ctrl+Z arrive as 0x01 .. 0x1a.
        if 0x01 <= data[0] <= 0x1A:
            return KeyEvent(code=chr(data[0] + 0x60), ctrl=True)
        return KeyEvent(code="unknown", ctrl=True)
    text = data.decode("utf-8", errors="replace")
    return KeyEvent(code=text if len(text) == 1 else "unknown")
