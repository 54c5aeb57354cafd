from __future__ import annotations

import os
import select
import sys
import termios
from typing import Any, TextIO

from rich.console import Console, RenderableType
from rich.live import Live

from price_tracker.types import KeyEvent
from price_tracker.ui.keys import ESC, parse_key, utf8_continuation_bytes

# A lone ESC is followed by silence; sequence bytes may trail it over slow links.
_ESCAPE_SEQUENCE_WAIT_SECONDS = 0.05
_ESCAPE_SEQUENCE_MAX_BYTES = 32


class KeyReader:
    def __init__(self, fd: int) -> None:
        self._fd = fd

    def poll(self, timeout: float) -> bool:
        ready, _, _ = select.select([self._fd], [], [], timeout)
        return bool(ready)

    def read(self) -> KeyEvent:
        data = self._read(1)
        if data == ESC:
            data += self._read_escape_tail()
        else:
            data += self._read_utf8_tail(data[0])
        return parse_key(data)

    def _read_escape_tail(self) -> bytes:
        # Consume exactly one sequence; later keystrokes stay buffered.
        if not self.poll(_ESCAPE_SEQUENCE_WAIT_SECONDS):
            return b""
        tail = self._read(1)
        if tail == b"[":
            # CSI: parameter bytes, then a final byte in 0x40-0x7E.
            while len(tail) < _ESCAPE_SEQUENCE_MAX_BYTES and self.poll(
                _ESCAPE_SEQUENCE_WAIT_SECONDS
            ):
                tail += self._read(1)
                if 0x40 <= tail[-1] <= 0x7E:
                    break
        elif tail == b"O":
            if self.poll(_ESCAPE_SEQUENCE_WAIT_SECONDS):
                tail += self._read(1)
        else:
            # Alt+key
            tail += self._read_utf8_tail(tail[0])
        return tail

    def _read_utf8_tail(self, lead: int) -> bytes:
        tail = b""
        for _ in range(utf8_continuation_bytes(lead)):
            tail += self._read(1)
        return tail

    def _read(self, n: int) -> bytes:
        data = os.read(self._fd, n)
        if not data:
            raise EOFError("input stream closed")
        return data


class Terminal:
    """
    Full-screen draw surface plus keyboard input.

    Entering switches stdin to unbuffered, non-echoing mode (Ctrl+C is delivered
    as a key, not SIGINT) and opens the alternate screen. Leaving restores both,
    also when the body raised.
    """

    def __init__(self, *, console: Console | None = None, stdin: TextIO | None = None) -> None:
        self._console = console or Console()
        self._stdin = stdin or sys.stdin
        self._fd = -1
        self._saved_mode: list[Any] | None = None
        self._live: Live | None = None
        self._events: KeyReader | None = None

    def __enter__(self) -> Terminal:
        self._fd = self._stdin.fileno()
        self._saved_mode = termios.tcgetattr(self._fd)
        try:
            mode = termios.tcgetattr(self._fd)
            mode[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
            mode[6][termios.VMIN] = 1
            mode[6][termios.VTIME] = 0
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, mode)

            self._live = Live(
                console=self._console,
                screen=True,
                auto_refresh=False,
                redirect_stdout=False,
                redirect_stderr=False,
            )
            self._live.start()
        except BaseException:
            self._restore()
            raise
        self._events = KeyReader(self._fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._restore()

    @property
    def events(self) -> KeyReader:
        if self._events is None:
            raise RuntimeError("terminal is not active")
        return self._events

    def draw(self, renderable: RenderableType) -> None:
        if self._live is None:
            raise RuntimeError("terminal is not active")
        self._live.update(renderable, refresh=True)

    def _restore(self) -> None:
        live, self._live = self._live, None
        saved, self._saved_mode = self._saved_mode, None
        self._events = None
        try:
            if live is not None:
                live.stop()
        finally:
            if saved is not None:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, saved)
