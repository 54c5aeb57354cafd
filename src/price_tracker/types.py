from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

KeyEventKind = Literal["press", "repeat", "release"]


@dataclass(frozen=True)
class SymbolConfig:
    symbol: str
    display_name: str
    # Any color token rich understands, e.g. "green" or "bright_yellow".
    color: str = "white"
    precision: int = 2


@dataclass(frozen=True)
class KeyEvent:
    # A single character ("q", "C") or a named key ("esc", "up", "enter").
    code: str
    ctrl: bool = False
    alt: bool = False
    kind: KeyEventKind = "press"
