from __future__ import annotations

from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from price_tracker.engine.store import AppState
from price_tracker.types import SymbolConfig

TITLE = "Crypto Price Tracker"
_TITLE_HEIGHT = 3


def format_price(price: float, precision: int) -> str:
    return f"{price:.{precision}f}"


def price_line(cfg: SymbolConfig, price: float) -> Text:
    return Text.assemble(
        f"{cfg.display_name}:  ",
        (f"${format_price(price, cfg.precision)}", cfg.color),
    )


def build_title() -> Panel:
    return Panel(Text(TITLE, style="bold blue", justify="center"))


def build_prices(state: AppState) -> Panel:
    lines = Text("\n").join(price_line(cfg, state.prices.get(cfg.symbol)) for cfg in state.configs)
    return Panel(lines, title="Live Prices", title_align="left", style="white")


def build_layout(state: AppState) -> Layout:
    """Title on top, one price line per symbol below, blank space after."""
    layout = Layout(name="root")
    layout.split_column(
        Layout(build_title(), name="title", size=_TITLE_HEIGHT),
        Layout(build_prices(state), name="prices", size=len(state.configs) + 2),
        Layout(Text(""), name="spacer"),
    )
    return layout
