from __future__ import annotations

from collections.abc import Iterable

from price_tracker.types import SymbolConfig

DEFAULT_SYMBOLS: tuple[SymbolConfig, ...] = (
    SymbolConfig(symbol="BTCUSDT", display_name="BTC/USDT", color="green", precision=2),
    SymbolConfig(symbol="ETHUSDT", display_name="ETH/USDT", color="blue", precision=2),
    SymbolConfig(symbol="BNBUSDT", display_name="BNB/USDT", color="yellow", precision=2),
    SymbolConfig(symbol="UNIUSDT", display_name="UNI/USDT", color="cyan", precision=2),
    SymbolConfig(symbol="TONUSDT", display_name="TON/USDT", color="cyan", precision=2),
    SymbolConfig(symbol="SOLUSDT", display_name="SOL/USDT", color="cyan", precision=2),
    SymbolConfig(symbol="XRPUSDT", display_name="XRP/USDT", color="magenta", precision=4),
    SymbolConfig(symbol="DOGEUSDT", display_name="DOGE/USDT", color="bright_yellow", precision=6),
    SymbolConfig(symbol="ADAUSDT", display_name="ADA/USDT", color="bright_cyan", precision=4),
)


def select_symbols(
    names: Iterable[str],
    *,
    known: Iterable[SymbolConfig] = DEFAULT_SYMBOLS,
) -> tuple[SymbolConfig, ...]:
    """
    Resolve tickers to display configs, keeping order and dropping duplicates.

    An empty selection means every known symbol. Tickers without a known config
    are shown with their raw ticker as label.
    """
    by_symbol = {cfg.symbol: cfg for cfg in known}
    selected: list[SymbolConfig] = []
    seen: set[str] = set()
    for name in names:
        symbol = name.strip().upper()
        if not symbol or symbol in seen:
            continue
        seen.add(symbol)
        selected.append(by_symbol.get(symbol, SymbolConfig(symbol=symbol, display_name=symbol)))
    if not selected:
        return tuple(by_symbol.values())
    return tuple(selected)
