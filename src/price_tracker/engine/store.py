from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from price_tracker.types import SymbolConfig


class PriceStore:
    """Last observed price per symbol. Unset symbols read as `default`."""

    def __init__(self, symbols: Iterable[str] = (), *, default: float = 0.0) -> None:
        self._default = default
        self._prices: dict[str, float] = {symbol: default for symbol in symbols}

    def __len__(self) -> int:
        return len(self._prices)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._prices

    def update(self, symbol: str, price: float) -> None:
        self._prices[symbol] = price

    def get(self, symbol: str) -> float:
        return self._prices.get(symbol, self._default)

    def snapshot(self) -> dict[str, float]:
        return dict(self._prices)


@dataclass
class AppState:
    configs: tuple[SymbolConfig, ...]
    prices: PriceStore
    running: bool = True
    last_fetch_s: float = 0.0

    @classmethod
    def create(cls, configs: Iterable[SymbolConfig], *, now_s: float = 0.0) -> AppState:
        configs = tuple(configs)
        return cls(
            configs=configs,
            prices=PriceStore(cfg.symbol for cfg in configs),
            last_fetch_s=now_s,
        )
