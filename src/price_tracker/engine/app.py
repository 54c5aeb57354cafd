from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import httpx

from price_tracker.engine.store import AppState
from price_tracker.exchange import BinanceApiError, BinanceSpotClient
from price_tracker.types import KeyEvent, SymbolConfig
from price_tracker.ui.render import build_layout

if TYPE_CHECKING:
    from price_tracker.ui.terminal import KeyReader, Terminal

logger = logging.getLogger("price_tracker.app")

_DEFAULT_FETCH_INTERVAL_SECONDS = 1.0
_DEFAULT_INPUT_POLL_SECONDS = 0.25


def is_quit_key(key: KeyEvent) -> bool:
    if key.code in ("esc", "q"):
        return True
    return key.ctrl and key.code in ("c", "C")


class App:
    """
    Single-threaded dashboard loop: render, fetch when due, poll input.

    Nothing runs concurrently; a slow price lookup delays both the rest of the
    fetch cycle and input handling until it returns.
    """

    def __init__(
        self,
        *,
        client: BinanceSpotClient,
        configs: Iterable[SymbolConfig],
        fetch_interval_seconds: float = _DEFAULT_FETCH_INTERVAL_SECONDS,
        input_poll_seconds: float = _DEFAULT_INPUT_POLL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._fetch_interval_seconds = fetch_interval_seconds
        self._input_poll_seconds = input_poll_seconds
        self._clock = clock
        self.state = AppState.create(configs, now_s=clock())

    @property
    def running(self) -> bool:
        return self.state.running

    def run(self, *, screen: Terminal, events: KeyReader) -> None:
        logger.info(
            "dashboard_started",
            extra={
                "symbols": [cfg.symbol for cfg in self.state.configs],
                "interval_s": self._fetch_interval_seconds,
            },
        )
        self.state.running = True
        while self.state.running:
            screen.draw(build_layout(self.state))

            if self._clock() - self.state.last_fetch_s >= self._fetch_interval_seconds:
                self.fetch_prices()
                self.state.last_fetch_s = self._clock()

            if events.poll(self._input_poll_seconds):
                self.handle_event(events.read())
        logger.info("dashboard_stopped")

    def fetch_prices(self) -> None:
        for cfg in self.state.configs:
            try:
                price = self._client.price(symbol=cfg.symbol)
            except (httpx.HTTPError, BinanceApiError):
                # Keep the previous value; the next cycle tries again.
                logger.debug("price_fetch_failed", extra={"symbol": cfg.symbol}, exc_info=True)
                continue
            self.state.prices.update(cfg.symbol, price)

    def handle_event(self, event: object) -> None:
        # Terminals that report key releases would otherwise trigger twice.
        if isinstance(event, KeyEvent) and event.kind == "press":
            self.on_key_event(event)

    def on_key_event(self, key: KeyEvent) -> None:
        if is_quit_key(key):
            self.quit()

    def quit(self) -> None:
        self.state.running = False
