from typing import Optional

import httpx
import pytest

from price_tracker.engine.app import App
from price_tracker.exchange.binance_spot import BinanceApiError
from price_tracker.types import KeyEvent, SymbolConfig

_CONFIGS = (
    SymbolConfig(symbol="AAAUSDT", display_name="AAA/USDT", color="green", precision=2),
    SymbolConfig(symbol="BBBUSDT", display_name="BBB/USDT", color="blue", precision=4),
)


class _Clock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class _Client:
    def __init__(
        self,
        *,
        prices: dict[str, float],
        errors: Optional[dict[str, Exception]] = None,
    ) -> None:
        self.prices = prices
        self.errors = errors or {}
        self.calls: list[str] = []

    def price(self, *, symbol: str) -> float:
        self.calls.append(symbol)
        if symbol in self.errors:
            raise self.errors[symbol]
        return self.prices[symbol]


class _Screen:
    def __init__(self) -> None:
        self.draws = 0

    def draw(self, renderable: object) -> None:
        self.draws += 1


class _ScriptedEvents:
    """Each poll advances the clock; `None` entries mean the poll timed out."""

    def __init__(self, clock: _Clock, script: list[tuple[float, Optional[KeyEvent]]]) -> None:
        self._clock = clock
        self._script = list(script)
        self._pending: Optional[KeyEvent] = None
        self.polls: list[float] = []

    def poll(self, timeout: float) -> bool:
        self.polls.append(timeout)
        advance_s, event = self._script.pop(0)
        self._clock.now += advance_s
        self._pending = event
        return event is not None

    def read(self) -> KeyEvent:
        event, self._pending = self._pending, None
        assert event is not None
        return event


def _app(client: _Client, clock: _Clock) -> App:
    return App(client=client, configs=_CONFIGS, clock=clock)


def test_no_fetch_before_first_interval_elapses() -> None:
    clock = _Clock()
    client = _Client(prices={"AAAUSDT": 1.0, "BBBUSDT": 2.0})
    app = _app(client, clock)
    script: list[tuple[float, Optional[KeyEvent]]] = [(0.02, None)] * 10
    script.append((0.0, KeyEvent(code="q")))
    events = _ScriptedEvents(clock, script)
    screen = _Screen()

    app.run(screen=screen, events=events)

    assert client.calls == []
    assert screen.draws == 11
    assert app.state.prices.get("AAAUSDT") == 0.0


def test_fetch_runs_at_most_once_per_interval() -> None:
    clock = _Clock()
    client = _Client(prices={"AAAUSDT": 1.0, "BBBUSDT": 2.0})
    app = _app(client, clock)
    script: list[tuple[float, Optional[KeyEvent]]] = [(0.25, None)] * 10
    script.append((0.25, KeyEvent(code="esc")))
    events = _ScriptedEvents(clock, script)

    app.run(screen=_Screen(), events=events)

    # Checks happen at 0.0, 0.25, ..., 2.5: due at 1.0 and 2.0 only.
    assert client.calls == ["AAAUSDT", "BBBUSDT", "AAAUSDT", "BBBUSDT"]
    assert app.state.last_fetch_s == 2.0
    assert app.state.prices.snapshot() == {"AAAUSDT": 1.0, "BBBUSDT": 2.0}


def test_input_poll_uses_bounded_timeout() -> None:
    clock = _Clock()
    app = App(
        client=_Client(prices={}),
        configs=_CONFIGS,
        input_poll_seconds=0.25,
        clock=clock,
    )
    events = _ScriptedEvents(clock, [(0.1, None), (0.1, KeyEvent(code="c", ctrl=True))])

    app.run(screen=_Screen(), events=events)

    assert events.polls == [0.25, 0.25]
    assert app.running is False


def test_failed_symbol_keeps_previous_price_and_others_update() -> None:
    client = _Client(
        prices={"BBBUSDT": 42.5},
        errors={"AAAUSDT": BinanceApiError(status_code=400, payload={"code": -1121})},
    )
    app = _app(client, _Clock())
    app.state.prices.update("AAAUSDT", 7.25)

    app.fetch_prices()

    assert app.state.prices.get("AAAUSDT") == 7.25
    assert app.state.prices.get("BBBUSDT") == 42.5
    assert client.calls == ["AAAUSDT", "BBBUSDT"]


def test_network_error_is_skipped_silently() -> None:
    request = httpx.Request("GET", "https://api.binance.com/api/v3/ticker/price")
    client = _Client(
        prices={"AAAUSDT": 3.0},
        errors={"BBBUSDT": httpx.ReadTimeout("timeout", request=request)},
    )
    app = _app(client, _Clock())

    app.fetch_prices()

    assert app.state.prices.get("AAAUSDT") == 3.0
    assert app.state.prices.get("BBBUSDT") == 0.0


def test_unexpected_fetch_error_propagates() -> None:
    client = _Client(prices={}, errors={"AAAUSDT": ZeroDivisionError("bug")})
    app = _app(client, _Clock())

    with pytest.raises(ZeroDivisionError):
        app.fetch_prices()


def test_failed_fetch_recovers_on_next_cycle() -> None:
    clock = _Clock()
    request = httpx.Request("GET", "https://api.binance.com/api/v3/ticker/price")
    client = _Client(
        prices={"AAAUSDT": 10.0, "BBBUSDT": 20.0},
        errors={"AAAUSDT": httpx.ConnectError("down", request=request)},
    )
    app = _app(client, clock)

    clock.now = 1.0
    app.fetch_prices()
    assert app.state.prices.get("AAAUSDT") == 0.0

    client.errors.clear()
    app.fetch_prices()
    assert app.state.prices.get("AAAUSDT") == 10.0


def test_input_source_error_propagates_out_of_run() -> None:
    class _BrokenEvents:
        def poll(self, timeout: float) -> bool:
            return True

        def read(self) -> KeyEvent:
            raise EOFError("input stream closed")

    app = _app(_Client(prices={}), _Clock())
    with pytest.raises(EOFError):
        app.run(screen=_Screen(), events=_BrokenEvents())
