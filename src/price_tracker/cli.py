from __future__ import annotations

import logging

import typer

from price_tracker.engine.app import App
from price_tracker.exchange import BinanceSpotClient
from price_tracker.logging_utils import configure_logging
from price_tracker.settings import Settings
from price_tracker.symbols import select_symbols
from price_tracker.ui.terminal import Terminal

app = typer.Typer(add_completion=False)
logger = logging.getLogger("price_tracker")


@app.command()
def main() -> None:
    """
    Show live Binance prices. Quit with q, Esc or Ctrl+C.
    """
    client: BinanceSpotClient | None = None
    try:
        settings = Settings()
        configure_logging(settings.log_level, settings.log_file)
        client = BinanceSpotClient(
            base_url=settings.binance_base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )
        dashboard = App(
            client=client,
            configs=select_symbols(settings.symbol_list()),
            fetch_interval_seconds=settings.fetch_interval_seconds,
            input_poll_seconds=settings.input_poll_seconds,
        )
        # The terminal is restored before anything below prints.
        with Terminal() as terminal:
            dashboard.run(screen=terminal, events=terminal.events)
    except Exception as e:
        logger.exception("dashboard_failed", extra={"exit_code": 1})
        typer.echo(f"Error: {type(e).__name__}: {e}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        if client is not None:
            client.close()
