__all__ = ["BinanceApiError", "BinanceSpotClient"]

from price_tracker.exchange.binance_spot import BinanceApiError, BinanceSpotClient
