from __future__ import annotations

from typing import Any

import httpx


class BinanceApiError(RuntimeError):
    def __init__(self, *, status_code: int, payload: Any):
        super().__init__(f"Binance API error: status={status_code} payload={payload!r}")
        self.status_code = status_code
        self.payload = payload


def _extract_price(payload: Any) -> float | None:
    if not isinstance(payload, dict):
        return None
    try:
        return float(payload["price"])
    except (KeyError, TypeError, ValueError):
        return None


class BinanceSpotClient:
    """
    Blocking client for the public Binance spot market-data endpoints.

    Each call is a single request: no retries, no signing. Timeouts are left to
    the underlying `httpx` client.
    """

    def __init__(
        self,
        *,
        base_url: str = "https://api.binance.com",
        timeout_seconds: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self._base_url,
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    def __enter__(self) -> BinanceSpotClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def price(self, *, symbol: str) -> float:
        data = self._request("GET", "/api/v3/ticker/price", params={"symbol": symbol})
        price = _extract_price(data)
        if price is None:
            raise BinanceApiError(status_code=200, payload=data)
        return price

    def _request(self, method: str, path: str, *, params: dict[str, Any]) -> Any:
        response = self._client.request(method, path, params=params)
        if response.status_code >= 400:
            payload: Any
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            raise BinanceApiError(status_code=response.status_code, payload=payload)
        try:
            return response.json()
        except ValueError as e:
            raise BinanceApiError(status_code=response.status_code, payload=response.text) from e
