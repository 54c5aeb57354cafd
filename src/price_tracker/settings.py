from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment only: the dashboard deliberately reads no config file.
    model_config = SettingsConfigDict(extra="ignore")

    # Binance (spot, public endpoints)
    binance_base_url: str = Field(
        default="https://api.binance.com",
        validation_alias="BINANCE_BASE_URL",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias="REQUEST_TIMEOUT_SECONDS",
    )

    # Dashboard
    fetch_interval_seconds: float = Field(
        default=1.0,
        gt=0,
        validation_alias="FETCH_INTERVAL_SECONDS",
    )
    input_poll_seconds: float = Field(default=0.25, gt=0, validation_alias="INPUT_POLL_SECONDS")
    symbols: str = Field(default="", validation_alias="SYMBOLS")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LOG_FILE")

    def symbol_list(self) -> list[str]:
        return [s.strip().upper() for s in self.symbols.split(",") if s.strip()]
