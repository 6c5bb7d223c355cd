from functools import lru_cache

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    EXCHANGE_API_BASE_URL, RATES_CACHE_TTL_SECONDS).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Exchange rates / caching
    # Any ExchangeRate-API compatible ".../latest" endpoint; the base currency is
    # appended as the last path segment. Keyed plans look like
    # https://v6.exchangerate-api.com/v6/<key>/latest
    exchange_api_base_url: AnyHttpUrl = "https://open.er-api.com/v6/latest"
    rates_cache_ttl_seconds: int = 3600  # 1 hour
    # Share one outstanding fetch between concurrent misses for the same base
    coalesce_rate_requests: bool = False

    # Toasts kept for the UI before the oldest are dropped
    toast_queue_size: int = 50

    @field_validator("rates_cache_ttl_seconds", "toast_queue_size")
    @classmethod
    def positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @property
    def rates_url(self) -> str:
        return str(self.exchange_api_base_url).rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
