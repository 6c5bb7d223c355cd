from .cache_service import RateCache, RateSnapshot
from .conversion import RateLookupFacade
from currency_app.services.errors import (
    CurrencyServiceError,
    HttpError,
    NetworkError,
    ParseError,
    RateNotFoundError,
)
from .providers import ExchangeRateApiProvider

__all__ = [
    "RateCache",
    "RateSnapshot",
    "RateLookupFacade",
    "ExchangeRateApiProvider",
    "CurrencyServiceError",
    "NetworkError",
    "HttpError",
    "ParseError",
    "RateNotFoundError",
]
