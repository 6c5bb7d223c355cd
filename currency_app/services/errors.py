"""Failures raised by rate lookup and conversion.

Nothing here is swallowed: the notifying adapter logs, emits a toast and
re-raises the same instance so callers can react too.
"""

from __future__ import annotations

from typing import Optional


class CurrencyServiceError(Exception):
    pass


class NetworkError(CurrencyServiceError):
    """The rate service could not be reached or did not answer successfully."""


class HttpError(NetworkError):
    def __init__(self, status_code: int, url: Optional[str] = None):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Failed to fetch exchange rates (HTTP {status_code})")


class ParseError(CurrencyServiceError):
    """Response body was not JSON or had no usable ``rates`` mapping."""


class RateNotFoundError(CurrencyServiceError):
    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"Exchange rate not found for {currency}")
