"""Smoke script for the rate cache against the live rate service.

Demonstrates:
 1. First access triggers a network fetch.
 2. Subsequent access within TTL reuses the cached snapshot (same timestamp).
 3. Backdating the snapshot past the TTL forces exactly one refetch.

NOTE: This is a lightweight diagnostic and not a formal test.
"""

import asyncio
from dataclasses import replace
from pprint import pprint

import httpx

from currency_app.core.config import get_settings
from currency_app.services.currency_service import CurrencyService
from currency_app.services.money import format_currency
from currency_app.services.notifications import ToastQueue
from currency_app.services.rates import ExchangeRateApiProvider, RateCache, RateLookupFacade


async def run(base: str = "USD", quote: str = "EUR"):
    settings = get_settings()
    cache = RateCache()
    toasts = ToastQueue()
    out = {}
    async with httpx.AsyncClient() as client:
        facade = RateLookupFacade(ExchangeRateApiProvider(client, settings.rates_url), cache)
        svc = CurrencyService(facade, toasts)

        rates = await svc.get_exchange_rates(base)
        out["initial"] = {quote: rates.get(quote), "fetched_at": cache.peek(base).timestamp.isoformat()}

        await svc.get_exchange_rates(base)
        out["second"] = {"fetched_at": cache.peek(base).timestamp.isoformat()}

        # Force refresh by backdating the snapshot beyond TTL
        stale = cache.peek(base)
        cache._entries[base] = replace(stale, timestamp=stale.timestamp - cache.ttl)  # type: ignore[attr-defined]
        await svc.get_exchange_rates(base)
        out["forced_refresh"] = {"fetched_at": cache.peek(base).timestamp.isoformat()}

        converted = await svc.convert_currency(100, base, quote)
        out["convert_100"] = {"raw": converted, "formatted": format_currency(converted, quote)}

    out["toasts"] = [n.message for n in toasts.drain()]
    pprint(out)


if __name__ == "__main__":
    asyncio.run(run())
