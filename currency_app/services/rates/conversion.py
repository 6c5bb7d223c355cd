from __future__ import annotations

import asyncio
import logging
from typing import Dict, Mapping, Protocol

from currency_app.core.logging import log_context
from .cache_service import RateCache
from currency_app.services.errors import RateNotFoundError

"""Rate lookup & conversion core.

Responsibilities:
    - Serve rates for a base currency from the cache, fetching on miss/expiry.
    - Convert an amount as ``amount * rate`` with no rounding (formatting
      rounds, conversion does not).
    - Raise typed errors; user notification is the adapter's job
      (see ``currency_app.services.currency_service``).

Concurrent misses for one base normally each issue their own request and the
last write wins. With ``coalesce_requests`` they await a single shared fetch.
"""

logger = logging.getLogger("currency_app.rates")


class SupportsFetchRates(Protocol):
    async def fetch_rates(self, base: str) -> Mapping[str, float]: ...


class RateLookupFacade:
    def __init__(
        self,
        provider: SupportsFetchRates,
        cache: RateCache,
        coalesce_requests: bool = False,
    ):
        self._provider = provider
        self._cache = cache
        self._coalesce = coalesce_requests
        self._inflight: Dict[str, asyncio.Future] = {}

    @property
    def cache(self) -> RateCache:
        return self._cache

    async def _fetch_and_store(self, base: str) -> Mapping[str, float]:
        rates = await self._provider.fetch_rates(base)
        self._cache.put(base, rates)
        logger.info(
            "cached %d rates for %s",
            len(rates),
            base,
            extra=log_context(base, rate_count=len(rates), cache="store"),
        )
        return rates

    async def _fetch_shared(self, base: str) -> Mapping[str, float]:
        fut = self._inflight.get(base)
        if fut is None:
            fut = asyncio.ensure_future(self._fetch_and_store(base))
            self._inflight[base] = fut
            fut.add_done_callback(lambda _f, key=base: self._inflight.pop(key, None))
        else:
            logger.debug(
                "joining in-flight rate fetch for %s",
                base,
                extra=log_context(base, cache="join"),
            )
        # a cancelled waiter must not cancel the fetch other waiters share
        return await asyncio.shield(fut)

    async def get_exchange_rates(self, base_currency: str) -> Mapping[str, float]:
        snapshot = self._cache.get(base_currency)
        if snapshot is not None:
            logger.debug(
                "rates for %s served from cache",
                base_currency,
                extra=log_context(base_currency, cache="hit"),
            )
            return snapshot.rates
        if self._coalesce:
            return await self._fetch_shared(base_currency)
        return await self._fetch_and_store(base_currency)

    async def convert_currency(
        self, amount: float, from_currency: str, to_currency: str
    ) -> float:
        rates = await self.get_exchange_rates(from_currency)
        rate = rates.get(to_currency)
        if rate is None:
            raise RateNotFoundError(to_currency)
        return amount * rate
