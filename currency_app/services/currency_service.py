"""Public currency operations with user notification.

Wraps ``RateLookupFacade`` so every failure is logged, shown to the user as
a single error toast and then re-raised unchanged for the caller to react to
(e.g. disable a button). There is no retry and no stale-data fallback.
"""

from __future__ import annotations

import logging
from typing import Mapping

from currency_app.core.logging import log_context
from currency_app.services.money import format_currency
from currency_app.services.notifications import (
    CONVERSION_FAILED,
    RATES_FETCH_FAILED,
    Notifier,
)
from currency_app.services.rates.conversion import RateLookupFacade

logger = logging.getLogger("currency_app.service")


class CurrencyService:
    def __init__(self, facade: RateLookupFacade, notifier: Notifier):
        self._facade = facade
        self._notifier = notifier

    @property
    def facade(self) -> RateLookupFacade:
        return self._facade

    async def get_exchange_rates(self, base_currency: str) -> Mapping[str, float]:
        try:
            return await self._facade.get_exchange_rates(base_currency)
        except Exception as e:
            logger.exception(
                "Error fetching exchange rates for %s",
                base_currency,
                extra=log_context(
                    base_currency, upstream_status=getattr(e, "status_code", None)
                ),
            )
            self._notifier.notify("error", RATES_FETCH_FAILED)
            raise

    async def convert_currency(
        self, amount: float, from_currency: str, to_currency: str
    ) -> float:
        # Goes to the facade directly so a failed fetch yields one toast, not two.
        try:
            return await self._facade.convert_currency(amount, from_currency, to_currency)
        except Exception as e:
            logger.exception(
                "Error converting currency %s -> %s",
                from_currency,
                to_currency,
                extra=log_context(
                    from_currency,
                    to_currency,
                    upstream_status=getattr(e, "status_code", None),
                ),
            )
            self._notifier.notify("error", CONVERSION_FAILED)
            raise

    def format_currency(self, amount: float, currency_code: str) -> str:
        return format_currency(amount, currency_code)
