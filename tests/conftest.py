"""Shared fixtures: a scripted rate service behind httpx.MockTransport."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Dict, List

import httpx
import pytest

from currency_app.services.notifications import ToastQueue
from currency_app.services.rates import ExchangeRateApiProvider, RateCache, RateLookupFacade
from currency_app.services.currency_service import CurrencyService

BASE_URL = "https://rates.test/v6/latest"

USD_RATES = {"USD": 1.0, "EUR": 0.92, "GBP": 0.79, "JPY": 149.5, "ZERO": 0.0}


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeRateService:
    """Answers GET <BASE_URL>/<BASE> from a table and records every request."""

    def __init__(self, rates_by_base: Dict[str, Dict[str, float]] | None = None):
        self.rates_by_base = rates_by_base or {"USD": dict(USD_RATES)}
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: bytes | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"result": "error"})
        if self.body is not None:
            return httpx.Response(200, content=self.body)
        base = request.url.path.rsplit("/", 1)[-1]
        rates = self.rates_by_base.get(base)
        if rates is None:
            return httpx.Response(404, json={"result": "error", "error-type": "unsupported-code"})
        return httpx.Response(200, json={"result": "success", "base_code": base, "rates": rates})

    @property
    def calls(self) -> int:
        return len(self.requests)


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def rate_service() -> FakeRateService:
    return FakeRateService()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> RateCache:
    return RateCache(ttl=timedelta(hours=1), clock=clock)


@pytest.fixture
async def http_client(rate_service):
    async with httpx.AsyncClient(transport=httpx.MockTransport(rate_service)) as client:
        yield client


@pytest.fixture
def facade(http_client, cache) -> RateLookupFacade:
    return RateLookupFacade(ExchangeRateApiProvider(http_client, BASE_URL), cache)


@pytest.fixture
def toasts() -> ToastQueue:
    return ToastQueue()


@pytest.fixture
def service(facade, toasts) -> CurrencyService:
    return CurrencyService(facade, toasts)
