import logging

import pytest

from currency_app.services.errors import HttpError, NetworkError, ParseError, RateNotFoundError
from currency_app.services.notifications import CONVERSION_FAILED, RATES_FETCH_FAILED

pytestmark = pytest.mark.anyio


async def test_rates_success_emits_no_toast(service, toasts):
    rates = await service.get_exchange_rates("USD")
    assert rates["GBP"] == 0.79
    assert len(toasts) == 0


async def test_rates_http_failure_toasts_once_and_reraises(service, toasts, rate_service, cache, caplog):
    rate_service.status_code = 503
    with caplog.at_level(logging.ERROR, logger="currency_app.service"):
        with pytest.raises(HttpError) as ei:
            await service.get_exchange_rates("USD")
    assert ei.value.status_code == 503
    assert cache.peek("USD") is None
    [toast] = toasts.drain()
    assert toast.level == "error"
    assert toast.message == RATES_FETCH_FAILED
    assert any("Error fetching exchange rates" in r.getMessage() for r in caplog.records)


async def test_rates_parse_failure_toasts(service, toasts, rate_service):
    rate_service.body = b"{"
    with pytest.raises(ParseError):
        await service.get_exchange_rates("USD")
    assert [t.message for t in toasts.drain()] == [RATES_FETCH_FAILED]


async def test_convert_success(service, toasts):
    assert await service.convert_currency(100, "USD", "EUR") == 100 * 0.92
    assert len(toasts) == 0


async def test_convert_missing_rate_toasts_once(service, toasts):
    with pytest.raises(RateNotFoundError):
        await service.convert_currency(5, "USD", "XYZ")
    [toast] = toasts.drain()
    assert toast.level == "error"
    assert toast.message == CONVERSION_FAILED


async def test_convert_fetch_failure_toasts_once_and_propagates_unchanged(service, toasts, rate_service):
    rate_service.status_code = 500
    with pytest.raises(HttpError) as ei:
        await service.convert_currency(5, "USD", "EUR")
    assert isinstance(ei.value, NetworkError)
    assert [t.message for t in toasts.drain()] == [CONVERSION_FAILED]


async def test_no_retry_after_failure(service, rate_service):
    rate_service.status_code = 502
    with pytest.raises(HttpError):
        await service.get_exchange_rates("USD")
    assert rate_service.calls == 1
    # next manual attempt succeeds once the service recovers
    rate_service.status_code = 200
    await service.get_exchange_rates("USD")
    assert rate_service.calls == 2


async def test_format_delegates(service):
    assert service.format_currency(-5.5, "USD") == "-$5.50"
