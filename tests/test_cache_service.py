from datetime import timedelta

import pytest

from currency_app.services.rates import RateCache


def test_fresh_entry_is_returned(cache, clock):
    snap = cache.put("USD", {"EUR": 0.9})
    clock.advance(minutes=59, seconds=59)
    assert cache.get("USD") is snap
    assert "USD" in cache


def test_entry_expires_at_exactly_ttl(cache, clock):
    cache.put("USD", {"EUR": 0.9})
    clock.advance(hours=1)
    assert cache.get("USD") is None
    assert "USD" not in cache
    # expired entries are kept until overwritten
    assert cache.peek("USD") is not None
    assert len(cache) == 1


def test_put_overwrites_whole_snapshot(cache, clock):
    first = cache.put("USD", {"EUR": 0.9})
    clock.advance(minutes=5)
    second = cache.put("USD", {"GBP": 0.8})
    assert cache.get("USD") is second
    assert second.rates == {"GBP": 0.8}
    assert first.rates == {"EUR": 0.9}
    assert second.timestamp - first.timestamp == timedelta(minutes=5)


def test_entries_are_per_base(cache):
    cache.put("USD", {"EUR": 0.9})
    assert cache.get("EUR") is None


def test_invalidate_and_clear(cache):
    cache.put("USD", {})
    cache.put("EUR", {})
    assert cache.invalidate("USD") is True
    assert cache.invalidate("USD") is False
    cache.clear()
    assert len(cache) == 0


def test_ttl_must_be_positive():
    with pytest.raises(ValueError):
        RateCache(ttl=timedelta(0))


def test_default_ttl_is_one_hour():
    assert RateCache().ttl == timedelta(hours=1)
