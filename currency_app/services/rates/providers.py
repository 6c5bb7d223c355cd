from __future__ import annotations

"""Remote rate service client (ExchangeRate-API style ``/latest/<BASE>``)."""
import math
from typing import Any, Dict

import httpx

from currency_app.services.http_client import get_json
from currency_app.services.errors import ParseError


def parse_rates(payload: Any) -> Dict[str, float]:
    """Extract the ``rates`` mapping from a decoded response body."""
    rates = payload.get("rates") if isinstance(payload, dict) else None
    if not isinstance(rates, dict):
        raise ParseError("Rate service response has no 'rates' mapping")
    parsed: Dict[str, float] = {}
    for code, value in rates.items():
        # bool is an int subclass; JSON true/false is never a rate
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParseError(f"Non-numeric rate for {code!r}: {value!r}")
        if not math.isfinite(value):
            raise ParseError(f"Non-finite rate for {code!r}")
        parsed[str(code)] = float(value)
    return parsed


class ExchangeRateApiProvider:
    def __init__(self, client: httpx.AsyncClient, base_url: str):
        self._client = client
        self._base_url = base_url.rstrip("/")

    def url_for(self, base: str) -> str:
        # base is passed through as-is; the remote service validates it
        return f"{self._base_url}/{base}"

    async def fetch_rates(self, base: str) -> Dict[str, float]:
        payload = await get_json(self._client, self.url_for(base))
        return parse_rates(payload)
