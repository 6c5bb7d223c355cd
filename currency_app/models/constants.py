"""Supported currencies shown in UI selection widgets.

The list is fixed; conversion itself does not validate against it and will
pass any code through to the rate service.
"""

from __future__ import annotations

from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str


CURRENCIES: Tuple[Currency, ...] = (
    Currency(code="USD", name="US Dollar"),
    Currency(code="EUR", name="Euro"),
    Currency(code="GBP", name="British Pound"),
    Currency(code="JPY", name="Japanese Yen"),
    Currency(code="AUD", name="Australian Dollar"),
    Currency(code="CAD", name="Canadian Dollar"),
    Currency(code="CHF", name="Swiss Franc"),
    Currency(code="CNY", name="Chinese Yuan"),
    Currency(code="INR", name="Indian Rupee"),
    Currency(code="BRL", name="Brazilian Real"),
    Currency(code="ZAR", name="South African Rand"),
    Currency(code="RUB", name="Russian Ruble"),
    Currency(code="MXN", name="Mexican Peso"),
    Currency(code="SGD", name="Singapore Dollar"),
    Currency(code="NZD", name="New Zealand Dollar"),
)

CURRENCY_CODES: FrozenSet[str] = frozenset(c.code for c in CURRENCIES)

_BY_CODE = {c.code: c for c in CURRENCIES}


def get_currency(code: str) -> Optional[Currency]:
    return _BY_CODE.get(code.upper())
