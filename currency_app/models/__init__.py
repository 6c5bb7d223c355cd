"""Pydantic models for the currency service."""

from .constants import CURRENCIES, CURRENCY_CODES, Currency, get_currency  # re-export
from .rates import ConversionOut, FormattedOut, NotificationOut, NotificationsOut, RatesOut

__all__ = [
    "CURRENCIES",
    "CURRENCY_CODES",
    "Currency",
    "get_currency",
    "RatesOut",
    "ConversionOut",
    "FormattedOut",
    "NotificationOut",
    "NotificationsOut",
]
