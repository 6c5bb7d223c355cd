"""Money rounding and display formatting.

Display follows en-US conventions: the currency's en-US symbol, ``,`` as the
grouping separator, ``.`` as the decimal separator and the sign ahead of the
symbol (``-$5.50``). Every currency is shown with exactly two fractional
digits, including ones that natively use zero or three (``¥1,000.00``).
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Dict

NBSP = "\u00a0"

# en-US symbols that differ from the ISO code. Any other valid code is shown
# as the code followed by a no-break space ("CHF 5.00").
_SYMBOLS: Dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "CA$",
    "CNY": "CN¥",
    "INR": "₹",
    "BRL": "R$",
    "MXN": "MX$",
    "NZD": "NZ$",
    "HKD": "HK$",
    "ILS": "₪",
    "KRW": "₩",
    "TWD": "NT$",
    "VND": "₫",
    "PHP": "₱",
    "XAF": "FCFA",
    "XCD": "EC$",
    "XOF": "F" + NBSP + "CFA",
    "XPF": "CFPF",
}


def quantize2(value: float) -> Decimal:
    d = Decimal(str(value))
    # precision must cover every integer digit plus the two cents
    ctx = Context(prec=max(28, d.adjusted() + 3))
    return d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP, context=ctx)


def currency_symbol(currency_code: str) -> str:
    code = currency_code.upper()
    if len(code) != 3 or not code.isascii() or not code.isalpha():
        raise ValueError(f"Invalid currency code: {currency_code!r}")
    return _SYMBOLS.get(code, code + NBSP)


def format_currency(amount: float, currency_code: str) -> str:
    symbol = currency_symbol(currency_code)
    if math.isnan(amount):
        return f"{symbol}NaN"
    sign = "-" if math.copysign(1.0, amount) < 0 else ""
    if math.isinf(amount):
        return f"{sign}{symbol}∞"
    value = quantize2(abs(amount))
    return f"{sign}{symbol}{value:,f}"
