from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from currency_app.models import (
    CURRENCIES,
    ConversionOut,
    Currency,
    FormattedOut,
    NotificationOut,
    NotificationsOut,
    RatesOut,
    get_currency,
)
from currency_app.services.currency_service import CurrencyService
from currency_app.services.money import format_currency
from currency_app.services.notifications import ToastQueue

"""Currency router used by the UI.

Endpoints:
    - GET /currencies             -> supported currencies for selectors
    - GET /currencies/{code}      -> one supported currency (404 otherwise)
    - GET /rates/{base}           -> cached or freshly fetched rates
    - GET /convert                -> amount converted, raw and formatted
    - GET /format                 -> amount formatted for display
    - GET /notifications          -> drain pending error toasts

Rate/convert failures have already produced a toast when they reach the
exception handlers registered in ``currency_app.main``.
"""

router = APIRouter(tags=["currency"])


def get_currency_service(request: Request) -> CurrencyService:
    return request.app.state.currency_service


def get_toasts(request: Request) -> ToastQueue:
    return request.app.state.toasts


@router.get("/currencies", response_model=List[Currency], summary="List supported currencies")
async def list_currencies():
    return list(CURRENCIES)


@router.get("/currencies/{code}", response_model=Currency, summary="Look up a supported currency")
async def get_supported_currency(code: str):
    currency = get_currency(code)
    if currency is None:
        raise HTTPException(status_code=404, detail=f"unsupported currency {code.upper()}")
    return currency


@router.get("/rates/{base}", response_model=RatesOut, summary="Exchange rates for a base currency")
async def get_rates(base: str, svc: CurrencyService = Depends(get_currency_service)):
    rates = await svc.get_exchange_rates(base)
    snapshot = svc.facade.cache.peek(base)
    return RatesOut(base=base, rates=dict(rates), fetched_at=snapshot.timestamp)


@router.get("/convert", response_model=ConversionOut, summary="Convert an amount")
async def convert(
    amount: float = Query(..., allow_inf_nan=False),
    from_currency: str = Query(..., min_length=1),
    to_currency: str = Query(..., min_length=1),
    svc: CurrencyService = Depends(get_currency_service),
):
    result = await svc.convert_currency(amount, from_currency, to_currency)
    try:
        formatted = svc.format_currency(result, to_currency)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return ConversionOut(
        amount=amount,
        from_currency=from_currency,
        to_currency=to_currency,
        result=result,
        formatted=formatted,
    )


@router.get("/format", response_model=FormattedOut, summary="Format an amount as currency")
async def format_amount(
    amount: float = Query(..., allow_inf_nan=False),
    currency: str = Query(...),
):
    try:
        formatted = format_currency(amount, currency)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return FormattedOut(amount=amount, currency=currency.upper(), formatted=formatted)


@router.get("/notifications", response_model=NotificationsOut, summary="Drain pending toasts")
async def drain_notifications(toasts: ToastQueue = Depends(get_toasts)):
    return NotificationsOut(
        notifications=[
            NotificationOut(level=n.level, message=n.message, created_at=n.created_at)
            for n in toasts.drain()
        ]
    )
