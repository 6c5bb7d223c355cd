from __future__ import annotations

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field


class RatesOut(BaseModel):
    base: str
    rates: Dict[str, float]
    fetched_at: datetime


class ConversionOut(BaseModel):
    amount: float
    from_currency: str
    to_currency: str
    result: float = Field(..., description="Unrounded amount in the target currency")
    formatted: str


class FormattedOut(BaseModel):
    amount: float
    currency: str
    formatted: str


class NotificationOut(BaseModel):
    level: str
    message: str
    created_at: datetime


class NotificationsOut(BaseModel):
    notifications: List[NotificationOut]
