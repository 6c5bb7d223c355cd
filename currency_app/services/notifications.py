"""User-facing toast notifications.

Failures in rate lookup and conversion are surfaced to the user as short
"error" toasts. The UI collects them from a ``ToastQueue`` (exposed over
``GET /notifications``); anything implementing ``Notifier`` can stand in.

Notification schema:
  level: 'error' | 'warning' | 'info' | 'success'
  message: human readable string
  created_at: aware UTC datetime
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Deque, List, Protocol

RATES_FETCH_FAILED = "Failed to fetch exchange rates. Please try again later."
CONVERSION_FAILED = "Currency conversion failed. Please try again later."

LEVELS = ("error", "warning", "info", "success")

logger = logging.getLogger("currency_app.notifications")


@dataclass(frozen=True)
class Notification:
    level: str
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier(Protocol):
    def notify(self, level: str, message: str) -> None: ...


class ToastQueue:
    """Bounded in-memory queue; the oldest toasts drop off once full."""

    def __init__(self, maxlen: int = 50):
        self._items: Deque[Notification] = deque(maxlen=maxlen)

    def notify(self, level: str, message: str) -> None:
        if level not in LEVELS:
            raise ValueError(f"unknown notification level '{level}'")
        self._items.append(Notification(level=level, message=message))
        logger.info("toast[%s] %s", level, message)

    def error(self, message: str) -> None:
        self.notify("error", message)

    def pending(self) -> List[Notification]:
        return list(self._items)

    def drain(self) -> List[Notification]:
        items = list(self._items)
        self._items.clear()
        return items

    def __len__(self) -> int:
        return len(self._items)


__all__ = [
    "Notification",
    "Notifier",
    "ToastQueue",
    "RATES_FETCH_FAILED",
    "CONVERSION_FAILED",
]
