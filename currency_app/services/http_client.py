"""Async GET-JSON helper over httpx.

One attempt per call: no retries and no timeout beyond what the client itself
was configured with. Failures are mapped onto the rate service error types.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from currency_app.services.errors import HttpError, NetworkError, ParseError

logger = logging.getLogger("currency_app.http")


async def get_json(client: httpx.AsyncClient, url: str) -> Any:
    try:
        resp = await client.get(url)
    except httpx.DecodingError as e:  # body read but content-encoding is corrupt
        raise ParseError(f"Undecodable body from rate service: {e}") from e
    except httpx.RequestError as e:
        raise NetworkError(f"Failed to fetch exchange rates ({type(e).__name__})") from e

    logger.debug(
        "GET %s -> %s", url, resp.status_code, extra={"upstream_status": resp.status_code}
    )
    if not resp.is_success:
        logger.warning(
            "rate service answered HTTP %s",
            resp.status_code,
            extra={"upstream_status": resp.status_code},
        )
        raise HttpError(resp.status_code, url=url)

    try:
        return resp.json()
    except ValueError as e:  # JSONDecodeError / UnicodeDecodeError
        raise ParseError(f"Invalid JSON from rate service: {e}") from e
