from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from currency_app.services.errors import (
    CurrencyServiceError,
    HttpError,
    ParseError,
    RateNotFoundError,
)

logger = logging.getLogger("currency_app.errors")


def http_exception_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        detail = f"No route for {request.method} {request.url.path}"
        error = "not_found"
    else:
        detail = exc.detail
        error = "http_error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error, "detail": detail},
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": exc.errors(),
        },
    )


def currency_error_handler(request: Request, exc: CurrencyServiceError):  # type: ignore
    # Already logged and toasted by CurrencyService; only map to a response here.
    if isinstance(exc, RateNotFoundError):
        code, error = status.HTTP_404_NOT_FOUND, "rate_not_found"
    elif isinstance(exc, HttpError):
        code, error = status.HTTP_502_BAD_GATEWAY, "upstream_http_error"
    elif isinstance(exc, ParseError):
        code, error = status.HTTP_502_BAD_GATEWAY, "upstream_parse_error"
    else:
        code, error = status.HTTP_502_BAD_GATEWAY, "upstream_unavailable"
    content = {"error": error, "detail": str(exc)}
    if isinstance(exc, HttpError):
        content["upstream_status"] = exc.status_code
    return JSONResponse(status_code=code, content=content)


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
