import logging
from contextlib import asynccontextmanager
from datetime import timedelta

import httpx
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import currencies
from .services.currency_service import CurrencyService
from .services.errors import CurrencyServiceError
from .services.notifications import ToastQueue
from .services.rates import ExchangeRateApiProvider, RateCache, RateLookupFacade


def create_app(
    settings_override: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests.
    Falls back to cached get_settings().
    transport: optional httpx transport for the rate service client (tests use
    ``httpx.MockTransport``).
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug)
    logger = logging.getLogger("currency_app")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One cache and one HTTP client per running application.
        client = httpx.AsyncClient(transport=transport)
        cache = RateCache(ttl=timedelta(seconds=settings.rates_cache_ttl_seconds))
        facade = RateLookupFacade(
            ExchangeRateApiProvider(client, settings.rates_url),
            cache,
            coalesce_requests=settings.coalesce_rate_requests,
        )
        toasts = ToastQueue(maxlen=settings.toast_queue_size)
        app.state.rate_cache = cache
        app.state.toasts = toasts
        app.state.currency_service = CurrencyService(facade, toasts)
        logger.info("rate service at %s", settings.rates_url)
        try:
            yield
        finally:
            cache.clear()
            await client.aclose()

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_exception_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(CurrencyServiceError, errors.currency_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    app.include_router(currencies.router)

    @app.get("/")
    async def root():
        return {"message": f"{settings.app_name} API", "version": settings.version}

    return app


app = create_app()
