"""
Main FastAPI application entry point.

Builds the application: middleware pipeline, exception handlers, routers
and the lifespan that runs the rate limiter's idle sweep.

Middleware order on the way in (Starlette wraps in reverse registration
order, so registration below runs innermost first):

    RequestID -> Metrics -> SecurityHeaders -> RateLimit -> CORS
    -> RequestLogging -> AuditLog -> Recovery -> route
"""

import asyncio
import contextlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from src.core.config import Settings, get_settings
from src.core.container import get_cache, get_logger
from src.core.result import Failure
from src.domain.value_objects import RateLimitRule
from src.infrastructure.rate_limit import InMemoryRateLimiter
from src.presentation.routers.api.middleware import (
    AuditLogMiddleware,
    MetricsMiddleware,
    RateLimitMiddleware,
    RecoveryMiddleware,
    RequestIDMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from src.presentation.routers.api.v1 import build_v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers
from src.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Probe the cache, start the rate limiter sweep task
    - Shutdown: Cancel the sweep task, release cache connections

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    limiter: InMemoryRateLimiter = app.state.rate_limiter
    sweep_seconds: float = app.state.rate_limit_sweep_seconds

    cache = get_cache()
    ping = await cache.ping()
    if isinstance(ping, Failure):
        logger.warning("Cache unreachable; continuing without it", error=str(ping.error))

    sweeper = asyncio.create_task(limiter.run_sweeper(sweep_seconds))
    logger.info("Application started", rate_limit_sweep_seconds=sweep_seconds)

    yield

    sweeper.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await sweeper
    await cache.close()
    logger.info("Application stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to build with; defaults to ``get_settings()``.
            Injected services come from the container, which always reads
            ``get_settings()``.

    Returns:
        Configured application. The rate limiter is exposed as
        ``app.state.rate_limiter``.
    """
    settings = settings or get_settings()
    logger = get_logger()

    app = FastAPI(
        title=settings.app_name,
        description="User management and authentication API",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.debug,
        lifespan=lifespan,
    )

    rate_limiter = InMemoryRateLimiter(
        RateLimitRule(
            rate=settings.rate_limit_rps,
            burst=settings.rate_limit_burst,
            idle_seconds=settings.rate_limit_idle_seconds,
        ),
        logger=logger,
    )
    app.state.rate_limiter = rate_limiter
    app.state.rate_limit_sweep_seconds = settings.rate_limit_sweep_seconds

    # Registered innermost first
    app.add_middleware(RecoveryMiddleware, logger=logger)
    app.add_middleware(
        AuditLogMiddleware,
        logger=logger,
        api_prefix=settings.api_v1_prefix,
        trust_forwarded_for=settings.trust_forwarded_for,
    )
    app.add_middleware(
        RequestLoggingMiddleware,
        logger=logger,
        trust_forwarded_for=settings.trust_forwarded_for,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(
        RateLimitMiddleware,
        rate_limiter=rate_limiter,
        trust_forwarded_for=settings.trust_forwarded_for,
        logger=logger,
    )
    app.add_middleware(SecurityHeadersMiddleware, hsts_enabled=settings.hsts_enabled)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Envelope responses for HTTP and validation errors
    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(build_v1_router(settings.api_v1_prefix))

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve ``app`` with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
