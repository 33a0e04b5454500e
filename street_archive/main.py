"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, telemetry, routers.
No business logic here. See street_archive.core.lifespan and
street_archive.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from street_archive.api import api_router, health_router
from street_archive.core.config import get_settings
from street_archive.core.exception_handlers import register_exception_handlers
from street_archive.core.lifespan import create_lifespan
from street_archive.core.limiter import limiter
from street_archive.middleware import AccessLogMiddleware, RequestContextMiddleware
from street_archive.shared.telemetry.telemetry import configure_telemetry


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    limiter.enabled = settings.rate_limit_enabled

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: request context -> access log -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header, settings.correlation_id_header],
    )
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        RequestContextMiddleware,
        request_id_header=settings.request_id_header,
        correlation_id_header=settings.correlation_id_header,
    )

    configure_telemetry(app, settings)

    app.include_router(health_router)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
