"""
Application entry point.

Creates the FastAPI application and wires together:
- The file listing router for the configured iteration
- Security middleware and the per-app rate limiter
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.core.config import Settings, settings as default_settings
from app.interfaces.files.router import build_router
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import build_limiter


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Builds the router explicitly and includes it, together with
    security middleware. This is the composition root of the application.

    Args:
        settings: Settings to run with. Defaults to the environment's.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings

    # --- Rate Limiting ---
    limiter = build_limiter(enabled=settings.rate_limit_enabled)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Routers ---
    app.include_router(build_router(settings, limiter=limiter))

    return app


app = create_app()
