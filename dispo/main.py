"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Firebase client handles (created in the lifespan)

No business logic belongs here.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from dispo.core.config import settings
from dispo.infrastructure.firebase import close_firebase, init_firebase
from dispo.interfaces.health import router as health_router
from dispo.interfaces.staffing.router import router as staffing_router
from dispo.shared.errors.handlers import register_error_handlers
from dispo.shared.logging import configure_logging
from dispo.shared.security.headers import SecurityHeadersMiddleware
from dispo.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open and release the Firebase handles."""
    app.state.firebase = init_firebase(settings)

    yield

    close_firebase(app.state.firebase)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(staffing_router, prefix="/api/v1")

    return app


app = create_app()
