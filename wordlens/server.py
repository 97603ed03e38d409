"""FastAPI server for WordLens keyword analysis."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api import analysis_router, documents_router, sanitize_error_message
from .config import Settings, settings
from .engine import WordLensError
from .middleware import IPRateLimitMiddleware, SecurityHeadersMiddleware
from .models import HealthResponse
from .services import RateLimiter, SessionStore

logger = logging.getLogger(__name__)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting WordLens v{__version__} ({app_settings.environment})")

    if not app_settings.debug and app_settings.cors_allowed_origins == "*":
        logger.warning(
            "SECURITY WARNING: CORS is configured to allow all origins ('*'). "
            "Set WORDLENS_CORS_ALLOWED_ORIGINS to specific domains in production."
        )

    yield
    # Shutdown
    logger.info(f"Stopping WordLens, dropping {len(app.state.sessions)} open session(s)")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application with its own session store and rate limiter.

    Args:
        app_settings: Settings to use (the environment's settings by default).

    Returns:
        Configured FastAPI application.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="WordLens",
        description="Keyword occurrence counting and highlighting for uploaded documents",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.sessions = SessionStore(
        ttl_seconds=app_settings.session_ttl_seconds,
        max_sessions=app_settings.max_sessions,
        max_keywords=app_settings.max_keywords,
        max_keyword_length=app_settings.max_keyword_length,
        max_visible_lines=app_settings.max_visible_lines,
    )

    # IP-based rate limiting middleware
    app.add_middleware(
        IPRateLimitMiddleware,
        limiter=RateLimiter(
            max_requests=app_settings.ip_rate_limit_requests,
            window_seconds=app_settings.ip_rate_limit_window_seconds,
        ),
    )

    # Security headers middleware
    app.add_middleware(SecurityHeadersMiddleware, hsts=not app_settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_credentials=app_settings.cors_origins_list != ["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(analysis_router)
    app.include_router(documents_router)

    # ============ EXCEPTION HANDLERS ============

    @app.exception_handler(WordLensError)
    async def wordlens_exception_handler(request: Request, exc: WordLensError):
        """Map engine and service errors to their HTTP status codes."""
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": sanitize_error_message(exc)},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent response format."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with sanitized error messages."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "An internal server error occurred. Please try again.",
            },
        )

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(UTC),
        )

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "WordLens",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "wordlens.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
