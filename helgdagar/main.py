# helgdagar/main.py
"""
FastAPI application entry point.
"""

import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from helgdagar.core.config import APP_VERSION, DEFAULT_HOLIDAY_VARIANT, HOLIDAY_VARIANTS, IS_PRODUCTION
from helgdagar.core.logging_config import get_logger, setup_logging
from helgdagar.core.request_logging import RequestLoggingMiddleware
from helgdagar.core.sentry_config import init_sentry
from helgdagar.routes.holidays import router as holidays_router

# Setup logging FIRST (before any other imports that might log)
setup_logging()
logger = get_logger(__name__)

# Initialize Sentry for error tracking (production only)
sentry_enabled = init_sentry()


def validate_configuration():
    """
    Validate environment configuration.

    Raises:
        RuntimeError: If HOLIDAY_VARIANT names an unknown variant
    """
    if DEFAULT_HOLIDAY_VARIANT not in HOLIDAY_VARIANTS:
        raise RuntimeError(
            f"Unknown HOLIDAY_VARIANT: {DEFAULT_HOLIDAY_VARIANT!r}\n"
            f"Expected one of: {', '.join(sorted(HOLIDAY_VARIANTS))}"
        )

    logger.info(f"Configuration validated (default variant: {DEFAULT_HOLIDAY_VARIANT})")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(
        "Application starting up",
        extra={
            "extra_fields": {
                "production": IS_PRODUCTION,
                "python_version": sys.version,
                "sentry_enabled": sentry_enabled,
            }
        },
    )

    try:
        validate_configuration()
    except RuntimeError as e:
        logger.error(f"Configuration validation failed: {e}", exc_info=True)
        raise

    yield

    # Shutdown
    logger.info("Application shutting down")


app = FastAPI(
    title="helgdagar",
    description="Swedish public holidays computed from Gauss's Easter algorithm",
    version=APP_VERSION,
    lifespan=lifespan,
)

# CORS Configuration
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin.strip()]

if IS_PRODUCTION:
    # Production: Strict CORS - only allow specified origins
    if not CORS_ORIGINS:
        logger.warning(
            "Production mode but no CORS_ORIGINS set. CORS will block all cross-origin requests. "
            "Set CORS_ORIGINS environment variable if you need to allow specific origins."
        )

    allowed_origins = CORS_ORIGINS
    allowed_methods = ["GET"]

    logger.info(f"CORS configured for production with origins: {allowed_origins}")
else:
    # Development: Permissive CORS for easier testing
    allowed_origins = ["*"]
    allowed_methods = ["*"]

    logger.info("CORS configured for development (permissive)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_methods=allowed_methods,
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],  # Expose our request ID header
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Include routers
app.include_router(holidays_router)


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "helgdagar",
        "version": APP_VERSION,
    }
