"""
OTP Auth - FastAPI Application

Main entry point for the application.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from otpauth import __version__
from otpauth.core.config import settings
from otpauth.core.logging import configure_logging
from otpauth.api.v1 import router as api_v1_router
from otpauth.services.analytics_service import analytics
from otpauth.services.auth_service import AuthStateMachine
from otpauth.services.otp_service import OtpManager


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Creates the OTP store and the single auth state machine on startup and
    stops its timers on shutdown.
    """
    # Startup
    configure_logging(settings)
    logger.info("Starting OTP Auth (%s)", settings.ENVIRONMENT)
    otp_manager = OtpManager(settings=settings)
    app.state.auth_machine = AuthStateMachine(otp_manager, analytics, settings=settings)
    yield
    # Shutdown
    logger.info("Shutting down OTP Auth")
    await app.state.auth_machine.aclose()
    app.state.auth_machine = None


# Create FastAPI application
app = FastAPI(
    title="OTP Auth",
    description="Passwordless email + one-time code login demo.",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """
    Health check endpoint.

    Returns:
        dict: Health status and environment info.
    """
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
        "version": __version__,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    return {
        "message": "Welcome to OTP Auth API",
        "docs": "/docs",
        "health": "/health",
    }
