"""
app/main.py

Purpose: Application entry point

- Builds the FastAPI app from an explicit Settings object
- Wires providers (Resend / logging stub, Twilio) and the log store once
- Registers API routes (send-email, send-sms) and error handlers
- Adds CORS headers to every response
- No business logic should be written here
"""

from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from typing import Optional
import time

from app.api import send_email, send_sms
from app.core.config import Settings, get_settings, describe_settings
from app.core.errors import add_exception_handlers
from app.core.http import HttpClientFactory, default_client_factory
from app.core.logging import setup_logging, get_logger
from app.db.supabase import DeliveryDiagnostics, DeliveryLogWriter, SupabaseLogStore
from app.services.resend_service import build_email_sender, ResendEmailSender
from app.services.twilio_service import TwilioService
from utils.constants import build_cors_headers

logger = get_logger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Reports degraded configuration on startup.
    """
    settings: Settings = app.state.settings

    logger.info("🚀 Starting OTP relay...")
    for warning in describe_settings(settings):
        logger.warning(f"⚠️ {warning}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    yield

    logger.info("👋 OTP relay shut down")


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Optional[HttpClientFactory] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    Builds the application.

    Args:
        settings: Configuration; read from the environment when omitted
        client_factory: Produces the httpx.AsyncClient used for every
            outbound call; tests pass one backed by httpx.MockTransport
        configure_logging: Install the root log handler

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    client_factory = client_factory or default_client_factory(settings.HTTP_TIMEOUT_SECONDS)

    if configure_logging:
        setup_logging(settings)

    app = FastAPI(
        title="OTP Relay",
        description="Delivers one-time verification codes by email (Resend) and SMS (Twilio)",
        version=VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    diagnostics = DeliveryDiagnostics()
    log_store = SupabaseLogStore(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY, client_factory)

    app.state.settings = settings
    app.state.diagnostics = diagnostics
    app.state.email_sender = build_email_sender(settings, client_factory)
    app.state.twilio_service = TwilioService.from_settings(settings, client_factory)
    app.state.log_writer = DeliveryLogWriter(log_store, diagnostics)

    cors_headers = build_cors_headers(settings.CORS_ALLOW_HEADERS)

    @app.middleware("http")
    async def add_response_headers(request: Request, call_next):
        """Add CORS and processing time headers to all responses."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        response.headers.update(cors_headers)
        response.headers["X-Process-Time"] = str(process_time)

        if process_time > 5.0:
            logger.warning(
                f"Slow request detected: {request.method} {request.url.path}",
                extra={"process_time": process_time}
            )

        return response

    add_exception_handlers(app, cors_headers)

    app.include_router(send_email.router, tags=["Email"])
    app.include_router(send_sms.router, tags=["SMS"])

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint - basic info."""
        return {
            "name": "OTP Relay",
            "version": VERSION,
            "status": "running",
            "environment": settings.ENVIRONMENT
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Reports which delivery paths are live and how many log writes failed.
        """
        email_sender = app.state.email_sender
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "environment": settings.ENVIRONMENT,
            "version": VERSION,
            "checks": {
                "email": "resend" if isinstance(email_sender, ResendEmailSender) else "logging_only",
                "sms": "configured" if app.state.twilio_service.is_configured() else "not_configured",
                "log_store": "configured" if log_store.is_configured() else "not_configured",
            },
            "diagnostics": diagnostics.snapshot(),
        }

    @app.get("/live", tags=["Health"])
    async def liveness_check():
        """
        Liveness probe - indicates if app is alive.
        """
        return {"status": "alive"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=app.state.settings.is_development,
        log_level=app.state.settings.LOG_LEVEL.lower()
    )
