"""
app/core/config.py

Purpose: Application configuration

- Loads environment variables (and .env) once at startup
- Centralizes provider credentials (Resend, Twilio, Supabase)
- Exposes which delivery paths are usable
- Environment-specific settings
"""

from pydantic import Field, validator
from pydantic_settings import BaseSettings
from typing import Optional, Literal, List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Built once by create_app() and handed to handlers through app.state,
    so tests can construct their own instance with fake credentials.
    """

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production"] = "development"

    # Email provider (Resend)
    RESEND_API_KEY: Optional[str] = Field(
        default=None,
        description="Resend API key; when unset emails are only logged"
    )
    RESEND_API_URL: str = Field(
        default="https://api.resend.com/emails",
        description="Resend transactional send endpoint"
    )
    FROM_EMAIL: str = Field(
        default="noreply@fixmycity.app",
        description="Sender address for verification emails"
    )
    BRAND_NAME: str = Field(
        default="FixmyCity",
        description="Product name shown in the email header and footer"
    )
    OTP_EXPIRY_MINUTES: int = Field(
        default=5,
        description="Expiry notice printed in the verification email"
    )

    # SMS provider (Twilio)
    TWILIO_ACCOUNT_SID: Optional[str] = Field(
        default=None,
        description="Twilio account SID"
    )
    TWILIO_AUTH_TOKEN: Optional[str] = Field(
        default=None,
        description="Twilio auth token"
    )
    TWILIO_FROM_NUMBER: Optional[str] = Field(
        default=None,
        description="Twilio sending number in E.164 format"
    )
    TWILIO_API_BASE_URL: str = Field(
        default="https://api.twilio.com",
        description="Twilio REST API base URL"
    )

    # Log store (Supabase)
    SUPABASE_URL: Optional[str] = Field(
        default=None,
        description="Supabase project URL"
    )
    SUPABASE_ANON_KEY: Optional[str] = Field(
        default=None,
        description="Supabase anon key used for log inserts"
    )
    EMAIL_LOG_TABLE: str = Field(
        default="email_logs",
        description="Table receiving one row per email attempt"
    )
    SMS_LOG_TABLE: str = Field(
        default="sms_logs",
        description="Table receiving one row per sent SMS"
    )

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Timeout for provider and log store requests"
    )

    # Application
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    CORS_ALLOW_HEADERS: List[str] = Field(
        default=["authorization", "x-client-info", "apikey", "content-type"],
        description="Headers browsers may send to the delivery endpoints"
    )

    @validator(
        "RESEND_API_KEY",
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_FROM_NUMBER",
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        pre=True,
    )
    def blank_to_none(cls, v):
        """Treat empty or whitespace-only credentials as not configured."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENVIRONMENT == "production"

    @property
    def resend_configured(self) -> bool:
        return bool(self.RESEND_API_KEY)

    @property
    def twilio_configured(self) -> bool:
        return bool(
            self.TWILIO_ACCOUNT_SID
            and self.TWILIO_AUTH_TOKEN
            and self.TWILIO_FROM_NUMBER
        )

    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)

    class Config:
        env_file = ".env"
        case_sensitive = True
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Reads the environment and returns a fresh Settings instance."""
    return Settings()


def describe_settings(settings: Settings) -> List[str]:
    """
    Returns human-readable warnings about degraded configuration.

    Nothing here is fatal: email falls back to logging, SMS answers 500
    per request, and log writes are best-effort.
    """
    warnings = []

    if not settings.resend_configured:
        warnings.append("RESEND_API_KEY not set - emails will be logged, not sent")
    if not settings.twilio_configured:
        warnings.append("Twilio credentials incomplete - /send-sms will answer 500")
    if not settings.supabase_configured:
        warnings.append("Supabase not configured - delivery logs will not be stored")

    return warnings
