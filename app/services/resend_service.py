"""
app/services/resend_service.py

Purpose: Email senders

- ResendEmailSender: real delivery through the Resend API
- LoggingEmailStub: degraded mode when RESEND_API_KEY is not set;
  nothing is sent, the attempt is only written to the server log
- build_email_sender() picks one of the two once, at startup
"""

import secrets
from dataclasses import dataclass
from typing import Optional, Union

import httpx

from app.core.config import Settings
from app.core.exceptions import ProviderError
from app.core.http import HttpClientFactory
from app.core.logging import get_logger
from app.schemas.delivery import EmailRequest
from utils.constants import (
    FALLBACK_ID_PREFIX,
    MSG_EMAIL_LOGGED,
    MSG_EMAIL_SENT,
    MSG_INTERNAL_ERROR,
    STATUS_LOGGED,
    STATUS_SENT,
)
from utils.email_utils import create_otp_email_html
from utils.time_utils import epoch_millis, utc_now
from utils.validation_utils import mask_email

logger = get_logger(__name__)


@dataclass(frozen=True)
class EmailDispatch:
    """Outcome of one email attempt."""
    message_id: Optional[str]
    status: str
    message: str


class ResendEmailSender:
    """Sends verification emails through Resend."""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        client_factory: HttpClientFactory,
        api_url: str = "https://api.resend.com/emails",
        brand_name: str = "FixmyCity",
        expiry_minutes: int = 5,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.api_url = api_url
        self.brand_name = brand_name
        self.expiry_minutes = expiry_minutes
        self._client_factory = client_factory

    def render(self, otp: str) -> str:
        return create_otp_email_html(
            otp,
            brand_name=self.brand_name,
            expiry_minutes=self.expiry_minutes,
            year=utc_now().year,
        )

    async def send(self, request: EmailRequest) -> EmailDispatch:
        """
        Submits the email to Resend.

        Raises:
            ProviderError: Resend answered non-2xx or could not be reached
        """
        payload = {
            "from": self.from_email,
            "to": [request.email],
            "subject": request.subject,
            "html": self.render(request.otp),
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            async with self._client_factory() as client:
                response = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Error sending email via Resend: {e}", exc_info=True)
            raise ProviderError(MSG_INTERNAL_ERROR, status_code=500, details=f"Resend request failed: {e}") from e

        if not response.is_success:
            detail = f"Resend API error: {response.status_code} - {response.text}"
            logger.error(f"Error sending email via Resend: {detail}")
            raise ProviderError(MSG_INTERNAL_ERROR, status_code=500, details=detail)

        message_id = response.json().get("id")
        logger.info(f"Email sent successfully via Resend: {message_id}")

        return EmailDispatch(message_id=message_id, status=STATUS_SENT, message=MSG_EMAIL_SENT)


class LoggingEmailStub:
    """
    Stands in for Resend when no API key is configured.
    Never performs network I/O.
    """

    async def send(self, request: EmailRequest) -> EmailDispatch:
        message_id = f"{FALLBACK_ID_PREFIX}{epoch_millis()}_{secrets.token_hex(4)}"

        logger.info(f"📧 RESEND_API_KEY not configured - Email would be sent to: {mask_email(request.email)}")
        logger.info(f"📧 Subject: {request.subject}")
        logger.info(f"📧 OTP: {request.otp}")

        return EmailDispatch(message_id=message_id, status=STATUS_LOGGED, message=MSG_EMAIL_LOGGED)


EmailSender = Union[ResendEmailSender, LoggingEmailStub]


def build_email_sender(settings: Settings, client_factory: HttpClientFactory) -> EmailSender:
    """
    Chooses the email sender for the lifetime of the app.
    """
    if settings.resend_configured:
        return ResendEmailSender(
            api_key=settings.RESEND_API_KEY,
            from_email=settings.FROM_EMAIL,
            client_factory=client_factory,
            api_url=settings.RESEND_API_URL,
            brand_name=settings.BRAND_NAME,
            expiry_minutes=settings.OTP_EXPIRY_MINUTES,
        )

    logger.warning("RESEND_API_KEY not set - emails will be logged, not sent")
    return LoggingEmailStub()
