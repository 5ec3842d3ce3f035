"""
app/services/twilio_service.py

Purpose: Twilio SMS sending

- Sends plain SMS via the Twilio Messages API
- Form-encoded body (From, To, Body) with basic auth
- Provider rejections are raised with Twilio's JSON body attached
"""

from typing import Dict, Any, Optional

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, ProviderError
from app.core.http import HttpClientFactory
from app.core.logging import get_logger
from utils.constants import (
    MSG_TWILIO_CONFIG_MISSING,
    MSG_TWILIO_FAILED,
    TWILIO_MESSAGES_PATH,
)
from utils.validation_utils import mask_phone

logger = get_logger(__name__)


class TwilioService:
    """Service for sending SMS messages via Twilio"""

    def __init__(
        self,
        account_sid: Optional[str],
        auth_token: Optional[str],
        from_number: Optional[str],
        client_factory: HttpClientFactory,
        base_url: str = "https://api.twilio.com",
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self.base_url = base_url.rstrip("/")
        self._client_factory = client_factory

    @classmethod
    def from_settings(cls, settings: Settings, client_factory: HttpClientFactory) -> "TwilioService":
        return cls(
            account_sid=settings.TWILIO_ACCOUNT_SID,
            auth_token=settings.TWILIO_AUTH_TOKEN,
            from_number=settings.TWILIO_FROM_NUMBER,
            client_factory=client_factory,
            base_url=settings.TWILIO_API_BASE_URL,
        )

    def is_configured(self) -> bool:
        """Check if all three Twilio credentials are present"""
        return bool(self.account_sid and self.auth_token and self.from_number)

    @property
    def messages_url(self) -> str:
        return self.base_url + TWILIO_MESSAGES_PATH.format(account_sid=self.account_sid)

    async def send_sms(self, to_phone: str, body: str) -> Dict[str, Any]:
        """
        Sends an SMS via Twilio

        Args:
            to_phone: Recipient phone (+15551234567)
            body: Message text, sent verbatim

        Returns:
            Twilio's message resource (contains "sid")

        Raises:
            ConfigurationError: account SID, auth token or sending number missing
            ProviderError: Twilio answered with a non-2xx status (400 to the caller)
            httpx.HTTPError / ValueError: network failure or non-JSON response
        """
        if not self.is_configured():
            raise ConfigurationError(MSG_TWILIO_CONFIG_MISSING)

        data = {
            "From": self.from_number,
            "To": to_phone,
            "Body": body
        }

        logger.info(f"📤 Sending Twilio SMS to {mask_phone(to_phone)}")

        async with self._client_factory() as client:
            response = await client.post(
                self.messages_url,
                data=data,
                auth=(self.account_sid, self.auth_token),
            )

        result = response.json()

        if not response.is_success:
            logger.error(f"❌ Twilio API error: {response.status_code} - {result}")
            raise ProviderError(MSG_TWILIO_FAILED, status_code=400, details=result)

        logger.info(f"✅ SMS sent: SID={result.get('sid')}")
        return result
