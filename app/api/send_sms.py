"""
app/api/send_sms.py

Purpose: POST /send-sms

- Validates {phone_number, message, otp}
- Requires all three Twilio credentials (no fallback mode)
- Twilio rejections answer 400 with Twilio's response body
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.api.deps import get_log_writer, get_settings, get_twilio_service, parse_payload
from app.core.config import Settings
from app.core.exceptions import OtpRelayError, UnexpectedError
from app.core.logging import get_logger
from app.db.supabase import DeliveryLogWriter
from app.schemas.delivery import SmsRequest
from app.schemas.response import SmsSendResponse
from app.services.sms_service import deliver_sms_otp
from app.services.twilio_service import TwilioService
from utils.constants import SMS_REQUIRED_FIELDS

logger = get_logger(__name__)
router = APIRouter()


@router.options("/send-sms", include_in_schema=False)
async def send_sms_preflight():
    return PlainTextResponse("ok")


@router.post("/send-sms", response_model=SmsSendResponse)
async def send_sms(
    request: Request,
    settings: Settings = Depends(get_settings),
    twilio: TwilioService = Depends(get_twilio_service),
    log_writer: DeliveryLogWriter = Depends(get_log_writer),
):
    """
    Sends a verification SMS via Twilio.

    Returns:
        {success, message_sid, status, message}
    """
    payload = await parse_payload(request, SmsRequest, SMS_REQUIRED_FIELDS)

    try:
        return await deliver_sms_otp(payload, twilio, log_writer, log_table=settings.SMS_LOG_TABLE)
    except OtpRelayError:
        raise
    except Exception as e:
        logger.error(f"Error sending SMS: {e}", exc_info=True)
        raise UnexpectedError(details=str(e)) from e
