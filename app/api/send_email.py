"""
app/api/send_email.py

Purpose: POST /send-email

- Validates {email, subject, message, otp}
- Sends through Resend, or logs only when RESEND_API_KEY is unset
- Provider failures answer 500 with the Resend error detail
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.api.deps import get_email_sender, get_log_writer, get_settings, parse_payload
from app.core.config import Settings
from app.core.exceptions import OtpRelayError, UnexpectedError
from app.core.logging import get_logger
from app.db.supabase import DeliveryLogWriter
from app.schemas.delivery import EmailRequest
from app.schemas.response import EmailSendResponse
from app.services.email_service import deliver_email_otp
from app.services.resend_service import EmailSender
from utils.constants import EMAIL_REQUIRED_FIELDS

logger = get_logger(__name__)
router = APIRouter()


@router.options("/send-email", include_in_schema=False)
async def send_email_preflight():
    return PlainTextResponse("ok")


@router.post("/send-email", response_model=EmailSendResponse)
async def send_email(
    request: Request,
    settings: Settings = Depends(get_settings),
    sender: EmailSender = Depends(get_email_sender),
    log_writer: DeliveryLogWriter = Depends(get_log_writer),
):
    """
    Sends a verification email carrying the OTP.

    Returns:
        {success, message_id, status, message}; status is "logged" when
        no Resend key is configured
    """
    payload = await parse_payload(request, EmailRequest, EMAIL_REQUIRED_FIELDS)

    try:
        return await deliver_email_otp(payload, sender, log_writer, log_table=settings.EMAIL_LOG_TABLE)
    except OtpRelayError:
        raise
    except Exception as e:
        logger.error(f"Error sending email: {e}", exc_info=True)
        raise UnexpectedError(details=str(e)) from e
