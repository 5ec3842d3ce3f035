"""
app/services/email_service.py

Purpose: Email OTP workflow

- Hands the request to the configured sender (Resend or logging stub)
- Appends an email_logs row whether the email was sent or only logged
- Builds the response body
"""

from app.core.logging import get_logger, LogContext
from app.db.supabase import DeliveryLogWriter
from app.models.delivery_log import EmailLogEntry
from app.schemas.delivery import EmailRequest
from app.schemas.response import EmailSendResponse
from app.services.resend_service import EmailSender
from utils.validation_utils import mask_email

logger = get_logger(__name__)


async def deliver_email_otp(
    request: EmailRequest,
    sender: EmailSender,
    log_writer: DeliveryLogWriter,
    log_table: str = "email_logs",
) -> EmailSendResponse:
    """
    Sends (or logs) one verification email.

    Provider errors propagate; log store errors never do.
    """
    with LogContext(channel="email", recipient=mask_email(request.email)):
        dispatch = await sender.send(request)
        logger.info(f"Email OTP {dispatch.status}", extra={"message_id": dispatch.message_id})

        entry = EmailLogEntry(
            email=request.email,
            subject=request.subject,
            message=request.message,
            otp=request.otp,
            status=dispatch.status,
            message_id=dispatch.message_id,
        )
        await log_writer.append(log_table, entry.to_record())

    return EmailSendResponse(
        message_id=dispatch.message_id,
        status=dispatch.status,
        message=dispatch.message,
    )
