"""
app/services/sms_service.py

Purpose: SMS OTP workflow

- Sends the SMS through Twilio
- Appends an sms_logs row only when Twilio accepted the message
- Builds the response body
"""

from app.core.logging import get_logger, LogContext
from app.db.supabase import DeliveryLogWriter
from app.models.delivery_log import SmsLogEntry
from app.schemas.delivery import SmsRequest
from app.schemas.response import SmsSendResponse
from app.services.twilio_service import TwilioService
from utils.validation_utils import mask_phone

logger = get_logger(__name__)


async def deliver_sms_otp(
    request: SmsRequest,
    twilio: TwilioService,
    log_writer: DeliveryLogWriter,
    log_table: str = "sms_logs",
) -> SmsSendResponse:
    """
    Sends one verification SMS.

    A Twilio rejection raises before anything is logged.
    """
    with LogContext(channel="sms", recipient=mask_phone(request.phone_number)):
        result = await twilio.send_sms(request.phone_number, request.message)
        message_sid = result.get("sid")
        logger.info("SMS OTP sent", extra={"message_id": message_sid})

        entry = SmsLogEntry(
            phone_number=request.phone_number,
            message=request.message,
            otp=request.otp,
            message_sid=message_sid,
        )
        await log_writer.append(log_table, entry.to_record())

    return SmsSendResponse(message_sid=message_sid)
