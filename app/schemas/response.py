from pydantic import BaseModel
from typing import Optional, Any, Literal

from utils.constants import MSG_SMS_SENT

class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    `details` is dropped from the body when empty.
    """
    error: str
    code: str
    details: Optional[Any] = None

class EmailSendResponse(BaseModel):
    """
    Body returned by POST /send-email.
    `status` is "logged" when RESEND_API_KEY is not configured.
    """
    success: bool = True
    message_id: Optional[str] = None
    status: Literal["sent", "logged"]
    message: str

class SmsSendResponse(BaseModel):
    """
    Body returned by POST /send-sms.
    """
    success: bool = True
    message_sid: Optional[str] = None
    status: Literal["sent"] = "sent"
    message: str = MSG_SMS_SENT
