"""
app/models/delivery_log.py

Purpose: Delivery log rows

- One row per delivery attempt, appended to email_logs / sms_logs
- Never updated or deleted by this service
- status is "sent" when a provider call was made, "logged" when the
  email was only written to the server log
"""

from pydantic import BaseModel, Field
from typing import Optional, Literal, Dict, Any

from utils.time_utils import utc_now_iso


class EmailLogEntry(BaseModel):
    email: str
    subject: str
    message: str
    otp: str
    status: Literal["sent", "logged"]
    message_id: Optional[str] = None
    created_at: str = Field(default_factory=utc_now_iso)

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()


class SmsLogEntry(BaseModel):
    phone_number: str
    message: str
    otp: str
    message_sid: Optional[str] = None
    status: Literal["sent"] = "sent"
    created_at: str = Field(default_factory=utc_now_iso)

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()
