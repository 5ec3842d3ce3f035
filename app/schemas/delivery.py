"""
app/schemas/delivery.py

Purpose: Delivery request payloads

- EmailRequest / SmsRequest validated from raw JSON bodies
- Every field is required and must be non-empty
- Numbers (e.g. an OTP sent as 123456) are accepted as strings
"""

from pydantic import BaseModel, ConfigDict, Field


class DeliveryRequest(BaseModel):
    """Shared config for OTP delivery payloads."""

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        str_strip_whitespace=True,
        extra="ignore",
    )


class EmailRequest(DeliveryRequest):
    """
    Payload of POST /send-email
    """
    email: str = Field(..., min_length=1, description="Recipient address")
    subject: str = Field(..., min_length=1, description="Email subject line")
    message: str = Field(..., min_length=1, description="Plain message stored with the log entry")
    otp: str = Field(..., min_length=1, description="One-time code rendered in the email")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@b.com",
                "subject": "Verify",
                "message": "code",
                "otp": "123456"
            }
        }
    )


class SmsRequest(DeliveryRequest):
    """
    Payload of POST /send-sms
    """
    phone_number: str = Field(..., min_length=1, description="Recipient in E.164 format")
    message: str = Field(..., min_length=1, description="SMS body sent verbatim")
    otp: str = Field(..., min_length=1, description="One-time code stored with the log entry")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "phone_number": "+15551234567",
                "message": "Your code is 123456",
                "otp": "123456"
            }
        }
    )
