"""
app/api/deps.py

Purpose: Request-scoped dependencies

- Hands handlers the objects built once in create_app() (app.state)
- Reads and validates raw JSON bodies so that missing fields answer 400
  with the service's own error shape
"""

import json
from typing import Iterable, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from app.core.config import Settings
from app.core.exceptions import ValidationError
from app.db.supabase import DeliveryLogWriter
from app.services.resend_service import EmailSender
from app.services.twilio_service import TwilioService
from utils.constants import MSG_INVALID_JSON, MSG_MISSING_FIELDS
from utils.validation_utils import find_missing_fields

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_email_sender(request: Request) -> EmailSender:
    return request.app.state.email_sender


def get_twilio_service(request: Request) -> TwilioService:
    return request.app.state.twilio_service


def get_log_writer(request: Request) -> DeliveryLogWriter:
    return request.app.state.log_writer


async def parse_payload(request: Request, model: Type[ModelT], required: Iterable[str]) -> ModelT:
    """
    Parses the request body into `model`.

    Raises:
        ValidationError: body is not a JSON object, a required field is
            absent or blank, or a field has an unusable type
    """
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError(MSG_INVALID_JSON)

    if not isinstance(payload, dict):
        raise ValidationError(MSG_INVALID_JSON)

    missing = find_missing_fields(payload, required)
    if missing:
        raise ValidationError(MSG_MISSING_FIELDS, details={"missing": missing})

    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            MSG_MISSING_FIELDS,
            details=e.errors(include_url=False, include_context=False, include_input=False)
        )
