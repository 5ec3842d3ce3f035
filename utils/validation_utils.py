"""
utils/validation_utils.py

Purpose: Input validation

- Required-field checks on raw JSON payloads
- Masking of phone numbers and email addresses for logs
"""

from typing import Any, Iterable, List, Mapping


def is_blank(value: Any) -> bool:
    """
    A value counts as absent when it is None or a whitespace-only string.
    """
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def find_missing_fields(payload: Mapping[str, Any], required: Iterable[str]) -> List[str]:
    """
    Returns the required fields that are absent or blank, in the order given.

    Args:
        payload: Parsed JSON object
        required: Field names that must be present

    Returns:
        List of missing field names (empty when the payload is complete)
    """
    return [field for field in required if is_blank(payload.get(field))]


def mask_phone(phone: str) -> str:
    """
    Masks the middle of a phone number for logging.

    Example: +15551234567 -> +155****4567
    """
    if not phone:
        return ""
    if len(phone) <= 7:
        return "*" * len(phone)
    return f"{phone[:4]}****{phone[-4:]}"


def mask_email(email: str) -> str:
    """
    Masks the local part of an email address for logging.

    Example: alice@example.com -> a****@example.com
    """
    if not email or "@" not in email:
        return "****"
    local, domain = email.split("@", 1)
    return f"{local[:1]}****@{domain}"
