"""
utils/constants.py

Purpose: Centralized static content

- Response messages returned to callers
- CORS headers shared by every delivery response
- Provider endpoints and log statuses

(Prevents hardcoding across the codebase)
"""

# ============================================================
# CORS
# ============================================================

DEFAULT_ALLOWED_HEADERS = ("authorization", "x-client-info", "apikey", "content-type")


def build_cors_headers(allowed_headers=DEFAULT_ALLOWED_HEADERS) -> dict:
    """Headers attached to every response, preflight included."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": ", ".join(allowed_headers),
    }


# ============================================================
# LOG STATUSES
# ============================================================

STATUS_SENT = "sent"
STATUS_LOGGED = "logged"

# ============================================================
# RESPONSE MESSAGES
# ============================================================

MSG_MISSING_FIELDS = "Missing required fields"
MSG_INVALID_JSON = "Request body must be a JSON object"
MSG_INTERNAL_ERROR = "Internal server error"

MSG_EMAIL_SENT = "Email sent successfully"
MSG_EMAIL_LOGGED = "Email logged (configure RESEND_API_KEY for actual sending)"

MSG_SMS_SENT = "SMS sent successfully"
MSG_TWILIO_CONFIG_MISSING = "Twilio configuration missing"
MSG_TWILIO_FAILED = "Twilio SMS failed"

# ============================================================
# PROVIDERS
# ============================================================

TWILIO_MESSAGES_PATH = "/2010-04-01/Accounts/{account_sid}/Messages.json"
SUPABASE_REST_PATH = "/rest/v1/{table}"
FALLBACK_ID_PREFIX = "fallback_"

EMAIL_REQUIRED_FIELDS = ("email", "subject", "message", "otp")
SMS_REQUIRED_FIELDS = ("phone_number", "message", "otp")
