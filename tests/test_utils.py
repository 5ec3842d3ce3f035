from utils.constants import build_cors_headers
from utils.email_utils import create_otp_email_html
from utils.validation_utils import find_missing_fields, mask_email, mask_phone


def test_find_missing_fields_keeps_order():
    payload = {"email": "a@b.com", "subject": "", "otp": None}
    assert find_missing_fields(payload, ("email", "subject", "message", "otp")) == ["subject", "message", "otp"]


def test_find_missing_fields_accepts_numbers():
    assert find_missing_fields({"otp": 0}, ("otp",)) == []


def test_masking():
    assert mask_phone("+15551234567") == "+155****4567"
    assert mask_phone("12345") == "*****"
    assert mask_email("alice@example.com") == "a****@example.com"
    assert mask_email("not-an-email") == "****"


def test_otp_email_html_escapes_values():
    html = create_otp_email_html("<b>1</b>", brand_name="Acme", expiry_minutes=10, year=2026)
    assert "&lt;b&gt;1&lt;/b&gt;" in html
    assert "<b>1</b>" not in html
    assert "expire in 10 minutes" in html
    assert "2026 Acme" in html


def test_cors_headers():
    assert build_cors_headers(["content-type", "apikey"]) == {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Headers": "content-type, apikey",
    }
