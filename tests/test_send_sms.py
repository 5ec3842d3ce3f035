import base64
from urllib.parse import parse_qs

import httpx
import pytest

from conftest import SUPABASE_CREDENTIALS, SUPABASE_URL, TWILIO_CREDENTIALS, TWILIO_URL

SMS_PAYLOAD = {"phone_number": "+15551234567", "message": "Your code is 123456", "otp": "123456"}
SMS_LOGS_URL = f"{SUPABASE_URL}/rest/v1/sms_logs"


@pytest.mark.parametrize("missing", ["phone_number", "message", "otp"])
def test_missing_field_is_rejected_without_outbound_call(make_client, upstream, missing):
    client = make_client(**TWILIO_CREDENTIALS, **SUPABASE_CREDENTIALS)
    payload = {k: v for k, v in SMS_PAYLOAD.items() if k != missing}

    response = client.post("/send-sms", json=payload)

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"
    assert upstream.requests == []


@pytest.mark.parametrize("unset", ["TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_FROM_NUMBER"])
def test_missing_credential_is_a_server_error(make_client, upstream, unset):
    credentials = {**TWILIO_CREDENTIALS, unset: None}
    client = make_client(**credentials, **SUPABASE_CREDENTIALS)

    response = client.post("/send-sms", json=SMS_PAYLOAD)

    assert response.status_code == 500
    assert response.json()["error"] == "Twilio configuration missing"
    assert upstream.requests == []


def test_twilio_success(make_client, upstream):
    upstream.route(TWILIO_URL, status_code=201, json_body={"sid": "SMxxx", "status": "queued"})
    client = make_client(**TWILIO_CREDENTIALS, **SUPABASE_CREDENTIALS)

    response = client.post("/send-sms", json=SMS_PAYLOAD)

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message_sid": "SMxxx",
        "status": "sent",
        "message": "SMS sent successfully",
    }

    sent = upstream.requests_to(TWILIO_URL)
    assert len(sent) == 1
    expected_auth = base64.b64encode(b"AC123:secret-token").decode("ascii")
    assert sent[0].headers["Authorization"] == f"Basic {expected_auth}"
    assert sent[0].headers["Content-Type"] == "application/x-www-form-urlencoded"
    form = parse_qs(sent[0].content.decode("utf-8"))
    assert form == {
        "From": ["+15550001111"],
        "To": ["+15551234567"],
        "Body": ["Your code is 123456"],
    }

    rows = upstream.requests_to(SMS_LOGS_URL)
    assert len(rows) == 1
    row = upstream.json_of(rows[0])
    assert row["message_sid"] == "SMxxx"
    assert row["status"] == "sent"
    assert row["phone_number"] == "+15551234567"
    assert row["otp"] == "123456"


def test_twilio_failure_passes_provider_body_through(make_client, upstream):
    twilio_error = {"code": 21211, "message": "The 'To' number is not a valid phone number.", "status": 400}
    upstream.route(TWILIO_URL, status_code=400, json_body=twilio_error)
    client = make_client(**TWILIO_CREDENTIALS, **SUPABASE_CREDENTIALS)

    response = client.post("/send-sms", json=SMS_PAYLOAD)

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Twilio SMS failed"
    assert data["details"] == twilio_error
    assert upstream.requests_to(SMS_LOGS_URL) == []


def test_network_error_is_internal_error(make_client, upstream):
    def unreachable(request):
        raise httpx.ConnectError("connection refused", request=request)

    upstream.route_callable(TWILIO_URL, unreachable)
    client = make_client(**TWILIO_CREDENTIALS)

    response = client.post("/send-sms", json=SMS_PAYLOAD)

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Internal server error"
    assert "connection refused" in data["details"]


def test_non_json_provider_response_is_internal_error(make_client, upstream):
    upstream.route(TWILIO_URL, status_code=502, text="<html>Bad Gateway</html>")
    client = make_client(**TWILIO_CREDENTIALS)

    response = client.post("/send-sms", json=SMS_PAYLOAD)

    assert response.status_code == 500
    assert response.json()["error"] == "Internal server error"


def test_log_store_failure_does_not_change_response(make_client, upstream):
    upstream.route(TWILIO_URL, status_code=201, json_body={"sid": "SMxxx"})

    def broken_store(request):
        raise httpx.ReadTimeout("supabase timed out", request=request)

    upstream.route_callable(f"{SUPABASE_URL}/rest/v1/", broken_store)
    client = make_client(**TWILIO_CREDENTIALS, **SUPABASE_CREDENTIALS)

    response = client.post("/send-sms", json=SMS_PAYLOAD)

    assert response.status_code == 200
    assert response.json()["message_sid"] == "SMxxx"
    assert client.app.state.diagnostics.log_failures("sms_logs") == 1
