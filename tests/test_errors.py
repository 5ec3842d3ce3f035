import pytest

from app.core.exceptions import ConfigurationError, ProviderError, ValidationError

CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"


@pytest.fixture
def client(make_client):
    return make_client()


def test_404_not_found(client):
    response = client.get("/non-existent-route")
    assert response.status_code == 404
    data = response.json()
    assert "error" in data
    assert data["code"] == "HTTP_ERROR"
    assert response.headers["Access-Control-Allow-Origin"] == "*"


@pytest.mark.parametrize("path", ["/send-email", "/send-sms"])
def test_preflight(client, path):
    response = client.options(path)
    assert response.status_code == 200
    assert response.text == "ok"
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Headers"] == CORS_ALLOW_HEADERS


@pytest.mark.parametrize("path", ["/send-email", "/send-sms"])
def test_error_responses_carry_cors_headers(client, path):
    response = client.post(path, json={})
    assert response.status_code == 400
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Headers"] == CORS_ALLOW_HEADERS


@pytest.mark.parametrize("body", [b"not json", b"[1, 2, 3]", b""])
def test_non_object_body_is_rejected(client, body):
    response = client.post(
        "/send-email",
        content=body,
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_field_with_unusable_type_is_rejected(client):
    response = client.post(
        "/send-email",
        json={"email": "a@b.com", "subject": "Verify", "message": "code", "otp": {"code": 1}}
    )
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "Missing required fields"
    assert data["details"]


def test_details_omitted_when_empty(client):
    app = client.app

    @app.get("/test-config-error")
    def trigger_config_error():
        raise ConfigurationError("Twilio configuration missing")

    response = client.get("/test-config-error")
    assert response.status_code == 500
    assert response.json() == {"error": "Twilio configuration missing", "code": "CONFIGURATION_ERROR"}


def test_error_status_codes():
    assert ValidationError().status_code == 400
    assert ConfigurationError().status_code == 500
    assert ProviderError(status_code=400).status_code == 400
    assert ProviderError().status_code == 500


def test_health_reports_configuration(make_client):
    client = make_client(RESEND_API_KEY="re_test")
    data = client.get("/health").json()
    assert data["checks"] == {
        "email": "resend",
        "sms": "not_configured",
        "log_store": "not_configured",
    }
    assert data["diagnostics"]["log_write_failures"] == {}


def test_liveness(client):
    assert client.get("/live").json() == {"status": "alive"}
