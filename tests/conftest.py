import json
from typing import Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

RESEND_URL = "https://api.resend.com/emails"
TWILIO_URL = "https://api.twilio.com/2010-04-01/Accounts/AC123/Messages.json"
SUPABASE_URL = "https://proj.supabase.co"

TWILIO_CREDENTIALS = {
    "TWILIO_ACCOUNT_SID": "AC123",
    "TWILIO_AUTH_TOKEN": "secret-token",
    "TWILIO_FROM_NUMBER": "+15550001111",
}
SUPABASE_CREDENTIALS = {
    "SUPABASE_URL": SUPABASE_URL,
    "SUPABASE_ANON_KEY": "anon-key",
}

Responder = Callable[[httpx.Request], httpx.Response]


class FakeUpstream:
    """
    Stands in for Resend, Twilio and Supabase.
    Routes are matched by URL prefix; every request is recorded.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[str, Responder] = {}

    def route(self, url_prefix: str, status_code: int = 200, json_body=None, text: Optional[str] = None):
        def responder(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        self._routes[url_prefix] = responder

    def route_callable(self, url_prefix: str, responder: Responder):
        self._routes[url_prefix] = responder

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for prefix, responder in self._routes.items():
            if str(request.url).startswith(prefix):
                return responder(request)
        return httpx.Response(404, json={"message": f"no fake route for {request.url}"})

    def client_factory(self):
        def factory() -> httpx.AsyncClient:
            return httpx.AsyncClient(transport=httpx.MockTransport(self))

        return factory

    def requests_to(self, url_prefix: str) -> List[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(url_prefix)]

    @staticmethod
    def json_of(request: httpx.Request):
        return json.loads(request.content)


def make_settings(**overrides) -> Settings:
    values = {
        "ENVIRONMENT": "development",
        "RESEND_API_KEY": None,
        "TWILIO_ACCOUNT_SID": None,
        "TWILIO_AUTH_TOKEN": None,
        "TWILIO_FROM_NUMBER": None,
        "SUPABASE_URL": None,
        "SUPABASE_ANON_KEY": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def upstream():
    fake = FakeUpstream()
    fake.route(f"{SUPABASE_URL}/rest/v1/", status_code=201)
    return fake


@pytest.fixture
def make_client(upstream):
    """
    Builds a TestClient for an app configured with the given settings.
    """
    def _make(**overrides):
        app = create_app(
            settings=make_settings(**overrides),
            client_factory=upstream.client_factory(),
            configure_logging=False,
        )
        return TestClient(app)

    return _make
