"""
app/core/http.py

Purpose: Outbound HTTP client factory

- Every provider or log store call opens its own httpx.AsyncClient
- Tests swap the factory for one backed by httpx.MockTransport
"""

from typing import Callable

import httpx

HttpClientFactory = Callable[[], httpx.AsyncClient]


def default_client_factory(timeout: float = 10.0) -> HttpClientFactory:
    """
    Returns a factory producing fresh AsyncClients with the given timeout.
    """
    def factory() -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=timeout)

    return factory
