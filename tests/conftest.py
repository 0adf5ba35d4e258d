"""Pytest configuration and fixtures."""

import httpx
import pytest

from api.config import ProxyConfig
from api.proxy import QueryProxy


class FakeUpstream:
    """Stands in for the Supabase REST endpoint and records every request."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = []
        self.text = None
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last_params(self):
        return dict(self.requests[-1].url.params)


@pytest.fixture
def config():
    return ProxyConfig(
        supabase_url="https://example.supabase.co/",
        supabase_key="service-role-secret",
        allowed_origin="https://videos.example.com",
    )


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def proxy(config, upstream):
    return QueryProxy(config, transport=httpx.MockTransport(upstream))
