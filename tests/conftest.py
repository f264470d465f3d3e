import json
from typing import Any, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from jmath.api.deps import get_http_client
from jmath.core.config import Settings, get_settings
from jmath.main import app


class FakeUpstream:
    """Stands in for the chat-completion API and records every call"""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"choices": []}
        self.error: Optional[Exception] = None

    def reply_with_content(self, content: Any):
        self.status_code = 200
        self.body = {"choices": [{"message": {"role": "assistant", "content": content}}]}

    def reply_with_error(self, status_code: int, body: Any):
        self.status_code = status_code
        self.body = body

    def fail_with(self, error: Exception):
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


def make_settings(**overrides) -> Settings:
    values = {"OPENROUTER_API_KEY": "test-key"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(settings, upstream):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = lambda: http_client
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
