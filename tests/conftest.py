import json, os

import httpx
import pytest

os.environ.setdefault("GHL_API_KEY", "test-token")
os.environ.setdefault("GHL_LOCATION_ID", "loc123")

from ghl_mcp.client import GHLApiClient
from ghl_mcp.config import GHLConfig
from ghl_mcp.tools import ToolRegistry

BASE_URL = "https://test.local"
LOCATION_ID = "loc123"


class Recorder:
    """httpx.MockTransport handler that logs requests and serves canned replies."""

    def __init__(self):
        self.requests = []
        self.routes = {}

    def route(self, method, path, status=200, json=None, content=None, headers=None):
        self.routes[(method.upper(), path)] = (status, json, content, headers)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body, content, headers = self.routes.get(
            (request.method, request.url.path), (200, {}, None, None))
        if content is not None:
            return httpx.Response(status, content=content, headers=headers)
        return httpx.Response(status, json=body, headers=headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content) if self.last.content else None

    def last_params(self):
        return dict(self.last.url.params)


@pytest.fixture
def config():
    return GHLConfig(access_token="tok", base_url=BASE_URL, location_id=LOCATION_ID)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def client(config, recorder):
    return GHLApiClient(config, transport=httpx.MockTransport(recorder))


@pytest.fixture
def registry(client):
    return ToolRegistry(client)
