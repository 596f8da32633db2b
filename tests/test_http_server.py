import pytest
from starlette.testclient import TestClient

from ghl_mcp.http_server import create_app


@pytest.fixture
def http(registry):
    return TestClient(create_app(registry))


def test_root_lists_endpoints(http, registry):
    body = http.get("/").json()
    assert body["status"] == "running"
    assert body["endpoints"]["sse"] == "/sse"
    assert body["tools"]["total"] == len(registry)


def test_health(http, registry):
    response = http.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["server"] == "ghl-mcp-server"
    assert body["tools"]["contact"] == 31
    assert body["tools"]["total"] == len(registry)
    assert body["timestamp"]


def test_capabilities(http):
    body = http.get("/capabilities").json()
    assert body["capabilities"] == {"tools": {}}
    assert body["server"]["name"] == "ghl-mcp-server"


def test_tools_endpoint_returns_descriptors(http, registry):
    body = http.get("/tools").json()
    assert body["count"] == len(registry)
    names = {t["name"] for t in body["tools"]}
    assert {"create_blog_post", "search_opportunities", "get_voicemail_settings"} <= names


def test_cors_allows_chatgpt(http):
    response = http.get("/health", headers={"Origin": "https://chatgpt.com"})
    assert response.headers["access-control-allow-origin"] == "https://chatgpt.com"
