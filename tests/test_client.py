import httpx
import pytest

from ghl_mcp.client import GHLApiClient
from ghl_mcp.config import API_VERSION, CONVERSATIONS_VERSION, GHLConfig, load_config
from ghl_mcp.errors import ConfigurationError, GHLApiError


async def test_request_sends_auth_and_version_headers(client, recorder):
    recorder.route("GET", "/contacts/abc", json={"contact": {"id": "abc"}})
    envelope = await client.get("/contacts/abc")

    assert envelope == {"success": True, "data": {"contact": {"id": "abc"}}}
    headers = recorder.last.headers
    assert headers["Authorization"] == "Bearer tok"
    assert headers["Version"] == API_VERSION
    assert headers["Accept"] == "application/json"


async def test_version_override_applies_to_one_call(client, recorder):
    await client.get("/conversations/search", version=CONVERSATIONS_VERSION)
    assert recorder.last.headers["Version"] == CONVERSATIONS_VERSION
    await client.get("/contacts/x")
    assert recorder.last.headers["Version"] == API_VERSION


async def test_query_params_and_json_body(client, recorder):
    await client.post("/contacts/search", {"locationId": "loc123", "pageLimit": 5})
    assert recorder.last.method == "POST"
    assert recorder.last_json() == {"locationId": "loc123", "pageLimit": 5}

    await client.delete("/objects/custom/records/r1", params={"locationId": "loc123"})
    assert recorder.last.method == "DELETE"
    assert recorder.last_params() == {"locationId": "loc123"}


async def test_error_status_raises_with_upstream_message(client, recorder):
    recorder.route("GET", "/contacts/missing", status=404, json={"message": "Contact not found"})
    with pytest.raises(GHLApiError) as info:
        await client.get("/contacts/missing")
    assert info.value.status == 404
    assert str(info.value) == "GHL API Error (404): Contact not found"


async def test_error_message_list_is_joined(client, recorder):
    recorder.route("POST", "/contacts/", status=422, json={"message": ["email invalid", "phone invalid"]})
    with pytest.raises(GHLApiError, match=r"\(422\): email invalid, phone invalid"):
        await client.post("/contacts/", {})


async def test_error_without_body_uses_reason_phrase(client, recorder):
    recorder.route("GET", "/locations/loc123", status=500, content=b"")
    with pytest.raises(GHLApiError, match=r"\(500\): Internal Server Error"):
        await client.get("/locations/loc123")


async def test_transport_failure_raises_without_status(config):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = GHLApiClient(config, transport=httpx.MockTransport(boom))
    with pytest.raises(GHLApiError) as info:
        await client.get("/contacts/x")
    assert info.value.status is None
    assert str(info.value) == "GHL API Error: connection refused"


async def test_empty_body_becomes_empty_dict(client, recorder):
    recorder.route("DELETE", "/contacts/abc", content=b"")
    assert await client.delete("/contacts/abc") == {"success": True, "data": {}}


async def test_bytes_response_keeps_content_type(client, recorder):
    recorder.route("GET", "/audio", content=b"RIFF", headers={"content-type": "audio/wav"})
    envelope = await client.get("/audio", response_type="bytes")
    assert envelope["data"] == b"RIFF"
    assert envelope["contentType"] == "audio/wav"


async def test_update_access_token_affects_next_request(client, recorder):
    client.update_access_token("fresh")
    await client.get("/contacts/x")
    assert recorder.last.headers["Authorization"] == "Bearer fresh"
    assert client.get_config().access_token == "fresh"


def test_update_access_token_rejects_empty(client):
    with pytest.raises(ConfigurationError):
        client.update_access_token("")


def test_get_config_returns_a_copy(client):
    snapshot = client.get_config()
    snapshot.location_id = "other"
    assert client.location_id == "loc123"


@pytest.mark.parametrize("field", ["access_token", "base_url", "location_id", "version"])
def test_client_requires_every_config_field(field):
    values = {"access_token": "t", "base_url": "https://x", "location_id": "l", "version": "v"}
    values[field] = ""
    with pytest.raises(ConfigurationError, match=field):
        GHLApiClient(GHLConfig(**values))


async def test_connection_check_reports_location(client, recorder):
    recorder.route("GET", "/locations/loc123", json={"location": {"id": "loc123"}})
    result = await client.test_connection()
    assert result == {"success": True, "data": {"status": "connected", "locationId": "loc123"}}


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("GHL_API_KEY", " key ")
    monkeypatch.setenv("GHL_LOCATION_ID", "loc9")
    monkeypatch.delenv("GHL_BASE_URL", raising=False)
    config = load_config()
    assert config.access_token == "key"
    assert config.location_id == "loc9"
    assert config.base_url == "https://services.leadconnectorhq.com"
    assert config.version == API_VERSION


def test_load_config_names_the_missing_variable(monkeypatch):
    monkeypatch.setenv("GHL_API_KEY", "")
    with pytest.raises(ConfigurationError, match="GHL_API_KEY environment variable is required"):
        load_config()
