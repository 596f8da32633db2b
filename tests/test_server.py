import json

import httpx
import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from ghl_mcp.errors import GHLError
from ghl_mcp.server import SERVER_NAME, build_registry, check_connection, create_server, render


def test_render_wraps_result_as_json_text():
    [content] = render({"success": True, "count": 2})
    assert content.type == "text"
    assert json.loads(content.text) == {"success": True, "count": 2}


def test_build_registry_uses_given_config(config, recorder):
    registry = build_registry(config, transport=httpx.MockTransport(recorder))
    assert registry.client.location_id == "loc123"
    assert "get_contact" in registry


async def test_check_connection_wraps_failures(registry, recorder):
    recorder.route("GET", "/locations/loc123", status=401, json={"message": "Invalid JWT"})
    with pytest.raises(GHLError, match="Failed to connect to GHL API: GHL API Error \\(401\\): Invalid JWT"):
        await check_connection(registry)


async def test_check_connection_succeeds(registry, recorder):
    recorder.route("GET", "/locations/loc123", json={"location": {"id": "loc123"}})
    result = await check_connection(registry)
    assert result["data"]["locationId"] == "loc123"


async def test_mcp_session_lists_every_tool(registry):
    server = create_server(registry)
    assert server.name == SERVER_NAME
    async with create_connected_server_and_client_session(server) as session:
        listed = await session.list_tools()
    names = [t.name for t in listed.tools]
    assert len(names) == len(registry)
    voicemail = next(t for t in listed.tools if t.name == "get_voicemail_settings")
    assert voicemail.meta == {"labels": {"category": "phone-numbers", "access": "read", "complexity": "simple"}}


async def test_mcp_session_calls_a_tool(registry, recorder):
    recorder.route("GET", "/blogs/posts/url-slug-exists", json={"exists": False})
    server = create_server(registry)
    async with create_connected_server_and_client_session(server) as session:
        result = await session.call_tool("check_url_slug", {"urlSlug": "fresh"})
    assert not result.isError
    payload = json.loads(result.content[0].text)
    assert payload["available"] is True


async def test_mcp_session_reports_failures_as_tool_errors(registry, recorder):
    server = create_server(registry)
    async with create_connected_server_and_client_session(server) as session:
        unknown = await session.call_tool("no_such_tool", {})
        missing = await session.call_tool("get_contact", {})
    assert unknown.isError
    assert "Unknown tool: no_such_tool" in unknown.content[0].text
    assert missing.isError
    assert "Failed to get contact: Missing required parameter(s): contactId" in missing.content[0].text
