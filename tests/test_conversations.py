import base64

import pytest

from ghl_mcp.config import CONVERSATIONS_VERSION
from ghl_mcp.errors import MissingDataError, ToolExecutionError


async def test_send_sms_uses_conversations_revision(registry, recorder):
    recorder.route("POST", "/conversations/messages", json={"messageId": "m1", "conversationId": "cv1"})
    result = await registry.invoke("send_sms", {"contactId": "c1", "message": "hi"})

    assert recorder.last.headers["Version"] == CONVERSATIONS_VERSION
    assert recorder.last_json() == {"type": "SMS", "contactId": "c1", "message": "hi"}
    assert result["messageId"] == "m1"
    assert result["conversationId"] == "cv1"


async def test_search_conversations_defaults(registry, recorder):
    recorder.route("GET", "/conversations/search", json={"conversations": [{"id": "cv1"}], "total": 3})
    result = await registry.invoke("search_conversations", {"contactId": "c1"})

    assert recorder.last_params() == {"locationId": "loc123", "contactId": "c1", "status": "all", "limit": "20"}
    assert result["total"] == 3
    assert result["message"] == "Found 1 conversations (3 total)"


async def test_recording_is_base64_encoded(registry, recorder):
    path = "/conversations/messages/m1/locations/loc123/recording"
    recorder.route("GET", path, content=b"\x00\x01audio", headers={"content-type": "audio/mpeg"})
    result = await registry.invoke("get_message_recording", {"messageId": "m1"})

    assert base64.b64decode(result["recording"]) == b"\x00\x01audio"
    assert result["contentType"] == "audio/mpeg"


async def test_recording_without_content_type_falls_back(registry, recorder):
    path = "/conversations/messages/m1/locations/loc123/recording"
    recorder.route("GET", path, content=b"RIFF")
    result = await registry.invoke("get_message_recording", {"messageId": "m1"})
    assert result["contentType"] == "audio/x-wav"


async def test_create_conversation_returns_new_id(registry, recorder):
    recorder.route("POST", "/conversations/", json={"conversation": {"id": "cv9"}})
    result = await registry.invoke("create_conversation", {"contactId": "c1"})
    assert recorder.last_json() == {"locationId": "loc123", "contactId": "c1"}
    assert result["conversationId"] == "cv9"


async def test_create_conversation_reply_without_conversation_fails(registry, recorder):
    recorder.route("POST", "/conversations/", json={"unexpected": 1})
    with pytest.raises(ToolExecutionError, match="Failed to create conversation") as info:
        await registry.invoke("create_conversation", {"contactId": "c1"})
    assert isinstance(info.value.cause, MissingDataError)


@pytest.mark.parametrize("name, args, method, path", [
    ("delete_conversation", {"conversationId": "cv1"}, "DELETE", "/conversations/cv1"),
    ("update_message_status", {"messageId": "m1", "status": "read"}, "PUT", "/conversations/messages/m1/status"),
])
async def test_empty_reply_is_not_reported_as_success(registry, recorder, name, args, method, path):
    recorder.route(method, path, content=b"null")
    with pytest.raises(ToolExecutionError) as info:
        await registry.invoke(name, args)
    assert isinstance(info.value.cause, MissingDataError)
