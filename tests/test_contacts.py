import pytest

from ghl_mcp.errors import MissingDataError, ToolExecutionError


async def test_create_contact_fills_location(registry, recorder):
    recorder.route("POST", "/contacts/", json={"contact": {"id": "c1", "email": "ada@example.com"}})
    result = await registry.invoke("create_contact", {"email": "ada@example.com", "firstName": "Ada"})

    assert recorder.last_json() == {
        "locationId": "loc123", "firstName": "Ada", "email": "ada@example.com"}
    assert result == {"success": True, "contact": {"id": "c1", "email": "ada@example.com"},
                      "message": "Contact created successfully"}


async def test_create_contact_sends_source_only_when_given(registry, recorder):
    recorder.route("POST", "/contacts/", json={"contact": {"id": "c2"}})
    await registry.invoke("create_contact", {"email": "bo@example.com"})
    assert "source" not in recorder.last_json()

    await registry.invoke("create_contact", {"email": "bo@example.com", "source": "webinar"})
    assert recorder.last_json()["source"] == "webinar"


async def test_search_contacts_builds_filters(registry, recorder):
    recorder.route("POST", "/contacts/search", json={"contacts": [{"id": "c1"}], "total": 1})
    result = await registry.invoke("search_contacts", {"email": " ada@example.com ", "phone": "  ", "limit": 5})

    assert recorder.last_json() == {
        "locationId": "loc123", "pageLimit": 5, "filters": {"email": "ada@example.com"}}
    assert result["contacts"] == [{"id": "c1"}]


async def test_search_contacts_default_page_size(registry, recorder):
    recorder.route("POST", "/contacts/search", json={"contacts": []})
    await registry.invoke("search_contacts", {})
    assert recorder.last_json() == {"locationId": "loc123", "pageLimit": 25}


async def test_get_contact_not_found(registry, recorder):
    recorder.route("GET", "/contacts/gone", status=404, json={"message": "Contact not found"})
    with pytest.raises(ToolExecutionError) as info:
        await registry.invoke("get_contact", {"contactId": "gone"})
    message = str(info.value)
    assert message.startswith("Failed to get contact: ")
    assert message.endswith("GHL API Error (404): Contact not found")


async def test_get_contact_reply_without_contact_fails(registry, recorder):
    recorder.route("GET", "/contacts/c1", json={"unexpected": 1})
    with pytest.raises(ToolExecutionError, match="Failed to get contact: No contact in API response") as info:
        await registry.invoke("get_contact", {"contactId": "c1"})
    assert isinstance(info.value.cause, MissingDataError)


async def test_update_contact_sends_only_given_fields(registry, recorder):
    recorder.route("PUT", "/contacts/c1", json={"contact": {"id": "c1"}})
    await registry.invoke("update_contact", {"contactId": "c1", "tags": ["vip"], "email": None})
    assert recorder.last_json() == {"tags": ["vip"]}


async def test_task_completion_defaults_false(registry, recorder):
    recorder.route("POST", "/contacts/c1/tasks", json={"task": {"id": "t1"}})
    await registry.invoke("create_contact_task", {"contactId": "c1", "title": "Call", "dueDate": "2024-01-01"})
    assert recorder.last_json() == {"title": "Call", "dueDate": "2024-01-01", "completed": False}


async def test_bulk_tags_renames_contact_ids(registry, recorder):
    recorder.route("POST", "/contacts/tags/bulk", json={"succeded": True})
    result = await registry.invoke("bulk_update_contact_tags", {
        "contactIds": ["c1", "c2"], "tags": ["vip"], "operation": "add"})
    assert recorder.last_json() == {"ids": ["c1", "c2"], "tags": ["vip"], "operation": "add"}
    assert "2 contacts" in result["message"]
