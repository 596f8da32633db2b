import pytest

from ghl_mcp.errors import MissingDataError, ToolExecutionError
from ghl_mcp.tools.opportunities import SEARCH_QUERY_NAMES


async def test_search_uses_snake_case_query_names(registry, recorder):
    recorder.route("GET", "/opportunities/search",
                   json={"opportunities": [{"id": "o1"}], "meta": {"total": 7}})
    result = await registry.invoke("search_opportunities", {"pipelineId": "p1"})

    params = recorder.last_params()
    assert params == {"location_id": "loc123", "pipeline_id": "p1", "limit": "20"}
    assert "pipelineId" not in params
    assert result["opportunities"] == [{"id": "o1"}]
    assert result["meta"] == {"total": 7}
    assert "7 total" in result["message"]


async def test_search_renames_every_filter(registry, recorder):
    recorder.route("GET", "/opportunities/search", json={"opportunities": []})
    await registry.invoke("search_opportunities", {
        "query": "  acme ",
        "pipelineStageId": "s1",
        "contactId": "c1",
        "assignedTo": "u1",
        "status": "open",
        "limit": 50,
    })
    assert recorder.last_params() == {
        "location_id": "loc123",
        "q": "acme",
        "pipeline_stage_id": "s1",
        "contact_id": "c1",
        "assigned_to": "u1",
        "status": "open",
        "limit": "50",
    }


async def test_blank_query_is_dropped(registry, recorder):
    recorder.route("GET", "/opportunities/search", json={"opportunities": []})
    await registry.invoke("search_opportunities", {"query": "   "})
    assert "q" not in recorder.last_params()


def test_rename_table_targets_are_snake_case():
    for source, target in SEARCH_QUERY_NAMES.items():
        assert target == target.lower(), source


async def test_create_defaults_status_open(registry, recorder):
    recorder.route("POST", "/opportunities/", json={"opportunity": {"id": "o9"}})
    result = await registry.invoke("create_opportunity", {"name": "Deal", "pipelineId": "p1", "contactId": "c1"})

    assert recorder.last_json() == {
        "locationId": "loc123", "name": "Deal", "pipelineId": "p1", "contactId": "c1", "status": "open"}
    assert "o9" in result["message"]


async def test_upsert_reports_whether_created(registry, recorder):
    recorder.route("POST", "/opportunities/upsert", json={"opportunity": {"id": "o1"}, "new": True})
    result = await registry.invoke("upsert_opportunity", {"pipelineId": "p1", "contactId": "c1"})
    assert result["isNew"] is True
    assert result["message"] == "Opportunity created successfully"


async def test_remove_followers_sends_body_on_delete(registry, recorder):
    recorder.route("DELETE", "/opportunities/o1/followers", json={"followersRemoved": ["u1"]})
    result = await registry.invoke("remove_opportunity_followers", {"opportunityId": "o1", "followers": ["u1"]})
    assert recorder.last.method == "DELETE"
    assert recorder.last_json() == {"followers": ["u1"]}
    assert result["followersRemoved"] == ["u1"]


@pytest.mark.parametrize("name, args, method, path", [
    ("get_opportunity", {"opportunityId": "o1"}, "GET", "/opportunities/o1"),
    ("create_opportunity", {"name": "Deal", "pipelineId": "p1", "contactId": "c1"}, "POST", "/opportunities/"),
])
async def test_reply_without_opportunity_fails(registry, recorder, name, args, method, path):
    recorder.route(method, path, json={})
    with pytest.raises(ToolExecutionError, match="No opportunity in API response") as info:
        await registry.invoke(name, args)
    assert isinstance(info.value.cause, MissingDataError)
