import pytest

from ghl_mcp.errors import GHLApiError, InvalidArgumentsError, ToolExecutionError, UnknownToolError
from ghl_mcp.tools import MODULES, ToolModule, ToolRegistry, tool
from ghl_mcp.tools.contacts import ContactTools
from ghl_mcp.tools.phone import PhoneTools


def _unfillable_required(spec):
    """Required fields that neither location defaulting, fill nor a schema default can supply."""
    properties = spec.input_schema["properties"]
    return [f for f in spec.required
            if f != spec.location_key and f not in spec.fill and "default" not in properties.get(f, {})]


def test_registry_covers_every_module(registry):
    counts = registry.counts()
    assert list(counts) == [label for label, _ in MODULES]
    assert counts["contact"] == 31
    assert counts["conversation"] == 20
    assert counts["blog"] == 7
    assert counts["opportunity"] == 10
    assert len(registry) == sum(counts.values()) == 294


def test_tool_names_are_unique_across_modules(registry):
    names = [d["name"] for d in registry.list_definitions()]
    assert len(names) == len(set(names)) == len(registry)


def test_duplicate_names_across_modules_are_rejected(client):
    with pytest.raises(ValueError, match="defined by both"):
        ToolRegistry(client, modules=[("a", ContactTools), ("b", ContactTools)])


def test_duplicate_names_inside_a_module_are_rejected():
    with pytest.raises(ValueError, match="duplicate tool name"):
        class Twice(ToolModule):
            @tool("ping", "first")
            async def one(self, args):
                return {}

            @tool("ping", "second")
            async def two(self, args):
                return {}


def test_definitions_are_stable_across_calls(registry):
    first = registry.list_definitions()
    first[0]["inputSchema"]["properties"]["injected"] = {"type": "string"}
    assert registry.list_definitions() != first
    assert registry.list_definitions() == registry.list_definitions()


def test_every_definition_is_an_object_schema(registry):
    for definition in registry.list_definitions():
        schema = definition["inputSchema"]
        assert schema["type"] == "object", definition["name"]
        assert isinstance(schema["properties"], dict), definition["name"]
        assert definition["description"], definition["name"]


def test_labels_sit_beside_the_input_schema(registry):
    definitions = {d["name"]: d for d in registry.list_definitions()}
    for name, definition in definitions.items():
        assert "_meta" not in definition["inputSchema"]["properties"], name
    voicemail = definitions["get_voicemail_settings"]
    assert voicemail["_meta"]["labels"]["category"] == "phone-numbers"
    assert voicemail["_meta"]["labels"]["access"] == "read"
    assert "_meta" not in definitions["get_contact"]


async def test_unknown_tool_names_the_tool(registry):
    with pytest.raises(UnknownToolError, match="Unknown tool: no_such_tool"):
        await registry.invoke("no_such_tool", {})


async def test_module_level_unknown_tool_names_the_domain(client):
    with pytest.raises(UnknownToolError, match="Unknown contact tool: nope"):
        await ContactTools(client).invoke("nope", {})
    with pytest.raises(UnknownToolError, match="^Unknown tool: nope$"):
        await PhoneTools(client).invoke("nope", {})


async def test_missing_required_fields_fail_before_any_request(registry, recorder):
    checked = 0
    for module in registry.modules.values():
        for spec in module._specs.values():
            missing = _unfillable_required(spec)
            if not missing:
                continue
            with pytest.raises(ToolExecutionError) as info:
                await registry.invoke(spec.name, {})
            assert isinstance(info.value.cause, InvalidArgumentsError), spec.name
            assert info.value.cause.missing == missing, spec.name
            checked += 1
    assert checked > 150
    assert recorder.requests == []


async def test_none_arguments_count_as_missing(registry, recorder):
    with pytest.raises(ToolExecutionError, match="Missing required parameter\\(s\\): contactId"):
        await registry.invoke("get_contact", {"contactId": None})


async def test_upstream_failure_is_prefixed_with_the_action(registry, recorder):
    recorder.route("GET", "/contacts/c404", status=404, json={"message": "Contact not found"})
    with pytest.raises(ToolExecutionError) as info:
        await registry.invoke("get_contact", {"contactId": "c404"})
    assert "Failed to get contact" in str(info.value)
    assert "GHL API Error (404): Contact not found" in str(info.value)
    assert isinstance(info.value.cause, GHLApiError)


@pytest.mark.parametrize("name, args, method, path", [
    ("get_pipelines", {}, "GET", "/opportunities/pipelines"),
    ("get_phone_numbers", {}, "GET", "/phone-numbers/"),
    ("get_sms_templates", {}, "GET", "/templates/sms"),
    ("get_affiliate_campaigns", {}, "GET", "/affiliates/campaigns"),
    ("get_attribution_report", {"startDate": "2024-01-01", "endDate": "2024-01-31"}, "GET",
     "/reporting/attribution"),
])
async def test_location_defaults_into_the_query(registry, recorder, name, args, method, path):
    await registry.invoke(name, args)
    assert recorder.last.method == method
    assert recorder.last.url.path == path
    assert recorder.last_params()["locationId"] == "loc123"


async def test_location_defaults_into_the_body(registry, recorder):
    recorder.route("POST", "/contacts/search", json={"contacts": [], "total": 0})
    await registry.invoke("search_contacts", {"query": "  ada  "})
    body = recorder.last_json()
    assert body["locationId"] == "loc123"
    assert body["query"] == "ada"


async def test_explicit_location_wins(registry, recorder):
    await registry.invoke("get_pipelines", {"locationId": "other"})
    assert recorder.last_params()["locationId"] == "other"


async def test_empty_location_is_replaced(registry, recorder):
    await registry.invoke("get_pipelines", {"locationId": ""})
    assert recorder.last_params()["locationId"] == "loc123"
