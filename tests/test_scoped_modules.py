# payments, invoices, objects, oauth, phone, reporting, templates, affiliates,
# associations and custom fields: request shapes and passthrough results


async def test_payments_fill_alt_id_and_type(registry, recorder):
    recorder.route("GET", "/payments/orders", json={"data": [{"_id": "o1"}], "totalCount": 1})
    result = await registry.invoke("list_orders", {})

    assert recorder.last_params() == {"altId": "loc123", "altType": "location"}
    assert result == {"success": True, "data": {"data": [{"_id": "o1"}], "totalCount": 1}}


async def test_coupon_lookup_gets_alt_type_without_asking(registry, recorder):
    recorder.route("GET", "/payments/coupon", json={"_id": "cp1", "code": "SAVE10"})
    result = await registry.invoke("get_coupon", {"id": "cp1", "code": "SAVE10"})

    assert recorder.last_params() == {"altId": "loc123", "altType": "location", "id": "cp1", "code": "SAVE10"}
    assert result["success"] is True


async def test_invoice_listing_uses_schema_defaults(registry, recorder):
    await registry.invoke("list_invoice_templates", {"search": "monthly"})
    assert recorder.last.url.path == "/invoices/template"
    assert recorder.last_params() == {
        "altId": "loc123", "altType": "location", "search": "monthly", "limit": "10", "offset": "0"}


async def test_object_record_update_sends_location_twice(registry, recorder):
    recorder.route("PUT", "/objects/custom_objects.pets/records/r1", json={"record": {"id": "r1"}})
    result = await registry.invoke("update_object_record", {
        "schemaKey": "custom_objects.pets", "recordId": "r1", "properties": {"name": "Rex"}})

    assert recorder.last_params() == {"locationId": "loc123"}
    assert recorder.last_json() == {"properties": {"name": "Rex"}, "locationId": "loc123"}
    assert result["record"] == {"id": "r1"}


async def test_object_search_pagination_defaults(registry, recorder):
    recorder.route("POST", "/objects/custom_objects.pets/records/search", json={"records": [{"id": "r1"}], "total": 4})
    result = await registry.invoke("search_object_records", {"schemaKey": "custom_objects.pets", "query": "Rex"})

    assert recorder.last_json() == {
        "locationId": "loc123", "query": "Rex", "page": 1, "pageLimit": 10, "searchAfter": []}
    assert result["total"] == 4
    assert result["records"] == [{"id": "r1"}]


async def test_object_schema_flag_is_stringified(registry, recorder):
    recorder.route("GET", "/objects/custom_objects.pets", json={"object": {"key": "custom_objects.pets"}})
    await registry.invoke("get_object_schema", {"key": "custom_objects.pets", "fetchProperties": True})
    assert recorder.last_params() == {"locationId": "loc123", "fetchProperties": "true"}


async def test_installed_locations_drop_falsy_filters(registry, recorder):
    await registry.invoke("get_installed_locations", {
        "appId": "a1", "companyId": "co1", "limit": 0, "query": "acme", "isInstalled": False})
    assert recorder.last.url.path == "/oauth/installedLocations"
    assert recorder.last_params() == {"appId": "a1", "companyId": "co1", "query": "acme", "isInstalled": "false"}


async def test_phone_update_keeps_false_but_drops_blank(registry, recorder):
    recorder.route("PUT", "/phone-numbers/pn1", json={"id": "pn1"})
    result = await registry.invoke("update_phone_number", {
        "phoneNumberId": "pn1", "name": "", "callRecording": False})

    assert recorder.last_json() == {"locationId": "loc123", "callRecording": False}
    assert result == {"success": True, "data": {"id": "pn1"}}


async def test_reporting_path_and_filters(registry, recorder):
    await registry.invoke("get_call_reports", {
        "startDate": "2024-01-01", "endDate": "2024-01-31", "userId": "u1"})
    assert recorder.last.url.path == "/reporting/calls"
    assert recorder.last_params() == {
        "locationId": "loc123", "startDate": "2024-01-01", "endDate": "2024-01-31", "userId": "u1"}


async def test_template_delete_scopes_by_location(registry, recorder):
    await registry.invoke("delete_sms_template", {"templateId": "t1"})
    assert recorder.last.method == "DELETE"
    assert recorder.last.url.path == "/templates/sms/t1"
    assert recorder.last_params() == {"locationId": "loc123"}


async def test_affiliate_campaign_update_skips_empty_fields(registry, recorder):
    await registry.invoke("update_affiliate_campaign", {"campaignId": "k1", "name": "", "status": "active"})
    assert recorder.last.url.path == "/affiliates/campaigns/k1"
    assert recorder.last_json() == {"locationId": "loc123", "status": "active"}


async def test_associations_page_defaults(registry, recorder):
    recorder.route("GET", "/associations/", json={"associations": [{"id": "as1"}]})
    result = await registry.invoke("ghl_get_all_associations", {})

    assert recorder.last_params() == {"locationId": "loc123", "skip": "0", "limit": "20"}
    assert result["data"] == {"associations": [{"id": "as1"}]}
    assert result["message"] == "Retrieved 1 associations"


async def test_custom_field_result_shape(registry, recorder):
    recorder.route("GET", "/custom-fields/f1", json={"field": {"id": "f1"}})
    result = await registry.invoke("ghl_get_custom_field_by_id", {"id": "f1"})
    assert result == {"success": True, "data": {"field": {"id": "f1"}},
                      "message": "Custom field/folder retrieved successfully"}
