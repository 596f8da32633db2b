import pytest

from ghl_mcp.errors import ToolExecutionError


async def test_product_total_is_read_from_aggregate(registry, recorder):
    recorder.route("GET", "/products/", json={"products": [{"_id": "p1"}], "total": [{"total": 12}]})
    result = await registry.invoke("ghl_list_products", {"limit": 1})

    assert recorder.last_params() == {"locationId": "loc123", "limit": "1"}
    assert result["total"] == 12
    assert result["message"] == "Retrieved 1 of 12 products"


async def test_create_product_forwards_arguments(registry, recorder):
    recorder.route("POST", "/products/", json={"_id": "p1", "name": "Mug"})
    result = await registry.invoke("ghl_create_product", {"name": "Mug", "productType": "PHYSICAL"})
    assert recorder.last_json() == {"name": "Mug", "productType": "PHYSICAL", "locationId": "loc123"}
    assert "p1" in result["message"]


async def test_shipping_zone_body_uses_alt_id(registry, recorder):
    recorder.route("POST", "/store/shipping-zone",
                   json={"data": {"_id": "z1", "name": "US", "countries": [{"code": "US"}]}})
    result = await registry.invoke("ghl_create_shipping_zone", {"name": "US", "countries": [{"code": "US"}]})

    assert recorder.last_json() == {
        "altId": "loc123", "altType": "location", "name": "US", "countries": [{"code": "US"}]}
    assert result["shippingZone"]["_id"] == "z1"
    assert "1 country(ies)" in result["message"]


async def test_shipping_zone_without_payload_fails(registry, recorder):
    recorder.route("POST", "/store/shipping-zone", json={"status": True})
    with pytest.raises(ToolExecutionError, match="Failed to create shipping zone: No shipping zone data"):
        await registry.invoke("ghl_create_shipping_zone", {"name": "US", "countries": []})


async def test_social_routes_are_scoped_to_configured_location(registry, recorder):
    recorder.route("GET", "/social-media-posting/loc123/accounts",
                   json={"accounts": [{"id": "a1"}], "groups": []})
    result = await registry.invoke("get_social_accounts", {})
    assert result["message"] == "Retrieved 1 social media accounts and 0 groups"


async def test_social_search_stringifies_paging(registry, recorder):
    recorder.route("POST", "/social-media-posting/loc123/posts/list", json={"posts": [], "count": 0})
    await registry.invoke("search_social_posts", {
        "fromDate": "2024-01-01", "toDate": "2024-02-01", "skip": 0, "limit": 5})
    assert recorder.last_json() == {
        "skip": "0", "limit": "5", "fromDate": "2024-01-01", "toDate": "2024-02-01", "includeUsers": "true"}


async def test_social_categories_use_defaults(registry, recorder):
    recorder.route("GET", "/social-media-posting/loc123/categories", json={"categories": [{"_id": "k"}], "count": 1})
    result = await registry.invoke("get_social_categories", {"searchText": "promo"})
    assert recorder.last_params() == {"searchText": "promo", "limit": "10", "skip": "0"}
    assert result["count"] == 1


async def test_location_search_defaults(registry, recorder):
    recorder.route("GET", "/locations/search", json={"locations": [{"id": "l1"}, {"id": "l2"}]})
    result = await registry.invoke("search_locations", {"companyId": "co1"})
    assert recorder.last_params() == {"companyId": "co1", "skip": "0", "limit": "10", "order": "asc"}
    assert result["message"] == "Found 2 locations"


async def test_location_tag_defaults_to_configured_location(registry, recorder):
    recorder.route("POST", "/locations/loc123/tags", json={"tag": {"id": "t1", "name": "vip"}})
    result = await registry.invoke("create_location_tag", {"name": "vip"})
    assert recorder.last_json() == {"name": "vip"}
    assert result["tag"]["id"] == "t1"
