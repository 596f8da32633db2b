import pytest

from ghl_mcp.errors import MissingDataError
from ghl_mcp.marshal import compact, passthrough, pick, truthy, unwrap, without


def test_compact_drops_only_none():
    assert compact({"a": None, "b": 0, "c": "", "d": False}) == {"b": 0, "c": "", "d": False}


def test_pick_selects_renames_and_fills_defaults():
    args = {"locationId": "loc", "query": "acme", "status": None, "extra": 1}
    out = pick(args, "locationId", "query", "status",
               rename={"locationId": "location_id", "query": "q", "limit": "limit"},
               defaults={"limit": 20})
    assert out == {"location_id": "loc", "q": "acme", "limit": 20}


def test_pick_prefers_given_value_over_default():
    assert pick({"limit": 5}, defaults={"limit": 20}) == {"limit": 5}


def test_without_drops_path_ids():
    args = {"productId": "p1", "locationId": "loc", "name": "Mug", "price": None}
    assert without(args, "productId") == {"locationId": "loc", "name": "Mug"}

def test_truthy_treats_falsy_values_as_unset():
    args = {"limit": 0, "query": "", "isInstalled": False, "skip": 10, "status": "all"}
    assert truthy(args, "limit", "query", "isInstalled", "skip", "status", "missing") == {
        "skip": 10, "status": "all"}


def test_unwrap_walks_nested_keys():
    envelope = {"success": True, "data": {"contact": {"id": "c1"}}}
    assert unwrap(envelope) == {"contact": {"id": "c1"}}
    assert unwrap(envelope, "contact") == {"id": "c1"}
    assert unwrap(envelope, "contact", "id") == "c1"
    assert unwrap(envelope, "nope", default=[]) == []


def test_unwrap_raises_on_missing_data():
    with pytest.raises(MissingDataError, match="Unknown API error"):
        unwrap({"success": True, "data": None})
    with pytest.raises(MissingDataError, match="quota exceeded"):
        unwrap({"success": False, "error": {"message": "quota exceeded"}})

def test_passthrough_keeps_payload():
    assert passthrough({"success": True, "data": {"items": [1]}}) == {"success": True, "data": {"items": [1]}}


def test_unwrap_required_key_must_be_present():
    envelope = {"success": True, "data": {"unexpected": 1}}
    with pytest.raises(MissingDataError, match="No opportunity in API response"):
        unwrap(envelope, "opportunity", required=True)
    assert unwrap({"success": True, "data": {"opportunity": {"id": "o1"}}},
                  "opportunity", required=True) == {"id": "o1"}
