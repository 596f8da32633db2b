import datetime as dt

import pytest

from ghl_mcp.errors import ToolExecutionError

POST_ARGS = {
    "title": "T",
    "blogId": "b1",
    "content": "<p>x</p>",
    "description": "d",
    "imageUrl": "u",
    "imageAltText": "a",
    "urlSlug": "s",
    "author": "au",
    "categories": ["c1"],
}


def _parse_iso(value):
    return dt.datetime.fromisoformat(value.replace("Z", "+00:00"))


async def test_create_post_defaults_to_draft_with_publish_date(registry, recorder):
    recorder.route("POST", "/blogs/posts", json={"data": {"_id": "p1", "title": "T"}})
    result = await registry.invoke("create_blog_post", dict(POST_ARGS))

    body = recorder.last_json()
    assert body["status"] == "DRAFT"
    assert body["publishedAt"]
    assert _parse_iso(body["publishedAt"]).tzinfo is not None
    assert body["locationId"] == "loc123"
    assert body["rawHTML"] == "<p>x</p>"
    assert "content" not in body
    assert body["tags"] == []
    assert result["success"] is True
    assert result["blogPost"]["_id"] == "p1"
    assert "p1" in result["message"]


async def test_published_post_gets_generated_timestamp(registry, recorder):
    recorder.route("POST", "/blogs/posts", json={"data": {"_id": "p2"}})
    before = dt.datetime.now(dt.timezone.utc) - dt.timedelta(seconds=5)
    await registry.invoke("create_blog_post", {**POST_ARGS, "status": "PUBLISHED"})

    body = recorder.last_json()
    assert body["status"] == "PUBLISHED"
    assert _parse_iso(body["publishedAt"]) >= before


async def test_supplied_publish_date_is_kept(registry, recorder):
    recorder.route("POST", "/blogs/posts", json={"data": {"_id": "p3"}})
    await registry.invoke("create_blog_post", {**POST_ARGS, "publishedAt": "2024-01-01T00:00:00.000Z"})
    assert recorder.last_json()["publishedAt"] == "2024-01-01T00:00:00.000Z"


async def test_create_post_without_payload_fails(registry, recorder):
    recorder.route("POST", "/blogs/posts", json={})
    with pytest.raises(ToolExecutionError, match="Failed to create blog post"):
        await registry.invoke("create_blog_post", dict(POST_ARGS))


async def test_url_slug_in_use(registry, recorder):
    recorder.route("GET", "/blogs/posts/url-slug-exists", json={"exists": True})
    result = await registry.invoke("check_url_slug", {"urlSlug": "existing-slug"})

    assert result["success"] is True
    assert result["exists"] is True
    assert result["available"] is False
    assert "already in use" in result["message"]
    assert recorder.last_params() == {"locationId": "loc123", "urlSlug": "existing-slug"}


async def test_url_slug_available(registry, recorder):
    recorder.route("GET", "/blogs/posts/url-slug-exists", json={"exists": False})
    result = await registry.invoke("check_url_slug", {"urlSlug": "fresh", "postId": "p9"})
    assert result["available"] is True
    assert recorder.last_params()["postId"] == "p9"


async def test_post_listing_applies_pagination_defaults(registry, recorder):
    recorder.route("GET", "/blogs/posts/all", json={"blogs": [{"_id": "p1"}, {"_id": "p2"}]})
    result = await registry.invoke("get_blog_posts", {"blogId": "b1"})

    assert recorder.last_params() == {"locationId": "loc123", "blogId": "b1", "limit": "10", "offset": "0"}
    assert result["count"] == 2
