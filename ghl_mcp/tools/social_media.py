# social_media.py  –  social planner: posts, accounts, CSV imports,
#                      categories, tags and platform OAuth
#
# All routes live under /social-media-posting/{locationId}; the location is
# always the configured one since these tools take no locationId argument.

from ..marshal import pick, unwrap, without
from .base import ToolModule, tool

PLATFORMS = ["google", "facebook", "instagram", "linkedin", "twitter", "tiktok", "tiktok-business"]
POST_TYPES = ["post", "story", "reel"]
STRINGS = {"type": "array", "items": {"type": "string"}}

# platform -> account listing route under /social-media-posting/oauth/{locationId}/
PLATFORM_ACCOUNT_PATHS = {
    "google": "google/locations",
    "facebook": "facebook/accounts",
    "instagram": "instagram/accounts",
    "linkedin": "linkedin/accounts",
    "twitter": "twitter/accounts",
    "tiktok": "tiktok/accounts",
    "tiktok-business": "tiktok-business/accounts",
}


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _n(description, default=None):
    prop = {"type": "number", "description": description}
    if default is not None:
        prop["default"] = default
    return prop


def _search(what):
    return {
        "searchText": _s(f"Search for {what}"),
        "limit": _n("Number to return", 10),
        "skip": _n("Number to skip", 0),
    }


class SocialMediaTools(ToolModule):
    domain = "social media"

    def _path(self, *parts):
        return "/".join([f"/social-media-posting/{self.location_id}", *parts])

    # ── posts ────────────────────────────────────────────────
    @tool("search_social_posts", "Search and filter social media posts across all platforms", {
        "type": _s("Filter posts by status", enum=["recent", "all", "scheduled", "draft", "failed", "in_review",
                                                   "published", "in_progress", "deleted"], default="all"),
        "accounts": _s("Comma-separated account IDs to filter by"),
        "skip": _n("Number of posts to skip", 0),
        "limit": _n("Number of posts to return", 10),
        "fromDate": _s("Start date (ISO format)"),
        "toDate": _s("End date (ISO format)"),
        "includeUsers": {"type": "boolean", "description": "Include user data in response", "default": True},
        "postType": _s("Type of post to search for", enum=POST_TYPES),
    }, required=["fromDate", "toDate"])
    async def search_social_posts(self, args):
        body = pick(args, "type", "accounts", "skip", "limit", "fromDate", "toDate", "includeUsers", "postType",
                    defaults={"includeUsers": True})
        # this endpoint wants its numbers and flags as strings
        for key in ("skip", "limit"):
            if key in body:
                body[key] = str(body[key])
        body["includeUsers"] = str(body["includeUsers"]).lower()
        data = unwrap(await self.client.post(self._path("posts", "list"), body))
        count = data.get("count") or 0
        return {"success": True, "posts": data.get("posts") or [], "count": count,
                "message": f"Found {count} social media posts"}

    @tool("create_social_post", "Create a new social media post for multiple platforms", {
        "accountIds": {**STRINGS, "description": "Array of social media account IDs to post to"},
        "summary": _s("Post content/text"),
        "media": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "url": _s("Media URL"),
                    "caption": _s("Media caption"),
                    "type": _s("Media MIME type"),
                },
                "required": ["url"],
            },
            "description": "Media attachments",
        },
        "status": _s("Post status", enum=["draft", "scheduled", "published"], default="draft"),
        "scheduleDate": _s("Schedule date for post (ISO format)"),
        "followUpComment": _s("Follow-up comment"),
        "type": _s("Type of post", enum=POST_TYPES),
        "tags": {**STRINGS, "description": "Tag IDs to associate with post"},
        "categoryId": _s("Category ID"),
        "userId": _s("User ID creating the post"),
    }, required=["accountIds", "summary", "type"])
    async def create_social_post(self, args):
        body = pick(args, "accountIds", "summary", "media", "status", "scheduleDate", "followUpComment", "type",
                    "tags", "categoryId", "userId")
        post = unwrap(await self.client.post(self._path("posts"), body), "post", required=True)
        return {"success": True, "post": post, "message": "Social media post created successfully"}

    @tool("get_social_post", "Get details of a specific social media post", {
        "postId": _s("Social media post ID"),
    }, required=["postId"])
    async def get_social_post(self, args):
        post = unwrap(await self.client.get(self._path("posts", args["postId"])), "post", required=True)
        return {"success": True, "post": post,
                "message": f"Retrieved social media post {args['postId']}"}

    @tool("update_social_post", "Update an existing social media post", {
        "postId": _s("Social media post ID"),
        "summary": _s("Updated post content"),
        "status": _s("Updated post status", enum=["draft", "scheduled", "published"]),
        "scheduleDate": _s("Updated schedule date"),
        "tags": {**STRINGS, "description": "Updated tag IDs"},
    }, required=["postId"])
    async def update_social_post(self, args):
        unwrap(await self.client.put(self._path("posts", args["postId"]), without(args, "postId")))
        return {"success": True, "message": f"Social media post {args['postId']} updated successfully"}

    @tool("delete_social_post", "Delete a social media post", {
        "postId": _s("Social media post ID to delete"),
    }, required=["postId"])
    async def delete_social_post(self, args):
        unwrap(await self.client.delete(self._path("posts", args["postId"])))
        return {"success": True, "message": f"Social media post {args['postId']} deleted successfully"}

    @tool("bulk_delete_social_posts", "Delete multiple social media posts at once (max 50)", {
        "postIds": {**STRINGS, "description": "Array of post IDs to delete", "maxItems": 50},
    }, required=["postIds"])
    async def bulk_delete_social_posts(self, args):
        data = unwrap(await self.client.post(self._path("posts", "bulk-delete"), {"postIds": args["postIds"]}))
        deleted = data.get("deletedCount") or 0
        return {"success": True, "deletedCount": deleted,
                "message": f"{deleted} social media posts deleted successfully"}

    # ── accounts ─────────────────────────────────────────────
    @tool("get_social_accounts", "Get all connected social media accounts and groups", {},
          additionalProperties=False)
    async def get_social_accounts(self, args):
        data = unwrap(await self.client.get(self._path("accounts")))
        accounts = data.get("accounts") or []
        groups = data.get("groups") or []
        return {
            "success": True,
            "accounts": accounts,
            "groups": groups,
            "message": f"Retrieved {len(accounts)} social media accounts and {len(groups)} groups",
        }

    @tool("delete_social_account", "Delete a social media account connection", {
        "accountId": _s("Account ID to delete"),
        "companyId": _s("Company ID"),
        "userId": _s("User ID"),
    }, required=["accountId"])
    async def delete_social_account(self, args):
        path = self._path("accounts", args["accountId"])
        unwrap(await self.client.delete(path, params=pick(args, "companyId", "userId")))
        return {"success": True, "message": f"Social media account {args['accountId']} deleted successfully"}

    # ── CSV imports ──────────────────────────────────────────
    @tool("upload_social_csv", "Upload CSV file for bulk social media posts", {
        "file": _s("CSV file data (base64 or file path)"),
    }, required=["file"], action="upload social CSV")
    async def upload_social_csv(self, args):
        data = unwrap(await self.client.post(self._path("csv"), {"file": args["file"]}))
        return {"success": True, "upload": data, "message": "CSV file uploaded successfully"}

    @tool("get_csv_upload_status", "Get status of CSV uploads", {
        "skip": _n("Number to skip", 0),
        "limit": _n("Number to return", 10),
        "includeUsers": {"type": "boolean", "description": "Include user data"},
        "userId": _s("Filter by user ID"),
    }, action="get CSV upload status")
    async def get_csv_upload_status(self, args):
        params = pick(args, "skip", "limit", "includeUsers", "userId")
        data = unwrap(await self.client.get(self._path("csv"), params))
        csvs = data.get("csvs") or []
        return {"success": True, "csvs": csvs, "count": data.get("count") or len(csvs),
                "message": f"Retrieved {len(csvs)} CSV uploads"}

    @tool("set_csv_accounts", "Set accounts for CSV import processing", {
        "accountIds": {**STRINGS, "description": "Account IDs for CSV import"},
        "filePath": _s("CSV file path"),
        "rowsCount": _n("Number of rows to process"),
        "fileName": _s("CSV file name"),
        "approver": _s("Approver user ID"),
        "userId": _s("User ID"),
    }, required=["accountIds", "filePath", "rowsCount", "fileName"], action="set CSV accounts")
    async def set_csv_accounts(self, args):
        unwrap(await self.client.post(self._path("set-accounts"), dict(args)))
        return {"success": True,
                "message": f"CSV import accounts set for {args['fileName']} ({len(args['accountIds'])} accounts)"}

    # ── categories & tags ────────────────────────────────────
    @tool("get_social_categories", "Get social media post categories", _search("categories"))
    async def get_social_categories(self, args):
        params = pick(args, "searchText", defaults={"limit": 10, "skip": 0})
        data = unwrap(await self.client.get(self._path("categories"), params))
        count = data.get("count") or 0
        return {"success": True, "categories": data.get("categories") or [], "count": count,
                "message": f"Retrieved {count} social media categories"}

    @tool("get_social_category", "Get a specific social media category by ID", {
        "categoryId": _s("Category ID"),
    }, required=["categoryId"])
    async def get_social_category(self, args):
        category = unwrap(await self.client.get(self._path("categories", args["categoryId"])), "category", required=True)
        return {"success": True, "category": category,
                "message": f"Retrieved social media category {args['categoryId']}"}

    @tool("get_social_tags", "Get social media post tags", _search("tags"))
    async def get_social_tags(self, args):
        params = pick(args, "searchText", defaults={"limit": 10, "skip": 0})
        data = unwrap(await self.client.get(self._path("tags"), params))
        count = data.get("count") or 0
        return {"success": True, "tags": data.get("tags") or [], "count": count,
                "message": f"Retrieved {count} social media tags"}

    @tool("get_social_tags_by_ids", "Get specific social media tags by their IDs", {
        "tagIds": {**STRINGS, "description": "Array of tag IDs"},
    }, required=["tagIds"], action="get social tags by IDs")
    async def get_social_tags_by_ids(self, args):
        data = unwrap(await self.client.post(self._path("tags", "details"), {"tagIds": args["tagIds"]}))
        count = data.get("count") or 0
        return {"success": True, "tags": data.get("tags") or [], "count": count,
                "message": f"Retrieved {count} social media tags by IDs"}

    # ── OAuth ────────────────────────────────────────────────
    @tool("start_social_oauth", "Start OAuth process for social media platform", {
        "platform": _s("Social media platform", enum=PLATFORMS),
        "userId": _s("User ID initiating OAuth"),
        "page": _s("Page context"),
        "reconnect": {"type": "boolean", "description": "Whether this is a reconnection"},
    }, required=["platform", "userId"], action="start social OAuth")
    async def start_social_oauth(self, args):
        params = {"locationId": self.location_id, **pick(args, "userId", "page", "reconnect")}
        data = unwrap(await self.client.get(f"/social-media-posting/oauth/{args['platform']}/start", params))
        return {"success": True, "oauthData": data, "message": f"OAuth process started for {args['platform']}"}

    @tool("get_platform_accounts", "Get available accounts for a specific platform after OAuth", {
        "platform": _s("Social media platform", enum=PLATFORMS),
        "accountId": _s("OAuth account ID"),
    }, required=["platform", "accountId"])
    async def get_platform_accounts(self, args):
        route = PLATFORM_ACCOUNT_PATHS.get(args["platform"])
        if route is None:
            raise ValueError(f"Unsupported platform: {args['platform']}")
        path = f"/social-media-posting/oauth/{self.location_id}/{route}/{args['accountId']}"
        data = unwrap(await self.client.get(path))
        return {"success": True, "platformAccounts": data,
                "message": f"Retrieved {args['platform']} accounts for OAuth ID {args['accountId']}"}
