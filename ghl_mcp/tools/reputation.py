# reputation.py  –  reviews, replies, review requests, platforms, links and
#                    the embeddable review widget
#
# Results are the upstream payload unchanged.

from ..marshal import passthrough, pick, truthy
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "Location ID"}
PLATFORMS = ["google", "facebook", "yelp"]


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _n(description):
    return {"type": "number", "description": description}


def _review(**extra):
    return {"reviewId": _s("Review ID"), "locationId": LOCATION, **extra}


class ReputationTools(ToolModule):

    # ── reviews ──────────────────────────────────────────────
    @tool("get_reviews", "Get all reviews for a location from various platforms", {
        "locationId": LOCATION,
        "platform": _s("Filter by platform", enum=PLATFORMS + ["all"]),
        "rating": _n("Filter by minimum rating (1-5)"),
        "status": _s("Filter by reply status", enum=["replied", "unreplied", "all"]),
        "startDate": _s("Start date (YYYY-MM-DD)"),
        "endDate": _s("End date (YYYY-MM-DD)"),
        "limit": _n("Max results"),
        "offset": _n("Pagination offset"),
    })
    async def get_reviews(self, args):
        params = {"locationId": args["locationId"],
                  **truthy(args, "platform", "rating", "status", "startDate", "endDate", "limit", "offset")}
        return passthrough(await self.client.get("/reputation/reviews", params))

    @tool("get_review", "Get a specific review by ID", _review(), required=["reviewId"])
    async def get_review(self, args):
        path = f"/reputation/reviews/{args['reviewId']}"
        return passthrough(await self.client.get(path, pick(args, "locationId")))

    @tool("reply_to_review", "Reply to a review", _review(reply=_s("Reply text")),
          required=["reviewId", "reply"])
    async def reply_to_review(self, args):
        path = f"/reputation/reviews/{args['reviewId']}/reply"
        return passthrough(await self.client.post(path, pick(args, "locationId", "reply")))

    @tool("update_review_reply", "Update a review reply", _review(reply=_s("Updated reply text")),
          required=["reviewId", "reply"])
    async def update_review_reply(self, args):
        path = f"/reputation/reviews/{args['reviewId']}/reply"
        return passthrough(await self.client.put(path, pick(args, "locationId", "reply")))

    @tool("delete_review_reply", "Delete a review reply", _review(), required=["reviewId"])
    async def delete_review_reply(self, args):
        path = f"/reputation/reviews/{args['reviewId']}/reply"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    @tool("get_review_stats", "Get review statistics/summary", {
        "locationId": LOCATION,
        "platform": _s("Platform filter", enum=PLATFORMS + ["all"]),
        "startDate": _s("Start date"),
        "endDate": _s("End date"),
    })
    async def get_review_stats(self, args):
        params = {"locationId": args["locationId"], **truthy(args, "platform", "startDate", "endDate")}
        return passthrough(await self.client.get("/reputation/stats", params))

    # ── review requests ──────────────────────────────────────
    @tool("send_review_request", "Send a review request to a contact", {
        "locationId": LOCATION,
        "contactId": _s("Contact ID to request review from"),
        "platform": _s("Platform to request review on", enum=PLATFORMS),
        "method": _s("Delivery method", enum=["sms", "email", "both"]),
        "message": _s("Custom message (optional)"),
    }, required=["contactId", "platform", "method"])
    async def send_review_request(self, args):
        body = pick(args, "locationId", "contactId", "platform", "method", "message")
        return passthrough(await self.client.post("/reputation/review-requests", body))

    @tool("get_review_requests", "Get sent review requests", {
        "locationId": LOCATION,
        "contactId": _s("Filter by contact"),
        "status": _s("Status filter", enum=["sent", "clicked", "reviewed", "all"]),
        "limit": _n("Max results"),
        "offset": _n("Pagination offset"),
    })
    async def get_review_requests(self, args):
        params = {"locationId": args["locationId"], **truthy(args, "contactId", "status", "limit", "offset")}
        return passthrough(await self.client.get("/reputation/review-requests", params))

    # ── platforms ────────────────────────────────────────────
    @tool("get_connected_review_platforms", "Get connected review platforms (Google, Facebook, etc.)",
          {"locationId": LOCATION})
    async def get_connected_review_platforms(self, args):
        return passthrough(await self.client.get("/reputation/platforms", pick(args, "locationId")))

    @tool("connect_google_business", "Initiate Google Business Profile connection", {"locationId": LOCATION},
          action="connect Google Business")
    async def connect_google_business(self, args):
        return passthrough(await self.client.post("/reputation/platforms/google/connect", pick(args, "locationId")))

    @tool("disconnect_review_platform", "Disconnect a review platform", {
        "locationId": LOCATION,
        "platform": _s("Platform to disconnect", enum=PLATFORMS),
    }, required=["platform"])
    async def disconnect_review_platform(self, args):
        path = f"/reputation/platforms/{args['platform']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── links & widget ───────────────────────────────────────
    @tool("get_review_links", "Get direct review links for platforms", {"locationId": LOCATION})
    async def get_review_links(self, args):
        return passthrough(await self.client.get("/reputation/links", pick(args, "locationId")))

    @tool("update_review_links", "Update custom review links", {
        "locationId": LOCATION,
        "googleLink": _s("Custom Google review link"),
        "facebookLink": _s("Custom Facebook review link"),
        "yelpLink": _s("Custom Yelp review link"),
    })
    async def update_review_links(self, args):
        body = {"locationId": args["locationId"], **truthy(args, "googleLink", "facebookLink", "yelpLink")}
        return passthrough(await self.client.put("/reputation/links", body))

    @tool("get_review_widget_settings", "Get review widget embed settings", {"locationId": LOCATION})
    async def get_review_widget_settings(self, args):
        return passthrough(await self.client.get("/reputation/widget", pick(args, "locationId")))

    @tool("update_review_widget_settings", "Update review widget settings", {
        "locationId": LOCATION,
        "enabled": {"type": "boolean", "description": "Enable widget"},
        "minRating": _n("Minimum rating to display"),
        "platforms": {"type": "array", "items": {"type": "string"}, "description": "Platforms to show"},
        "layout": _s("Widget layout", enum=["grid", "carousel", "list"]),
    })
    async def update_review_widget_settings(self, args):
        body = {**pick(args, "locationId", "enabled"), **truthy(args, "minRating", "platforms", "layout")}
        return passthrough(await self.client.put("/reputation/widget", body))
