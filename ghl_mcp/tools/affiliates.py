# affiliates.py  –  affiliate campaigns, affiliates, commissions, payouts and
#                   referrals
#
# Results are the upstream payload unchanged.  Optional filters and update
# fields are only sent when they carry a truthy value.

from ..marshal import passthrough, pick, truthy
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "Location ID"}
PAGE = {
    "limit": {"type": "number", "description": "Max results"},
    "offset": {"type": "number", "description": "Pagination offset"},
}
COMMISSION_TYPES = ["percentage", "fixed"]


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _affiliate(**extra):
    return {"affiliateId": _s("Affiliate ID"), "locationId": LOCATION, **extra}


def _campaign(description="Campaign ID", **extra):
    return {"campaignId": _s(description), "locationId": LOCATION, **extra}


class AffiliateTools(ToolModule):

    async def _get(self, path, args, *filters):
        params = {"locationId": args["locationId"], **truthy(args, *filters)}
        return passthrough(await self.client.get(path, params))

    # ── campaigns ────────────────────────────────────────────
    @tool("get_affiliate_campaigns", "Get all affiliate campaigns", {
        "locationId": LOCATION,
        "status": _s("Campaign status filter", enum=["active", "inactive", "all"]),
        **PAGE,
    })
    async def get_affiliate_campaigns(self, args):
        return await self._get("/affiliates/campaigns", args, "status", "limit", "offset")

    @tool("get_affiliate_campaign", "Get a specific affiliate campaign", _campaign("Affiliate Campaign ID"),
          required=["campaignId"])
    async def get_affiliate_campaign(self, args):
        return await self._get(f"/affiliates/campaigns/{args['campaignId']}", args)

    @tool("create_affiliate_campaign", "Create a new affiliate campaign", {
        "locationId": LOCATION,
        "name": _s("Campaign name"),
        "description": _s("Campaign description"),
        "commissionType": _s("Commission type", enum=COMMISSION_TYPES),
        "commissionValue": {"type": "number", "description": "Commission value (percentage or fixed amount)"},
        "cookieDays": {"type": "number", "description": "Cookie tracking duration in days"},
        "productIds": {"type": "array", "items": {"type": "string"}, "description": "Product IDs for this campaign"},
    }, required=["name", "commissionType", "commissionValue"])
    async def create_affiliate_campaign(self, args):
        body = pick(args, "locationId", "name", "description", "commissionType", "commissionValue", "cookieDays",
                    "productIds")
        return passthrough(await self.client.post("/affiliates/campaigns", body))

    @tool("update_affiliate_campaign", "Update an affiliate campaign", _campaign(
        name=_s("Campaign name"),
        description=_s("Campaign description"),
        commissionType=_s("Commission type", enum=COMMISSION_TYPES),
        commissionValue={"type": "number", "description": "Commission value"},
        status=_s("Campaign status", enum=["active", "inactive"]),
    ), required=["campaignId"])
    async def update_affiliate_campaign(self, args):
        body = {"locationId": args["locationId"],
                **truthy(args, "name", "description", "commissionType", "commissionValue", "status")}
        return passthrough(await self.client.put(f"/affiliates/campaigns/{args['campaignId']}", body))

    @tool("delete_affiliate_campaign", "Delete an affiliate campaign", _campaign(), required=["campaignId"])
    async def delete_affiliate_campaign(self, args):
        path = f"/affiliates/campaigns/{args['campaignId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── affiliates ───────────────────────────────────────────
    @tool("get_affiliates", "Get all affiliates", {
        "locationId": LOCATION,
        "campaignId": _s("Filter by campaign"),
        "status": _s("Status filter", enum=["pending", "approved", "rejected", "all"]),
        **PAGE,
    })
    async def get_affiliates(self, args):
        return await self._get("/affiliates/", args, "campaignId", "status", "limit", "offset")

    @tool("get_affiliate", "Get a specific affiliate", _affiliate(), required=["affiliateId"])
    async def get_affiliate(self, args):
        return await self._get(f"/affiliates/{args['affiliateId']}", args)

    @tool("create_affiliate", "Create/add a new affiliate", {
        "locationId": LOCATION,
        "contactId": _s("Contact ID to make affiliate"),
        "campaignId": _s("Campaign to assign to"),
        "customCode": _s("Custom affiliate code"),
        "status": _s("Initial status", enum=["pending", "approved"]),
    }, required=["contactId", "campaignId"])
    async def create_affiliate(self, args):
        body = pick(args, "locationId", "contactId", "campaignId", "customCode", "status")
        return passthrough(await self.client.post("/affiliates/", body))

    @tool("update_affiliate", "Update an affiliate", _affiliate(
        status=_s("Status", enum=["pending", "approved", "rejected"]),
        customCode=_s("Custom affiliate code"),
    ), required=["affiliateId"])
    async def update_affiliate(self, args):
        body = {"locationId": args["locationId"], **truthy(args, "status", "customCode")}
        return passthrough(await self.client.put(f"/affiliates/{args['affiliateId']}", body))

    @tool("approve_affiliate", "Approve a pending affiliate", _affiliate(), required=["affiliateId"])
    async def approve_affiliate(self, args):
        path = f"/affiliates/{args['affiliateId']}/approve"
        return passthrough(await self.client.post(path, pick(args, "locationId")))

    @tool("reject_affiliate", "Reject/deny a pending affiliate", _affiliate(reason=_s("Rejection reason")),
          required=["affiliateId"])
    async def reject_affiliate(self, args):
        path = f"/affiliates/{args['affiliateId']}/reject"
        return passthrough(await self.client.post(path, pick(args, "locationId", "reason")))

    @tool("delete_affiliate", "Remove an affiliate", _affiliate(), required=["affiliateId"])
    async def delete_affiliate(self, args):
        path = f"/affiliates/{args['affiliateId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── commissions & payouts ────────────────────────────────
    @tool("get_affiliate_commissions", "Get commissions for an affiliate", _affiliate(
        status=_s("Status filter", enum=["pending", "approved", "paid", "all"]),
        startDate=_s("Start date"),
        endDate=_s("End date"),
        **PAGE,
    ), required=["affiliateId"])
    async def get_affiliate_commissions(self, args):
        path = f"/affiliates/{args['affiliateId']}/commissions"
        return await self._get(path, args, "status", "startDate", "endDate", "limit", "offset")

    @tool("get_affiliate_stats", "Get affiliate performance statistics", _affiliate(
        startDate=_s("Start date"),
        endDate=_s("End date"),
    ), required=["affiliateId"])
    async def get_affiliate_stats(self, args):
        return await self._get(f"/affiliates/{args['affiliateId']}/stats", args, "startDate", "endDate")

    @tool("create_payout", "Create a payout for affiliate", _affiliate(
        amount={"type": "number", "description": "Payout amount"},
        commissionIds={"type": "array", "items": {"type": "string"}, "description": "Commission IDs to include"},
        note=_s("Payout note"),
    ), required=["affiliateId", "amount"])
    async def create_payout(self, args):
        body = pick(args, "locationId", "amount", "commissionIds", "note")
        return passthrough(await self.client.post(f"/affiliates/{args['affiliateId']}/payouts", body))

    @tool("get_payouts", "Get affiliate payouts", {
        "locationId": LOCATION,
        "affiliateId": _s("Filter by affiliate"),
        "status": _s("Status filter", enum=["pending", "completed", "failed", "all"]),
        **PAGE,
    })
    async def get_payouts(self, args):
        return await self._get("/affiliates/payouts", args, "affiliateId", "status", "limit", "offset")

    # ── referrals ────────────────────────────────────────────
    @tool("get_referrals", "Get referrals (leads/sales) from affiliates", {
        "locationId": LOCATION,
        "affiliateId": _s("Filter by affiliate"),
        "campaignId": _s("Filter by campaign"),
        "type": _s("Referral type", enum=["lead", "sale", "all"]),
        **PAGE,
    })
    async def get_referrals(self, args):
        return await self._get("/affiliates/referrals", args, "affiliateId", "campaignId", "type", "limit", "offset")
