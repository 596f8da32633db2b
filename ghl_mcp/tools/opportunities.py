# opportunities.py  –  pipelines and opportunities
#
# /opportunities/search is the one endpoint of this API family that takes
# snake_case query parameters; SEARCH_QUERY_NAMES maps tool argument names to
# the names the endpoint expects.

from ..marshal import pick, unwrap
from .base import ToolModule, tool

SEARCH_QUERY_NAMES = {
    "locationId": "location_id",
    "query": "q",
    "pipelineId": "pipeline_id",
    "pipelineStageId": "pipeline_stage_id",
    "contactId": "contact_id",
    "assignedTo": "assigned_to",
}

STATUSES = ["open", "won", "lost", "abandoned"]
FOLLOWERS_ADD = {"type": "array", "items": {"type": "string"}, "description": "Array of user IDs to add as followers"}
FOLLOWERS_REMOVE = {"type": "array", "items": {"type": "string"}, "description": "Array of user IDs to remove as followers"}


def _s(description):
    return {"type": "string", "description": description}


class OpportunityTools(ToolModule):
    domain = "opportunity"

    @tool("search_opportunities",
          "Search for opportunities in GoHighLevel CRM using various filters like pipeline, stage, contact, status, etc.", {
              "query": _s("General search query (searches name, contact info)"),
              "pipelineId": _s("Filter by specific pipeline ID"),
              "pipelineStageId": _s("Filter by specific pipeline stage ID"),
              "contactId": _s("Filter by specific contact ID"),
              "status": {"type": "string", "description": "Filter by opportunity status",
                         "enum": STATUSES + ["all"]},
              "assignedTo": _s("Filter by assigned user ID"),
              "limit": {"type": "number", "description": "Maximum number of opportunities to return (default: 20, max: 100)",
                        "minimum": 1, "maximum": 100, "default": 20},
          }, location=True)
    async def search_opportunities(self, args):
        if isinstance(args.get("query"), str):
            args["query"] = args["query"].strip() or None
        params = pick(args, "locationId", "query", "pipelineId", "pipelineStageId", "contactId",
                      "status", "assignedTo", rename=SEARCH_QUERY_NAMES, defaults={"limit": 20})
        data = unwrap(await self.client.get("/opportunities/search", params))
        opportunities = data.get("opportunities") if isinstance(data.get("opportunities"), list) else []
        meta = data.get("meta") or {}
        return {
            "success": True,
            "opportunities": opportunities,
            "meta": data.get("meta"),
            "message": f"Found {len(opportunities)} opportunities ({meta.get('total') or len(opportunities)} total)",
        }

    @tool("get_pipelines", "Get all sales pipelines configured in GoHighLevel", {}, location=True)
    async def get_pipelines(self, args):
        data = unwrap(await self.client.get("/opportunities/pipelines", {"locationId": args["locationId"]}))
        pipelines = data.get("pipelines") if isinstance(data.get("pipelines"), list) else []
        return {"success": True, "pipelines": pipelines, "message": f"Retrieved {len(pipelines)} pipelines"}

    @tool("get_opportunity", "Get detailed information about a specific opportunity by ID", {
        "opportunityId": _s("The unique ID of the opportunity to retrieve"),
    }, required=["opportunityId"])
    async def get_opportunity(self, args):
        opportunity = unwrap(await self.client.get(f"/opportunities/{args['opportunityId']}"), "opportunity", required=True)
        return {"success": True, "opportunity": opportunity, "message": "Opportunity retrieved successfully"}

    @tool("create_opportunity", "Create a new opportunity in GoHighLevel CRM", {
        "name": _s("Name/title of the opportunity"),
        "pipelineId": _s("ID of the pipeline this opportunity belongs to"),
        "contactId": _s("ID of the contact associated with this opportunity"),
        "status": {"type": "string", "description": "Initial status of the opportunity (default: open)",
                   "enum": STATUSES, "default": "open"},
        "monetaryValue": {"type": "number", "description": "Monetary value of the opportunity in dollars"},
        "assignedTo": _s("User ID to assign this opportunity to"),
    }, required=["name", "pipelineId", "contactId"], location=True)
    async def create_opportunity(self, args):
        body = pick(args, "locationId", "name", "pipelineId", "contactId", "pipelineStageId",
                    "monetaryValue", "assignedTo", "customFields", defaults={"status": "open"})
        opportunity = unwrap(await self.client.post("/opportunities/", body), "opportunity", required=True)
        return {
            "success": True,
            "opportunity": opportunity,
            "message": f"Opportunity created successfully with ID: {opportunity.get('id')}",
        }

    @tool("update_opportunity_status", "Update the status of an opportunity (won, lost, etc.)", {
        "opportunityId": _s("The unique ID of the opportunity"),
        "status": {"type": "string", "description": "New status for the opportunity", "enum": STATUSES},
    }, required=["opportunityId", "status"])
    async def update_opportunity_status(self, args):
        unwrap(await self.client.put(f"/opportunities/{args['opportunityId']}/status", {"status": args["status"]}))
        return {"success": True, "message": f"Opportunity status updated to {args['status']}"}

    @tool("delete_opportunity", "Delete an opportunity from GoHighLevel CRM", {
        "opportunityId": _s("The unique ID of the opportunity to delete"),
    }, required=["opportunityId"])
    async def delete_opportunity(self, args):
        unwrap(await self.client.delete(f"/opportunities/{args['opportunityId']}"))
        return {"success": True, "message": "Opportunity deleted successfully"}

    @tool("update_opportunity", "Update an existing opportunity with new details (full update)", {
        "opportunityId": _s("The unique ID of the opportunity to update"),
        "name": _s("Updated name/title of the opportunity"),
        "pipelineId": _s("Updated pipeline ID"),
        "pipelineStageId": _s("Updated pipeline stage ID"),
        "status": {"type": "string", "description": "Updated status of the opportunity", "enum": STATUSES},
        "monetaryValue": {"type": "number", "description": "Updated monetary value in dollars"},
        "assignedTo": _s("Updated assigned user ID"),
    }, required=["opportunityId"])
    async def update_opportunity(self, args):
        body = pick(args, "name", "pipelineId", "pipelineStageId", "status", "monetaryValue", "assignedTo")
        opportunity = unwrap(await self.client.put(f"/opportunities/{args['opportunityId']}", body), "opportunity", required=True)
        return {"success": True, "opportunity": opportunity, "message": "Opportunity updated successfully"}

    @tool("upsert_opportunity", "Create or update an opportunity based on contact and pipeline (smart merge)", {
        "name": _s("Name/title of the opportunity"),
        "pipelineId": _s("ID of the pipeline this opportunity belongs to"),
        "contactId": _s("ID of the contact associated with this opportunity"),
        "status": {"type": "string", "description": "Status of the opportunity", "enum": STATUSES, "default": "open"},
        "pipelineStageId": _s("Pipeline stage ID"),
        "monetaryValue": {"type": "number", "description": "Monetary value of the opportunity in dollars"},
        "assignedTo": _s("User ID to assign this opportunity to"),
    }, required=["pipelineId", "contactId"], location=True)
    async def upsert_opportunity(self, args):
        body = pick(args, "locationId", "pipelineId", "contactId", "name", "pipelineStageId",
                    "monetaryValue", "assignedTo", defaults={"status": "open"})
        envelope = await self.client.post("/opportunities/upsert", body)
        opportunity = unwrap(envelope, "opportunity", required=True)
        is_new = bool(unwrap(envelope, "new"))
        return {
            "success": True,
            "opportunity": opportunity,
            "isNew": is_new,
            "message": f"Opportunity {'created' if is_new else 'updated'} successfully",
        }

    @tool("add_opportunity_followers", "Add followers to an opportunity for notifications and tracking", {
        "opportunityId": _s("The unique ID of the opportunity"),
        "followers": FOLLOWERS_ADD,
    }, required=["opportunityId", "followers"])
    async def add_opportunity_followers(self, args):
        path = f"/opportunities/{args['opportunityId']}/followers"
        data = unwrap(await self.client.post(path, {"followers": args["followers"]}))
        added = data.get("followersAdded") or []
        return {
            "success": True,
            "followers": data.get("followers") or [],
            "followersAdded": added,
            "message": f"Added {len(added)} followers to opportunity",
        }

    @tool("remove_opportunity_followers", "Remove followers from an opportunity", {
        "opportunityId": _s("The unique ID of the opportunity"),
        "followers": FOLLOWERS_REMOVE,
    }, required=["opportunityId", "followers"])
    async def remove_opportunity_followers(self, args):
        path = f"/opportunities/{args['opportunityId']}/followers"
        data = unwrap(await self.client.delete(path, json={"followers": args["followers"]}))
        removed = data.get("followersRemoved") or []
        return {
            "success": True,
            "followers": data.get("followers") or [],
            "followersRemoved": removed,
            "message": f"Removed {len(removed)} followers from opportunity",
        }
