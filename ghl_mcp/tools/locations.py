# locations.py  –  sub-accounts and everything scoped under /locations/{id}

from ..marshal import pick, unwrap, without
from .base import ToolModule, tool

LOC = {"type": "string", "description": "The location ID"}


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _n(description, default=None):
    prop = {"type": "number", "description": description}
    if default is not None:
        prop["default"] = default
    return prop


class LocationTools(ToolModule):
    domain = "location"

    # ── locations ────────────────────────────────────────────
    @tool("search_locations", "Search for locations/sub-accounts in GoHighLevel with filtering options", {
        "companyId": _s("Company/Agency ID to filter locations"),
        "skip": _n("Number of results to skip for pagination (default: 0)", 0),
        "limit": _n("Maximum number of locations to return (default: 10)", 10),
        "order": {"type": "string", "enum": ["asc", "desc"], "description": "Order of results (default: asc)",
                  "default": "asc"},
        "email": _s("Filter by email address", format="email"),
    })
    async def search_locations(self, args):
        params = pick(args, "companyId", "email", defaults={"skip": 0, "limit": 10, "order": "asc"})
        locations = unwrap(await self.client.get("/locations/search", params), "locations", default=[])
        return {"success": True, "locations": locations, "message": f"Found {len(locations)} locations"}

    @tool("get_location", "Get detailed information about a specific location/sub-account by ID", {
        "locationId": _s("The unique ID of the location to retrieve"),
    }, required=["locationId"])
    async def get_location(self, args):
        location = unwrap(await self.client.get(f"/locations/{args['locationId']}"), "location", required=True)
        return {"success": True, "location": location, "message": "Location retrieved successfully"}

    @tool("create_location", "Create a new sub-account/location in GoHighLevel (Agency Pro plan required)", {
        "name": _s("Name of the sub-account/location"),
        "companyId": _s("Company/Agency ID"),
        "phone": _s("Phone number with country code (e.g., +1410039940)"),
        "address": _s("Business address"),
        "city": _s("City where business is located"),
        "state": _s("State where business operates"),
        "country": _s("2-letter country code (e.g., US, CA, GB)"),
        "postalCode": _s("Postal/ZIP code"),
        "website": _s("Business website URL"),
        "timezone": _s("Business timezone (e.g., US/Central)"),
        "prospectInfo": {
            "type": "object",
            "properties": {
                "firstName": _s("Prospect first name"),
                "lastName": _s("Prospect last name"),
                "email": {"type": "string", "format": "email", "description": "Prospect email"},
            },
            "required": ["firstName", "lastName", "email"],
            "description": "Prospect information for the location",
        },
        "snapshotId": _s("Snapshot ID to load into the location"),
    }, required=["name", "companyId"])
    async def create_location(self, args):
        location = unwrap(await self.client.post("/locations/", dict(args)))
        return {"success": True, "location": location, "message": f"Location \"{args['name']}\" created successfully"}

    @tool("update_location", "Update an existing sub-account/location in GoHighLevel", {
        "locationId": _s("The unique ID of the location to update"),
        "name": _s("Updated name of the sub-account/location"),
        "companyId": _s("Company/Agency ID"),
        "phone": _s("Updated phone number"),
        "address": _s("Updated business address"),
        "city": _s("Updated city"),
        "state": _s("Updated state"),
        "country": _s("Updated 2-letter country code"),
        "postalCode": _s("Updated postal/ZIP code"),
        "website": _s("Updated website URL"),
        "timezone": _s("Updated timezone"),
    }, required=["locationId", "companyId"])
    async def update_location(self, args):
        location = unwrap(await self.client.put(f"/locations/{args['locationId']}", without(args, "locationId")))
        return {"success": True, "location": location, "message": "Location updated successfully"}

    @tool("delete_location", "Delete a sub-account/location from GoHighLevel", {
        "locationId": _s("The unique ID of the location to delete"),
        "deleteTwilioAccount": {"type": "boolean", "description": "Whether to delete associated Twilio account",
                                "default": False},
    }, required=["locationId", "deleteTwilioAccount"])
    async def delete_location(self, args):
        # query strings carry booleans as lowercase words
        params = {"deleteTwilioAccount": "true" if args["deleteTwilioAccount"] else "false"}
        data = unwrap(await self.client.delete(f"/locations/{args['locationId']}", params=params))
        return {"success": True, "message": data.get("message") or "Location deleted successfully"}

    # ── tags ─────────────────────────────────────────────────
    @tool("get_location_tags", "Get all tags for a specific location", {
        "locationId": _s("The location ID to get tags from"),
    }, required=["locationId"])
    async def get_location_tags(self, args):
        tags = unwrap(await self.client.get(f"/locations/{args['locationId']}/tags"), "tags", default=[])
        return {"success": True, "tags": tags, "message": f"Retrieved {len(tags)} location tags"}

    @tool("create_location_tag", "Create a new tag for a location", {
        "locationId": _s("The location ID to create tag in"),
        "name": _s("Name of the tag to create"),
    }, required=["locationId", "name"])
    async def create_location_tag(self, args):
        tag = unwrap(await self.client.post(f"/locations/{args['locationId']}/tags", {"name": args["name"]}), "tag", required=True)
        return {"success": True, "tag": tag, "message": f"Tag \"{args['name']}\" created successfully"}

    @tool("get_location_tag", "Get a specific location tag by ID", {
        "locationId": LOC,
        "tagId": _s("The tag ID to retrieve"),
    }, required=["locationId", "tagId"])
    async def get_location_tag(self, args):
        tag = unwrap(await self.client.get(f"/locations/{args['locationId']}/tags/{args['tagId']}"), "tag", required=True)
        return {"success": True, "tag": tag, "message": "Location tag retrieved successfully"}

    @tool("update_location_tag", "Update an existing location tag", {
        "locationId": LOC,
        "tagId": _s("The tag ID to update"),
        "name": _s("Updated name for the tag"),
    }, required=["locationId", "tagId", "name"])
    async def update_location_tag(self, args):
        path = f"/locations/{args['locationId']}/tags/{args['tagId']}"
        tag = unwrap(await self.client.put(path, {"name": args["name"]}), "tag", required=True)
        return {"success": True, "tag": tag, "message": "Location tag updated successfully"}

    @tool("delete_location_tag", "Delete a location tag", {
        "locationId": LOC,
        "tagId": _s("The tag ID to delete"),
    }, required=["locationId", "tagId"])
    async def delete_location_tag(self, args):
        unwrap(await self.client.delete(f"/locations/{args['locationId']}/tags/{args['tagId']}"))
        return {"success": True, "message": "Location tag deleted successfully"}

    # ── tasks ────────────────────────────────────────────────
    @tool("search_location_tasks", "Search tasks within a location with advanced filtering", {
        "locationId": _s("The location ID to search tasks in"),
        "contactId": {"type": "array", "items": {"type": "string"}, "description": "Filter by specific contact IDs"},
        "completed": {"type": "boolean", "description": "Filter by completion status"},
        "assignedTo": {"type": "array", "items": {"type": "string"}, "description": "Filter by assigned user IDs"},
        "query": _s("Search query for task content"),
        "limit": _n("Maximum number of tasks to return (default: 25)", 25),
        "skip": _n("Number of tasks to skip for pagination (default: 0)", 0),
        "businessId": _s("Business ID filter"),
    }, required=["locationId"])
    async def search_location_tasks(self, args):
        path = f"/locations/{args['locationId']}/tasks/search"
        tasks = unwrap(await self.client.post(path, without(args, "locationId")), "tasks", default=[])
        return {"success": True, "tasks": tasks, "message": f"Found {len(tasks)} tasks"}

    # ── custom fields ────────────────────────────────────────
    @tool("get_location_custom_fields", "Get custom fields for a location, optionally filtered by model type", {
        "locationId": LOC,
        "model": {"type": "string", "enum": ["contact", "opportunity", "all"],
                  "description": "Filter by model type (default: all)", "default": "all"},
    }, required=["locationId"])
    async def get_location_custom_fields(self, args):
        path = f"/locations/{args['locationId']}/customFields"
        fields = unwrap(await self.client.get(path, pick(args, "model")), "customFields", default=[])
        return {"success": True, "customFields": fields, "message": f"Retrieved {len(fields)} custom fields"}

    @tool("create_location_custom_field", "Create a new custom field for a location", {
        "locationId": LOC,
        "name": _s("Name of the custom field"),
        "dataType": _s("Data type of the field (TEXT, NUMBER, DATE, etc.)"),
        "placeholder": _s("Placeholder text for the field"),
        "model": {"type": "string", "enum": ["contact", "opportunity"], "description": "Model to create the field for",
                  "default": "contact"},
        "position": _n("Position/order of the field (default: 0)", 0),
    }, required=["locationId", "name", "dataType"], action="create custom field")
    async def create_location_custom_field(self, args):
        path = f"/locations/{args['locationId']}/customFields"
        field = unwrap(await self.client.post(path, without(args, "locationId")), "customField", required=True)
        return {"success": True, "customField": field, "message": f"Custom field \"{args['name']}\" created successfully"}

    @tool("get_location_custom_field", "Get a specific custom field by ID", {
        "locationId": LOC,
        "customFieldId": _s("The custom field ID to retrieve"),
    }, required=["locationId", "customFieldId"], action="get custom field")
    async def get_location_custom_field(self, args):
        path = f"/locations/{args['locationId']}/customFields/{args['customFieldId']}"
        field = unwrap(await self.client.get(path), "customField", required=True)
        return {"success": True, "customField": field, "message": "Custom field retrieved successfully"}

    @tool("update_location_custom_field", "Update an existing custom field", {
        "locationId": LOC,
        "customFieldId": _s("The custom field ID to update"),
        "name": _s("Updated name of the custom field"),
        "placeholder": _s("Updated placeholder text"),
        "position": _n("Updated position/order"),
    }, required=["locationId", "customFieldId", "name"], action="update custom field")
    async def update_location_custom_field(self, args):
        path = f"/locations/{args['locationId']}/customFields/{args['customFieldId']}"
        field = unwrap(await self.client.put(path, without(args, "locationId", "customFieldId")), "customField", required=True)
        return {"success": True, "customField": field, "message": "Custom field updated successfully"}

    @tool("delete_location_custom_field", "Delete a custom field from a location", {
        "locationId": LOC,
        "customFieldId": _s("The custom field ID to delete"),
    }, required=["locationId", "customFieldId"], action="delete custom field")
    async def delete_location_custom_field(self, args):
        unwrap(await self.client.delete(f"/locations/{args['locationId']}/customFields/{args['customFieldId']}"))
        return {"success": True, "message": "Custom field deleted successfully"}

    # ── custom values ────────────────────────────────────────
    @tool("get_location_custom_values", "Get all custom values for a location",
          {"locationId": LOC}, required=["locationId"], action="get custom values")
    async def get_location_custom_values(self, args):
        path = f"/locations/{args['locationId']}/customValues"
        values = unwrap(await self.client.get(path), "customValues", default=[])
        return {"success": True, "customValues": values, "message": f"Retrieved {len(values)} custom values"}

    @tool("create_location_custom_value", "Create a new custom value for a location", {
        "locationId": LOC,
        "name": _s("Name of the custom value field"),
        "value": _s("Value to assign"),
    }, required=["locationId", "name", "value"], action="create custom value")
    async def create_location_custom_value(self, args):
        path = f"/locations/{args['locationId']}/customValues"
        value = unwrap(await self.client.post(path, pick(args, "name", "value")), "customValue", required=True)
        return {"success": True, "customValue": value, "message": f"Custom value \"{args['name']}\" created successfully"}

    @tool("get_location_custom_value", "Get a specific custom value by ID", {
        "locationId": LOC,
        "customValueId": _s("The custom value ID to retrieve"),
    }, required=["locationId", "customValueId"], action="get custom value")
    async def get_location_custom_value(self, args):
        path = f"/locations/{args['locationId']}/customValues/{args['customValueId']}"
        value = unwrap(await self.client.get(path), "customValue", required=True)
        return {"success": True, "customValue": value, "message": "Custom value retrieved successfully"}

    @tool("update_location_custom_value", "Update an existing custom value", {
        "locationId": LOC,
        "customValueId": _s("The custom value ID to update"),
        "name": _s("Updated name"),
        "value": _s("Updated value"),
    }, required=["locationId", "customValueId", "name", "value"], action="update custom value")
    async def update_location_custom_value(self, args):
        path = f"/locations/{args['locationId']}/customValues/{args['customValueId']}"
        value = unwrap(await self.client.put(path, pick(args, "name", "value")), "customValue", required=True)
        return {"success": True, "customValue": value, "message": "Custom value updated successfully"}

    @tool("delete_location_custom_value", "Delete a custom value from a location", {
        "locationId": LOC,
        "customValueId": _s("The custom value ID to delete"),
    }, required=["locationId", "customValueId"], action="delete custom value")
    async def delete_location_custom_value(self, args):
        unwrap(await self.client.delete(f"/locations/{args['locationId']}/customValues/{args['customValueId']}"))
        return {"success": True, "message": "Custom value deleted successfully"}

    # ── templates & timezones ────────────────────────────────
    @tool("get_location_templates", "Get SMS/Email templates for a location", {
        "locationId": LOC,
        "originId": _s("Origin ID (required parameter)"),
        "deleted": {"type": "boolean", "description": "Include deleted templates (default: false)", "default": False},
        "skip": _n("Number to skip for pagination (default: 0)", 0),
        "limit": _n("Maximum number to return (default: 25)", 25),
        "type": {"type": "string", "enum": ["sms", "email", "whatsapp"], "description": "Filter by template type"},
    }, required=["locationId", "originId"])
    async def get_location_templates(self, args):
        params = pick(args, "originId", "type", defaults={"deleted": False, "skip": 0, "limit": 25})
        params["deleted"] = "true" if params["deleted"] else "false"
        data = unwrap(await self.client.get(f"/locations/{args['locationId']}/templates", params))
        templates = data.get("templates") or []
        total = data.get("totalCount") or len(templates)
        return {
            "success": True,
            "templates": templates,
            "totalCount": total,
            "message": f"Retrieved {len(templates)} templates ({total} total)",
        }

    @tool("delete_location_template", "Delete a template from a location", {
        "locationId": LOC,
        "templateId": _s("The template ID to delete"),
    }, required=["locationId", "templateId"], action="delete template")
    async def delete_location_template(self, args):
        await self.client.delete(f"/locations/{args['locationId']}/templates/{args['templateId']}")
        return {"success": True, "message": "Template deleted successfully"}

    @tool("get_timezones", "Get available timezones for location configuration", {
        "locationId": _s("Optional location ID"),
    }, location=False)
    async def get_timezones(self, args):
        path = f"/locations/{args['locationId']}/timezones" if args.get("locationId") else "/locations/timezones"
        data = unwrap(await self.client.get(path))
        timezones = data if isinstance(data, list) else data.get("timeZones") or data.get("timezones") or []
        return {"success": True, "timezones": timezones,
                "message": f"Retrieved {len(timezones)} available timezones"}
