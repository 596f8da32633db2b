# oauth.py  –  OAuth apps, location tokens, integrations and API keys
#
# Results are the upstream payload unchanged.

from ..marshal import passthrough, pick, truthy
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "Location ID"}


def _s(description):
    return {"type": "string", "description": description}


def _labels(access):
    return {"category": "oauth", "access": access, "complexity": "simple"}


READ, WRITE, DELETE = _labels("read"), _labels("write"), _labels("delete")


class OAuthTools(ToolModule):

    # ── apps ─────────────────────────────────────────────────
    @tool("get_oauth_apps", "Get all OAuth applications/integrations for a location", {
        "locationId": LOCATION,
        "companyId": _s("Company ID for agency-level apps"),
    }, labels=READ, action="get OAuth apps")
    async def get_oauth_apps(self, args):
        return passthrough(await self.client.get("/oauth/apps", pick(args, "locationId", "companyId")))

    @tool("get_oauth_app", "Get a specific OAuth application by ID", {
        "appId": _s("OAuth App ID"),
        "locationId": LOCATION,
    }, required=["appId"], labels=READ, action="get OAuth app")
    async def get_oauth_app(self, args):
        return passthrough(await self.client.get(f"/oauth/apps/{args['appId']}", pick(args, "locationId")))

    @tool("get_installed_locations", "Get all locations where an OAuth app is installed", {
        "appId": _s("OAuth App ID"),
        "companyId": _s("Company ID"),
        "skip": {"type": "number", "description": "Records to skip"},
        "limit": {"type": "number", "description": "Max results"},
        "query": _s("Search query"),
        "isInstalled": {"type": "boolean", "description": "Filter by installation status"},
    }, required=["appId", "companyId"], labels=READ)
    async def get_installed_locations(self, args):
        params = {**pick(args, "appId", "companyId"), **truthy(args, "skip", "limit", "query")}
        if "isInstalled" in args:
            params["isInstalled"] = str(bool(args["isInstalled"])).lower()
        return passthrough(await self.client.get("/oauth/installedLocations", params))

    # ── tokens ───────────────────────────────────────────────
    @tool("get_access_token_info", "Get information about the current access token", {}, labels=READ)
    async def get_access_token_info(self, args):
        return passthrough(await self.client.get("/oauth/locationToken"))

    @tool("get_location_access_token", "Get an access token for a specific location (agency use)", {
        "companyId": _s("Company/Agency ID"),
        "locationId": _s("Target Location ID"),
    }, required=["companyId", "locationId"], location=False, labels=READ)
    async def get_location_access_token(self, args):
        return passthrough(await self.client.post("/oauth/locationToken", pick(args, "companyId", "locationId")))

    # ── integrations ─────────────────────────────────────────
    @tool("get_connected_integrations", "Get all connected third-party integrations for a location", {
        "locationId": LOCATION,
    }, labels=READ)
    async def get_connected_integrations(self, args):
        return passthrough(await self.client.get("/integrations/connected", pick(args, "locationId")))

    @tool("disconnect_integration", "Disconnect a third-party integration", {
        "integrationId": _s("Integration ID to disconnect"),
        "locationId": LOCATION,
    }, required=["integrationId"], labels=DELETE)
    async def disconnect_integration(self, args):
        path = f"/integrations/{args['integrationId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── API keys ─────────────────────────────────────────────
    @tool("get_api_keys", "List all API keys for a location", {"locationId": LOCATION},
          labels=READ, action="get API keys")
    async def get_api_keys(self, args):
        return passthrough(await self.client.get("/oauth/api-keys", pick(args, "locationId")))

    @tool("create_api_key", "Create a new API key", {
        "locationId": LOCATION,
        "name": _s("API key name/label"),
        "scopes": {"type": "array", "items": {"type": "string"}, "description": "Permission scopes for the key"},
    }, required=["name"], labels=WRITE, action="create API key")
    async def create_api_key(self, args):
        return passthrough(await self.client.post("/oauth/api-keys", pick(args, "locationId", "name", "scopes")))

    @tool("delete_api_key", "Delete/revoke an API key", {
        "keyId": _s("API Key ID"),
        "locationId": LOCATION,
    }, required=["keyId"], labels=DELETE, action="delete API key")
    async def delete_api_key(self, args):
        path = f"/oauth/api-keys/{args['keyId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))
