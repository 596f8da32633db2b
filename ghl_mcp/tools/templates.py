# templates.py  –  SMS, voicemail drop, social and WhatsApp templates, plus
#                  canned-response snippets; everything under /templates/*

from ..marshal import passthrough, pick, truthy
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "Location ID"}
PAGE = {
    "limit": {"type": "number", "description": "Max results"},
    "offset": {"type": "number", "description": "Pagination offset"},
}


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _by_id(key="templateId", description="Template ID"):
    return {key: _s(description), "locationId": LOCATION}


class TemplateTools(ToolModule):

    async def _list(self, kind, args, *filters):
        params = {"locationId": args["locationId"], **truthy(args, *filters)}
        return passthrough(await self.client.get(f"/templates/{kind}", params))

    async def _delete(self, kind, item_id, args):
        path = f"/templates/{kind}/{item_id}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── SMS ──────────────────────────────────────────────────
    @tool("get_sms_templates", "Get all SMS templates", {"locationId": LOCATION, **PAGE},
          action="get SMS templates")
    async def get_sms_templates(self, args):
        return await self._list("sms", args, "limit", "offset")

    @tool("get_sms_template", "Get a specific SMS template", _by_id(description="SMS Template ID"),
          required=["templateId"], action="get SMS template")
    async def get_sms_template(self, args):
        path = f"/templates/sms/{args['templateId']}"
        return passthrough(await self.client.get(path, pick(args, "locationId")))

    @tool("create_sms_template", "Create a new SMS template", {
        "locationId": LOCATION,
        "name": _s("Template name"),
        "body": _s("SMS message body (can include merge fields like {{contact.first_name}})"),
    }, required=["name", "body"], action="create SMS template")
    async def create_sms_template(self, args):
        return passthrough(await self.client.post("/templates/sms", pick(args, "locationId", "name", "body")))

    @tool("update_sms_template", "Update an SMS template", {
        **_by_id(description="SMS Template ID"),
        "name": _s("Template name"),
        "body": _s("SMS message body"),
    }, required=["templateId"], action="update SMS template")
    async def update_sms_template(self, args):
        body = {"locationId": args["locationId"], **truthy(args, "name", "body")}
        return passthrough(await self.client.put(f"/templates/sms/{args['templateId']}", body))

    @tool("delete_sms_template", "Delete an SMS template", _by_id(description="SMS Template ID"),
          required=["templateId"], action="delete SMS template")
    async def delete_sms_template(self, args):
        return await self._delete("sms", args["templateId"], args)

    # ── voicemail drops ──────────────────────────────────────
    @tool("get_voicemail_templates", "Get all voicemail drop templates", {"locationId": LOCATION})
    async def get_voicemail_templates(self, args):
        return await self._list("voicemail", args)

    @tool("create_voicemail_template", "Create a voicemail drop template", {
        "locationId": LOCATION,
        "name": _s("Template name"),
        "audioUrl": _s("URL to audio file"),
    }, required=["name", "audioUrl"])
    async def create_voicemail_template(self, args):
        body = pick(args, "locationId", "name", "audioUrl")
        return passthrough(await self.client.post("/templates/voicemail", body))

    @tool("delete_voicemail_template", "Delete a voicemail template", _by_id(), required=["templateId"])
    async def delete_voicemail_template(self, args):
        return await self._delete("voicemail", args["templateId"], args)

    # ── social ───────────────────────────────────────────────
    @tool("get_social_templates", "Get social media post templates", {"locationId": LOCATION, **PAGE})
    async def get_social_templates(self, args):
        return await self._list("social", args, "limit", "offset")

    @tool("create_social_template", "Create a social media post template", {
        "locationId": LOCATION,
        "name": _s("Template name"),
        "content": _s("Post content"),
        "mediaUrls": {"type": "array", "items": {"type": "string"}, "description": "Media URLs"},
        "platforms": {"type": "array", "items": {"type": "string"}, "description": "Target platforms"},
    }, required=["name", "content"])
    async def create_social_template(self, args):
        body = pick(args, "locationId", "name", "content", "mediaUrls", "platforms")
        return passthrough(await self.client.post("/templates/social", body))

    @tool("delete_social_template", "Delete a social template", _by_id(), required=["templateId"])
    async def delete_social_template(self, args):
        return await self._delete("social", args["templateId"], args)

    # ── WhatsApp ─────────────────────────────────────────────
    @tool("get_whatsapp_templates", "Get WhatsApp message templates (must be pre-approved)", {
        "locationId": LOCATION,
        "status": _s("Template status", enum=["approved", "pending", "rejected", "all"]),
    }, action="get WhatsApp templates")
    async def get_whatsapp_templates(self, args):
        return await self._list("whatsapp", args, "status")

    @tool("create_whatsapp_template", "Create a WhatsApp template (submits for approval)", {
        "locationId": LOCATION,
        "name": _s("Template name"),
        "category": _s("Template category", enum=["marketing", "utility", "authentication"]),
        "language": _s("Language code (e.g., en_US)"),
        "components": {"type": "array", "description": "Template components (header, body, footer, buttons)"},
    }, required=["name", "category", "language", "components"], action="create WhatsApp template")
    async def create_whatsapp_template(self, args):
        body = pick(args, "locationId", "name", "category", "language", "components")
        return passthrough(await self.client.post("/templates/whatsapp", body))

    @tool("delete_whatsapp_template", "Delete a WhatsApp template", _by_id(), required=["templateId"],
          action="delete WhatsApp template")
    async def delete_whatsapp_template(self, args):
        return await self._delete("whatsapp", args["templateId"], args)

    # ── snippets ─────────────────────────────────────────────
    @tool("get_snippets", "Get canned response snippets", {
        "locationId": LOCATION,
        "type": _s("Snippet type", enum=["sms", "email", "all"]),
    })
    async def get_snippets(self, args):
        return await self._list("snippets", args, "type")

    @tool("create_snippet", "Create a canned response snippet", {
        "locationId": LOCATION,
        "name": _s("Snippet name"),
        "shortcut": _s("Keyboard shortcut (e.g., /thanks)"),
        "content": _s("Snippet content"),
        "type": _s("Snippet type", enum=["sms", "email", "both"]),
    }, required=["name", "content"])
    async def create_snippet(self, args):
        body = pick(args, "locationId", "name", "shortcut", "content", "type")
        return passthrough(await self.client.post("/templates/snippets", body))

    @tool("update_snippet", "Update a snippet", {
        **_by_id("snippetId", "Snippet ID"),
        "name": _s("Snippet name"),
        "shortcut": _s("Keyboard shortcut"),
        "content": _s("Snippet content"),
    }, required=["snippetId"])
    async def update_snippet(self, args):
        body = {"locationId": args["locationId"], **truthy(args, "name", "shortcut", "content")}
        return passthrough(await self.client.put(f"/templates/snippets/{args['snippetId']}", body))

    @tool("delete_snippet", "Delete a snippet", _by_id("snippetId", "Snippet ID"), required=["snippetId"])
    async def delete_snippet(self, args):
        return await self._delete("snippets", args["snippetId"], args)
