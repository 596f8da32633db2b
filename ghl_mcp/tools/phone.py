# phone.py  –  phone numbers, call forwarding, IVR menus, voicemail and
#               caller IDs
#
# Results are the upstream payload unchanged.  Update bodies always carry the
# location; empty strings and unset flags are left out.

from ..marshal import passthrough, pick, truthy
from .base import ToolModule, tool

LOCATION = {"type": "string", "description": "Location ID"}


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _b(description):
    return {"type": "boolean", "description": description}


def _labels(access, complexity="simple"):
    return {"category": "phone-numbers", "access": access, "complexity": complexity}


def _body(args, *fields):
    """locationId plus the fields that carry a value (False counts, "" does not)."""
    body = {"locationId": args["locationId"]}
    for field in fields:
        value = args.get(field)
        if value is None or value == "":
            continue
        body[field] = value
    return body


def _number(description="Phone Number ID"):
    return {"phoneNumberId": _s(description), "locationId": LOCATION}


class PhoneTools(ToolModule):

    # ── numbers ──────────────────────────────────────────────
    @tool("get_phone_numbers", "Get all phone numbers for a location", {"locationId": LOCATION},
          labels=_labels("read"))
    async def get_phone_numbers(self, args):
        return passthrough(await self.client.get("/phone-numbers/", pick(args, "locationId")))

    @tool("get_phone_number", "Get a specific phone number by ID", _number(),
          required=["phoneNumberId"], labels=_labels("read"))
    async def get_phone_number(self, args):
        path = f"/phone-numbers/{args['phoneNumberId']}"
        return passthrough(await self.client.get(path, pick(args, "locationId")))

    @tool("search_available_numbers", "Search for available phone numbers to purchase", {
        "locationId": LOCATION,
        "country": _s("Country code (e.g., US, CA)"),
        "areaCode": _s("Area code to search"),
        "contains": _s("Number pattern to search for"),
        "type": _s("Number type", enum=["local", "tollfree", "mobile"]),
    }, required=["country"], labels=_labels("read"))
    async def search_available_numbers(self, args):
        params = pick(args, "locationId", "country", "areaCode", "contains", "type")
        return passthrough(await self.client.get("/phone-numbers/available", params))

    @tool("purchase_phone_number", "Purchase a phone number", {
        "locationId": LOCATION,
        "phoneNumber": _s("Phone number to purchase"),
        "name": _s("Friendly name for the number"),
    }, required=["phoneNumber"], labels=_labels("write"))
    async def purchase_phone_number(self, args):
        return passthrough(await self.client.post("/phone-numbers/", pick(args, "locationId", "phoneNumber", "name")))

    @tool("update_phone_number", "Update phone number settings", {
        **_number(),
        "name": _s("Friendly name"),
        "forwardingNumber": _s("Number to forward calls to"),
        "callRecording": _b("Enable call recording"),
        "whisperMessage": _s("Whisper message played to agent"),
    }, required=["phoneNumberId"], labels=_labels("write"))
    async def update_phone_number(self, args):
        body = _body(args, "name", "forwardingNumber", "callRecording", "whisperMessage")
        return passthrough(await self.client.put(f"/phone-numbers/{args['phoneNumberId']}", body))

    @tool("release_phone_number", "Release/delete a phone number", _number(),
          required=["phoneNumberId"], labels=_labels("delete"))
    async def release_phone_number(self, args):
        path = f"/phone-numbers/{args['phoneNumberId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── forwarding ───────────────────────────────────────────
    @tool("get_call_forwarding_settings", "Get call forwarding configuration", _number(),
          required=["phoneNumberId"], labels=_labels("read"))
    async def get_call_forwarding_settings(self, args):
        path = f"/phone-numbers/{args['phoneNumberId']}/forwarding"
        return passthrough(await self.client.get(path, pick(args, "locationId")))

    @tool("update_call_forwarding", "Update call forwarding settings", {
        **_number(),
        "enabled": _b("Enable forwarding"),
        "forwardTo": _s("Number to forward to"),
        "ringTimeout": {"type": "number", "description": "Ring timeout in seconds"},
        "voicemailEnabled": _b("Enable voicemail on no answer"),
    }, required=["phoneNumberId"], labels=_labels("write", "batch"))
    async def update_call_forwarding(self, args):
        body = {**_body(args, "enabled", "forwardTo", "voicemailEnabled"), **truthy(args, "ringTimeout")}
        path = f"/phone-numbers/{args['phoneNumberId']}/forwarding"
        return passthrough(await self.client.put(path, body))

    # ── IVR ──────────────────────────────────────────────────
    @tool("get_ivr_menus", "Get all IVR/call menus", {"locationId": LOCATION},
          labels=_labels("read"), action="get IVR menus")
    async def get_ivr_menus(self, args):
        return passthrough(await self.client.get("/phone-numbers/ivr", pick(args, "locationId")))

    @tool("create_ivr_menu", "Create an IVR/call menu", {
        "locationId": LOCATION,
        "name": _s("Menu name"),
        "greeting": _s("Greeting message (text or URL)"),
        "options": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "digit": _s("Digit to press (0-9, *, #)"),
                    "action": _s("Action type"),
                    "destination": _s("Action destination"),
                },
            },
            "description": "Menu options",
        },
    }, required=["name", "greeting"], labels=_labels("write"), action="create IVR menu")
    async def create_ivr_menu(self, args):
        body = pick(args, "locationId", "name", "greeting", "options")
        return passthrough(await self.client.post("/phone-numbers/ivr", body))

    @tool("update_ivr_menu", "Update an IVR menu", {
        "menuId": _s("IVR Menu ID"),
        "locationId": LOCATION,
        "name": _s("Menu name"),
        "greeting": _s("Greeting message"),
        "options": {"type": "array", "description": "Menu options"},
    }, required=["menuId"], labels=_labels("write"), action="update IVR menu")
    async def update_ivr_menu(self, args):
        body = _body(args, "name", "greeting", "options")
        return passthrough(await self.client.put(f"/phone-numbers/ivr/{args['menuId']}", body))

    @tool("delete_ivr_menu", "Delete an IVR menu", {
        "menuId": _s("IVR Menu ID"),
        "locationId": LOCATION,
    }, required=["menuId"], labels=_labels("delete"), action="delete IVR menu")
    async def delete_ivr_menu(self, args):
        path = f"/phone-numbers/ivr/{args['menuId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── voicemail ────────────────────────────────────────────
    @tool("get_voicemail_settings", "Get voicemail settings", {"locationId": LOCATION}, labels=_labels("read"))
    async def get_voicemail_settings(self, args):
        return passthrough(await self.client.get("/phone-numbers/voicemail/settings", pick(args, "locationId")))

    @tool("update_voicemail_settings", "Update voicemail settings", {
        "locationId": LOCATION,
        "enabled": _b("Enable voicemail"),
        "greeting": _s("Voicemail greeting (text or URL)"),
        "transcriptionEnabled": _b("Enable transcription"),
        "notificationEmail": _s("Email for voicemail notifications"),
    }, labels=_labels("write"))
    async def update_voicemail_settings(self, args):
        body = _body(args, "enabled", "greeting", "transcriptionEnabled", "notificationEmail")
        return passthrough(await self.client.put("/phone-numbers/voicemail/settings", body))

    @tool("get_voicemails", "Get voicemail messages", {
        "locationId": LOCATION,
        "phoneNumberId": _s("Filter by phone number"),
        "status": _s("Filter by status", enum=["new", "read", "archived"]),
        "limit": {"type": "number", "description": "Max results"},
        "offset": {"type": "number", "description": "Pagination offset"},
    }, labels=_labels("read"))
    async def get_voicemails(self, args):
        params = {**pick(args, "locationId", "phoneNumberId", "status"), **truthy(args, "limit", "offset")}
        return passthrough(await self.client.get("/phone-numbers/voicemail", params))

    @tool("delete_voicemail", "Delete a voicemail message", {
        "voicemailId": _s("Voicemail ID"),
        "locationId": LOCATION,
    }, required=["voicemailId"], labels=_labels("delete"))
    async def delete_voicemail(self, args):
        path = f"/phone-numbers/voicemail/{args['voicemailId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))

    # ── caller IDs ───────────────────────────────────────────
    @tool("get_caller_ids", "Get verified caller IDs", {"locationId": LOCATION},
          labels=_labels("read"), action="get caller IDs")
    async def get_caller_ids(self, args):
        return passthrough(await self.client.get("/phone-numbers/caller-id", pick(args, "locationId")))

    @tool("add_caller_id", "Add a caller ID for verification", {
        "locationId": LOCATION,
        "phoneNumber": _s("Phone number to verify"),
        "name": _s("Friendly name"),
    }, required=["phoneNumber"], labels=_labels("write"), action="add caller ID")
    async def add_caller_id(self, args):
        body = pick(args, "locationId", "phoneNumber", "name")
        return passthrough(await self.client.post("/phone-numbers/caller-id", body))

    @tool("verify_caller_id", "Submit verification code for caller ID", {
        "callerIdId": _s("Caller ID record ID"),
        "locationId": LOCATION,
        "code": _s("Verification code"),
    }, required=["callerIdId", "code"], labels=_labels("write"), action="verify caller ID")
    async def verify_caller_id(self, args):
        path = f"/phone-numbers/caller-id/{args['callerIdId']}/verify"
        return passthrough(await self.client.post(path, pick(args, "locationId", "code")))

    @tool("delete_caller_id", "Delete a caller ID", {
        "callerIdId": _s("Caller ID record ID"),
        "locationId": LOCATION,
    }, required=["callerIdId"], labels=_labels("delete"), action="delete caller ID")
    async def delete_caller_id(self, args):
        path = f"/phone-numbers/caller-id/{args['callerIdId']}"
        return passthrough(await self.client.delete(path, params=pick(args, "locationId")))
