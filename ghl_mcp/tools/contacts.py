# contacts.py  –  contacts, tags, tasks, notes, followers, campaigns, workflows

from typing import Any, Dict

from ..marshal import compact, pick, unwrap
from .base import ToolModule, tool

CONTACT_ID = {"type": "string", "description": "Contact ID"}
TASK_ID = {"type": "string", "description": "Task ID"}
NOTE_ID = {"type": "string", "description": "Note ID"}
FIRST_NAME = {"type": "string", "description": "Contact first name"}
LAST_NAME = {"type": "string", "description": "Contact last name"}
EMAIL = {"type": "string", "description": "Contact email address"}
PHONE = {"type": "string", "description": "Contact phone number"}
TAGS = {"type": "array", "items": {"type": "string"}, "description": "Tags to assign to contact"}
SOURCE = {"type": "string", "description": "Source of the contact"}
CONTACT_IDS = {"type": "array", "items": {"type": "string"}, "description": "Array of contact IDs"}
EVENT_START = {"type": "string", "description": "Event start time (ISO format)"}

SEARCH_PAGE_LIMIT = 25


def _task_fields(args: Dict[str, Any]) -> Dict[str, Any]:
    return pick(args, "title", "body", "dueDate", "completed", "assignedTo")


class ContactTools(ToolModule):
    domain = "contact"

    # ── basic contact management ─────────────────────────────
    @tool("create_contact", "Create a new contact in GoHighLevel", {
        "firstName": FIRST_NAME,
        "lastName": LAST_NAME,
        "email": EMAIL,
        "phone": PHONE,
        "tags": TAGS,
        "source": SOURCE,
    }, required=["email"], location=True)
    async def create_contact(self, args):
        body = pick(args, "locationId", "firstName", "lastName", "email", "phone", "tags", "source")
        contact = unwrap(await self.client.post("/contacts/", body), "contact", required=True)
        return {"success": True, "contact": contact, "message": "Contact created successfully"}

    @tool("search_contacts", "Search for contacts with advanced filtering options", {
        "query": {"type": "string", "description": "Search query string"},
        "email": {"type": "string", "description": "Filter by email address"},
        "phone": {"type": "string", "description": "Filter by phone number"},
        "limit": {"type": "number", "description": "Maximum number of results (default: 25)"},
    }, location=True)
    async def search_contacts(self, args):
        body: Dict[str, Any] = {
            "locationId": args["locationId"],
            "pageLimit": args.get("limit") or SEARCH_PAGE_LIMIT,
        }
        query = (args.get("query") or "").strip()
        if query:
            body["query"] = query
        filters = {k: args[k].strip() for k in ("email", "phone")
                   if isinstance(args.get(k), str) and args[k].strip()}
        if filters:
            body["filters"] = filters
        data = unwrap(await self.client.post("/contacts/search", body))
        contacts = data.get("contacts", [])
        return {
            "success": True,
            "contacts": contacts,
            "total": data.get("total", len(contacts)),
            "message": f"Found {len(contacts)} contacts",
        }

    @tool("get_contact", "Get detailed information about a specific contact",
          {"contactId": CONTACT_ID}, required=["contactId"])
    async def get_contact(self, args):
        contact = unwrap(await self.client.get(f"/contacts/{args['contactId']}"), "contact", required=True)
        return {"success": True, "contact": contact, "message": "Contact retrieved successfully"}

    @tool("update_contact", "Update contact information", {
        "contactId": CONTACT_ID,
        "firstName": FIRST_NAME,
        "lastName": LAST_NAME,
        "email": EMAIL,
        "phone": PHONE,
        "tags": TAGS,
    }, required=["contactId"])
    async def update_contact(self, args):
        body = pick(args, "firstName", "lastName", "email", "phone", "tags")
        contact = unwrap(await self.client.put(f"/contacts/{args['contactId']}", body), "contact", required=True)
        return {"success": True, "contact": contact, "message": "Contact updated successfully"}

    @tool("delete_contact", "Delete a contact from GoHighLevel",
          {"contactId": CONTACT_ID}, required=["contactId"])
    async def delete_contact(self, args):
        data = unwrap(await self.client.delete(f"/contacts/{args['contactId']}"))
        return {"success": True, "result": data, "message": f"Contact {args['contactId']} deleted successfully"}

    @tool("add_contact_tags", "Add tags to a contact", {
        "contactId": CONTACT_ID,
        "tags": {"type": "array", "items": {"type": "string"}, "description": "Tags to add"},
    }, required=["contactId", "tags"])
    async def add_contact_tags(self, args):
        data = unwrap(await self.client.post(f"/contacts/{args['contactId']}/tags", {"tags": args["tags"]}))
        return {"success": True, "tags": data.get("tags", []), "message": f"Added {len(args['tags'])} tags"}

    @tool("remove_contact_tags", "Remove tags from a contact", {
        "contactId": CONTACT_ID,
        "tags": {"type": "array", "items": {"type": "string"}, "description": "Tags to remove"},
    }, required=["contactId", "tags"])
    async def remove_contact_tags(self, args):
        data = unwrap(await self.client.delete(f"/contacts/{args['contactId']}/tags", json={"tags": args["tags"]}))
        return {"success": True, "tags": data.get("tags", []), "message": f"Removed {len(args['tags'])} tags"}

    # ── tasks ────────────────────────────────────────────────
    @tool("get_contact_tasks", "Get all tasks for a contact",
          {"contactId": CONTACT_ID}, required=["contactId"])
    async def get_contact_tasks(self, args):
        tasks = unwrap(await self.client.get(f"/contacts/{args['contactId']}/tasks"), "tasks", default=[])
        return {"success": True, "tasks": tasks, "message": f"Retrieved {len(tasks)} tasks"}

    @tool("create_contact_task", "Create a new task for a contact", {
        "contactId": CONTACT_ID,
        "title": {"type": "string", "description": "Task title"},
        "body": {"type": "string", "description": "Task description"},
        "dueDate": {"type": "string", "description": "Due date (ISO format)"},
        "completed": {"type": "boolean", "description": "Task completion status"},
        "assignedTo": {"type": "string", "description": "User ID to assign task to"},
    }, required=["contactId", "title", "dueDate"])
    async def create_contact_task(self, args):
        body = _task_fields({**args, "completed": bool(args.get("completed"))})
        task = unwrap(await self.client.post(f"/contacts/{args['contactId']}/tasks", body), "task", required=True)
        return {"success": True, "task": task, "message": f"Task \"{args['title']}\" created successfully"}

    @tool("get_contact_task", "Get a specific task for a contact",
          {"contactId": CONTACT_ID, "taskId": TASK_ID}, required=["contactId", "taskId"])
    async def get_contact_task(self, args):
        task = unwrap(await self.client.get(f"/contacts/{args['contactId']}/tasks/{args['taskId']}"), "task", required=True)
        return {"success": True, "task": task, "message": "Task retrieved successfully"}

    @tool("update_contact_task", "Update a task for a contact", {
        "contactId": CONTACT_ID,
        "taskId": TASK_ID,
        "title": {"type": "string", "description": "Task title"},
        "body": {"type": "string", "description": "Task description"},
        "dueDate": {"type": "string", "description": "Due date (ISO format)"},
        "completed": {"type": "boolean", "description": "Task completion status"},
        "assignedTo": {"type": "string", "description": "User ID to assign task to"},
    }, required=["contactId", "taskId"])
    async def update_contact_task(self, args):
        path = f"/contacts/{args['contactId']}/tasks/{args['taskId']}"
        task = unwrap(await self.client.put(path, _task_fields(args)), "task", required=True)
        return {"success": True, "task": task, "message": "Task updated successfully"}

    @tool("delete_contact_task", "Delete a task for a contact",
          {"contactId": CONTACT_ID, "taskId": TASK_ID}, required=["contactId", "taskId"])
    async def delete_contact_task(self, args):
        data = unwrap(await self.client.delete(f"/contacts/{args['contactId']}/tasks/{args['taskId']}"))
        return {"success": True, "result": data, "message": "Task deleted successfully"}

    @tool("update_task_completion", "Update task completion status", {
        "contactId": CONTACT_ID,
        "taskId": TASK_ID,
        "completed": {"type": "boolean", "description": "Completion status"},
    }, required=["contactId", "taskId", "completed"])
    async def update_task_completion(self, args):
        path = f"/contacts/{args['contactId']}/tasks/{args['taskId']}/completed"
        task = unwrap(await self.client.put(path, {"completed": args["completed"]}), "task", required=True)
        state = "completed" if args["completed"] else "not completed"
        return {"success": True, "task": task, "message": f"Task marked as {state}"}

    # ── notes ────────────────────────────────────────────────
    @tool("get_contact_notes", "Get all notes for a contact",
          {"contactId": CONTACT_ID}, required=["contactId"])
    async def get_contact_notes(self, args):
        notes = unwrap(await self.client.get(f"/contacts/{args['contactId']}/notes"), "notes", default=[])
        return {"success": True, "notes": notes, "message": f"Retrieved {len(notes)} notes"}

    @tool("create_contact_note", "Create a new note for a contact", {
        "contactId": CONTACT_ID,
        "body": {"type": "string", "description": "Note content"},
        "userId": {"type": "string", "description": "User ID creating the note"},
    }, required=["contactId", "body"])
    async def create_contact_note(self, args):
        note = unwrap(await self.client.post(f"/contacts/{args['contactId']}/notes",
                                             pick(args, "body", "userId")), "note", required=True)
        return {"success": True, "note": note, "message": "Note created successfully"}

    @tool("get_contact_note", "Get a specific note for a contact",
          {"contactId": CONTACT_ID, "noteId": NOTE_ID}, required=["contactId", "noteId"])
    async def get_contact_note(self, args):
        note = unwrap(await self.client.get(f"/contacts/{args['contactId']}/notes/{args['noteId']}"), "note", required=True)
        return {"success": True, "note": note, "message": "Note retrieved successfully"}

    @tool("update_contact_note", "Update a note for a contact", {
        "contactId": CONTACT_ID,
        "noteId": NOTE_ID,
        "body": {"type": "string", "description": "Note content"},
        "userId": {"type": "string", "description": "User ID updating the note"},
    }, required=["contactId", "noteId", "body"])
    async def update_contact_note(self, args):
        path = f"/contacts/{args['contactId']}/notes/{args['noteId']}"
        note = unwrap(await self.client.put(path, pick(args, "body", "userId")), "note", required=True)
        return {"success": True, "note": note, "message": "Note updated successfully"}

    @tool("delete_contact_note", "Delete a note for a contact",
          {"contactId": CONTACT_ID, "noteId": NOTE_ID}, required=["contactId", "noteId"])
    async def delete_contact_note(self, args):
        data = unwrap(await self.client.delete(f"/contacts/{args['contactId']}/notes/{args['noteId']}"))
        return {"success": True, "result": data, "message": "Note deleted successfully"}

    # ── advanced operations ──────────────────────────────────
    @tool("upsert_contact", "Create or update contact based on email/phone (smart merge)", {
        "firstName": FIRST_NAME,
        "lastName": LAST_NAME,
        "email": EMAIL,
        "phone": PHONE,
        "tags": TAGS,
        "source": SOURCE,
        "assignedTo": {"type": "string", "description": "User ID to assign contact to"},
    }, location=True)
    async def upsert_contact(self, args):
        body = pick(args, "locationId", "firstName", "lastName", "name", "email", "phone", "address",
                    "city", "state", "country", "postalCode", "website", "timezone", "companyName",
                    "tags", "customFields", "source", "assignedTo", rename={"address": "address1"})
        envelope = await self.client.post("/contacts/upsert", body)
        contact = unwrap(envelope, "contact", required=True)
        is_new = bool(unwrap(envelope, "new"))
        return {
            "success": True,
            "contact": contact,
            "isNew": is_new,
            "message": "Contact created" if is_new else "Contact updated",
        }

    @tool("get_duplicate_contact", "Check for duplicate contacts by email or phone", {
        "email": {"type": "string", "description": "Email to check for duplicates"},
        "phone": {"type": "string", "description": "Phone to check for duplicates"},
    }, location=True)
    async def get_duplicate_contact(self, args):
        params = pick(args, "locationId", "email", "phone", rename={"phone": "number"})
        contact = unwrap(await self.client.get("/contacts/search/duplicate", params), "contact")
        return {
            "success": True,
            "contact": contact,
            "isDuplicate": contact is not None,
            "message": "Duplicate contact found" if contact else "No duplicate contact found",
        }

    @tool("get_contacts_by_business", "Get contacts associated with a specific business", {
        "businessId": {"type": "string", "description": "Business ID"},
        "limit": {"type": "number", "description": "Maximum number of results"},
        "skip": {"type": "number", "description": "Number of results to skip"},
        "query": {"type": "string", "description": "Search query"},
    }, required=["businessId"])
    async def get_contacts_by_business(self, args):
        params = pick(args, "query", defaults={"limit": 25, "skip": 0})
        data = unwrap(await self.client.get(f"/contacts/business/{args['businessId']}", params))
        contacts = data.get("contacts", [])
        return {"success": True, "contacts": contacts, "total": data.get("total", len(contacts)),
                "message": f"Found {len(contacts)} contacts for business"}

    @tool("get_contact_appointments", "Get all appointments for a contact",
          {"contactId": CONTACT_ID}, required=["contactId"])
    async def get_contact_appointments(self, args):
        events = unwrap(await self.client.get(f"/contacts/{args['contactId']}/appointments"), "events", default=[])
        return {"success": True, "appointments": events, "message": f"Retrieved {len(events)} appointments"}

    # ── bulk operations ──────────────────────────────────────
    @tool("bulk_update_contact_tags", "Bulk add or remove tags from multiple contacts", {
        "contactIds": CONTACT_IDS,
        "tags": {"type": "array", "items": {"type": "string"}, "description": "Tags to add or remove"},
        "operation": {"type": "string", "enum": ["add", "remove"], "description": "Operation to perform"},
        "removeAllTags": {"type": "boolean", "description": "Remove all existing tags before adding new ones"},
    }, required=["contactIds", "tags", "operation"])
    async def bulk_update_contact_tags(self, args):
        body = pick(args, "contactIds", "tags", "operation", "removeAllTags", rename={"contactIds": "ids"})
        data = unwrap(await self.client.post("/contacts/tags/bulk", body))
        return {"success": True, "result": data,
                "message": f"Tags {args['operation']} operation applied to {len(args['contactIds'])} contacts"}

    @tool("bulk_update_contact_business", "Bulk update business association for multiple contacts", {
        "contactIds": CONTACT_IDS,
        "businessId": {"type": "string", "description": "Business ID (null to remove from business)"},
    }, required=["contactIds"])
    async def bulk_update_contact_business(self, args):
        body = {"ids": args["contactIds"], "businessId": args.get("businessId") or None}
        data = unwrap(await self.client.post("/contacts/business/bulk", body))
        return {"success": True, "result": data,
                "message": f"Business association updated for {len(args['contactIds'])} contacts"}

    # ── followers ────────────────────────────────────────────
    @tool("add_contact_followers", "Add followers to a contact", {
        "contactId": CONTACT_ID,
        "followers": {"type": "array", "items": {"type": "string"},
                      "description": "Array of user IDs to add as followers"},
    }, required=["contactId", "followers"])
    async def add_contact_followers(self, args):
        data = unwrap(await self.client.post(f"/contacts/{args['contactId']}/followers",
                                             {"followers": args["followers"]}))
        return {"success": True, "followers": data.get("followers", []),
                "followersAdded": data.get("followersAdded", []),
                "message": f"Added {len(args['followers'])} followers"}

    @tool("remove_contact_followers", "Remove followers from a contact", {
        "contactId": CONTACT_ID,
        "followers": {"type": "array", "items": {"type": "string"},
                      "description": "Array of user IDs to remove as followers"},
    }, required=["contactId", "followers"])
    async def remove_contact_followers(self, args):
        data = unwrap(await self.client.delete(f"/contacts/{args['contactId']}/followers",
                                               json={"followers": args["followers"]}))
        return {"success": True, "followers": data.get("followers", []),
                "followersRemoved": data.get("followersRemoved", []),
                "message": f"Removed {len(args['followers'])} followers"}

    # ── campaigns ────────────────────────────────────────────
    @tool("add_contact_to_campaign", "Add contact to a marketing campaign", {
        "contactId": CONTACT_ID,
        "campaignId": {"type": "string", "description": "Campaign ID"},
    }, required=["contactId", "campaignId"])
    async def add_contact_to_campaign(self, args):
        unwrap(await self.client.post(f"/contacts/{args['contactId']}/campaigns/{args['campaignId']}", {}))
        return {"success": True, "message": f"Contact added to campaign {args['campaignId']}"}

    @tool("remove_contact_from_campaign", "Remove contact from a specific campaign", {
        "contactId": CONTACT_ID,
        "campaignId": {"type": "string", "description": "Campaign ID"},
    }, required=["contactId", "campaignId"])
    async def remove_contact_from_campaign(self, args):
        unwrap(await self.client.delete(f"/contacts/{args['contactId']}/campaigns/{args['campaignId']}"))
        return {"success": True, "message": f"Contact removed from campaign {args['campaignId']}"}

    @tool("remove_contact_from_all_campaigns", "Remove contact from all campaigns",
          {"contactId": CONTACT_ID}, required=["contactId"])
    async def remove_contact_from_all_campaigns(self, args):
        unwrap(await self.client.delete(f"/contacts/{args['contactId']}/campaigns"))
        return {"success": True, "message": "Contact removed from all campaigns"}

    # ── workflows ────────────────────────────────────────────
    @tool("add_contact_to_workflow", "Add contact to a workflow", {
        "contactId": CONTACT_ID,
        "workflowId": {"type": "string", "description": "Workflow ID"},
        "eventStartTime": EVENT_START,
    }, required=["contactId", "workflowId"])
    async def add_contact_to_workflow(self, args):
        path = f"/contacts/{args['contactId']}/workflow/{args['workflowId']}"
        unwrap(await self.client.post(path, pick(args, "eventStartTime")))
        return {"success": True, "message": f"Contact added to workflow {args['workflowId']}"}

    @tool("remove_contact_from_workflow", "Remove contact from a workflow", {
        "contactId": CONTACT_ID,
        "workflowId": {"type": "string", "description": "Workflow ID"},
        "eventStartTime": EVENT_START,
    }, required=["contactId", "workflowId"])
    async def remove_contact_from_workflow(self, args):
        path = f"/contacts/{args['contactId']}/workflow/{args['workflowId']}"
        body = compact({"eventStartTime": args.get("eventStartTime")})
        unwrap(await self.client.delete(path, json=body or None))
        return {"success": True, "message": f"Contact removed from workflow {args['workflowId']}"}
