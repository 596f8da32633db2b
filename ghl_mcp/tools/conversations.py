# conversations.py  –  messaging: SMS/email, conversations, recordings, live chat
#
# Most of the conversations API is pinned to an older revision than the rest
# of the platform, so calls pass version=CONVERSATIONS_VERSION explicitly.

import base64
from typing import Any, Dict

from ..config import CONVERSATIONS_VERSION
from ..marshal import compact, pick, unwrap
from .base import ToolModule, tool

V = CONVERSATIONS_VERSION

MESSAGE_TYPES = ["TYPE_SMS", "TYPE_EMAIL", "TYPE_CALL", "TYPE_FACEBOOK",
                 "TYPE_INSTAGRAM", "TYPE_WHATSAPP", "TYPE_LIVE_CHAT"]
CALL_STATUSES = ["pending", "completed", "answered", "busy", "no-answer", "failed", "canceled", "voicemail"]
INBOUND_TYPES = ["SMS", "Email", "WhatsApp", "GMB", "IG", "FB", "Custom", "WebChat", "Live_Chat", "Call"]
STRINGS = {"type": "array", "items": {"type": "string"}}

DEFAULT_RECORDING_TYPE = "audio/x-wav"


def _id(description: str) -> Dict[str, Any]:
    return {"type": "string", "description": description}


def _strings(description: str) -> Dict[str, Any]:
    return {**STRINGS, "description": description}


def _summary(conv: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "conversationId": conv.get("id"),
        "contactName": conv.get("fullName") or conv.get("contactName"),
        "contactEmail": conv.get("email"),
        "contactPhone": conv.get("phone"),
        "lastMessageBody": conv.get("lastMessageBody"),
        "lastMessageType": conv.get("lastMessageType"),
        "unreadCount": conv.get("unreadCount"),
        "starred": conv.get("starred"),
    }


class ConversationTools(ToolModule):
    domain = "conversation"

    async def _send(self, body: Dict[str, Any]) -> Dict[str, Any]:
        return unwrap(await self.client.post("/conversations/messages", compact(body), version=V))

    # ── sending ──────────────────────────────────────────────
    @tool("send_sms", "Send an SMS message to a contact in GoHighLevel", {
        "contactId": _id("The unique ID of the contact to send SMS to"),
        "message": {"type": "string", "description": "The SMS message content to send", "maxLength": 1600},
        "fromNumber": _id("Optional: Phone number to send from (must be configured in GHL)"),
    }, required=["contactId", "message"], action="send SMS")
    async def send_sms(self, args):
        result = await self._send({"type": "SMS", **pick(args, "contactId", "message", "fromNumber")})
        return {
            "success": True,
            "messageId": result.get("messageId"),
            "conversationId": result.get("conversationId"),
            "message": f"SMS sent successfully to contact {args['contactId']}",
        }

    @tool("send_email", "Send an email message to a contact in GoHighLevel", {
        "contactId": _id("The unique ID of the contact to send email to"),
        "subject": _id("Email subject line"),
        "message": _id("Plain text email content"),
        "html": _id("HTML email content (optional, takes precedence over message)"),
        "emailFrom": {"type": "string", "description": "Optional: Email address to send from (must be configured in GHL)",
                      "format": "email"},
        "attachments": _strings("Optional: Array of attachment URLs"),
        "emailCc": _strings("Optional: Array of CC email addresses"),
        "emailBcc": _strings("Optional: Array of BCC email addresses"),
    }, required=["contactId", "subject"])
    async def send_email(self, args):
        body = {"type": "Email", **pick(args, "contactId", "subject", "message", "html", "emailFrom",
                                        "emailCc", "emailBcc", "attachments")}
        result = await self._send(body)
        return {
            "success": True,
            "messageId": result.get("messageId"),
            "conversationId": result.get("conversationId"),
            "emailMessageId": result.get("emailMessageId"),
            "message": f"Email sent successfully to contact {args['contactId']}",
        }

    # ── conversations ────────────────────────────────────────
    @tool("search_conversations", "Search conversations in GoHighLevel with various filters", {
        "contactId": _id("Filter conversations for a specific contact"),
        "query": _id("Search query to filter conversations"),
        "status": {"type": "string", "enum": ["all", "read", "unread", "starred", "recents"],
                   "description": "Filter conversations by read status", "default": "all"},
        "limit": {"type": "number", "description": "Maximum number of conversations to return (default: 20, max: 100)",
                  "minimum": 1, "maximum": 100, "default": 20},
        "assignedTo": _id("Filter by user ID assigned to conversations"),
    }, location=True)
    async def search_conversations(self, args):
        params = pick(args, "locationId", "contactId", "query", "assignedTo",
                      defaults={"status": "all", "limit": 20})
        data = unwrap(await self.client.get("/conversations/search", params, version=V))
        conversations = data.get("conversations", [])
        total = data.get("total", len(conversations))
        return {
            "success": True,
            "conversations": conversations,
            "total": total,
            "message": f"Found {len(conversations)} conversations ({total} total)",
        }

    @tool("get_conversation", "Get detailed conversation information including message history", {
        "conversationId": _id("The unique ID of the conversation to retrieve"),
        "limit": {"type": "number", "description": "Maximum number of messages to return (default: 20)",
                  "minimum": 1, "maximum": 100, "default": 20},
        "messageTypes": {"type": "array", "items": {"type": "string", "enum": MESSAGE_TYPES},
                         "description": "Filter messages by type (optional)"},
    }, required=["conversationId"])
    async def get_conversation(self, args):
        conversation_id = args["conversationId"]
        conversation = unwrap(await self.client.get(f"/conversations/{conversation_id}", version=V))
        params = {"limit": args.get("limit") or 20}
        if args.get("messageTypes"):
            params["type"] = ",".join(args["messageTypes"])
        page = unwrap(await self.client.get(f"/conversations/{conversation_id}/messages", params, version=V))
        # the endpoint nests the page one level down: {messages: {messages, nextPage}}
        if isinstance(page.get("messages"), dict):
            page = page["messages"]
        messages = page.get("messages", [])
        return {
            "success": True,
            "conversation": conversation,
            "messages": messages,
            "hasMoreMessages": bool(page.get("nextPage")),
            "message": f"Retrieved conversation with {len(messages)} messages",
        }

    @tool("create_conversation", "Create a new conversation with a contact", {
        "contactId": _id("The unique ID of the contact to create conversation with"),
    }, required=["contactId"], location=True)
    async def create_conversation(self, args):
        body = pick(args, "locationId", "contactId")
        conversation = unwrap(await self.client.post("/conversations/", body, version=V), "conversation", required=True)
        return {
            "success": True,
            "conversationId": conversation.get("id"),
            "message": f"Conversation created successfully with contact {args['contactId']}",
        }

    @tool("update_conversation", "Update conversation properties (star, mark read, etc.)", {
        "conversationId": _id("The unique ID of the conversation to update"),
        "starred": {"type": "boolean", "description": "Star or unstar the conversation"},
        "unreadCount": {"type": "number", "description": "Set the unread message count (0 to mark as read)",
                        "minimum": 0},
    }, required=["conversationId"], location=True)
    async def update_conversation(self, args):
        body = pick(args, "locationId", "starred", "unreadCount")
        path = f"/conversations/{args['conversationId']}"
        conversation = unwrap(await self.client.put(path, body, version=V), "conversation", required=True)
        return {"success": True, "conversation": conversation, "message": "Conversation updated successfully"}

    @tool("get_recent_messages", "Get recent messages across all conversations for monitoring", {
        "limit": {"type": "number", "description": "Maximum number of conversations to check (default: 10)",
                  "minimum": 1, "maximum": 50, "default": 10},
        "status": {"type": "string", "enum": ["all", "unread"], "description": "Filter by conversation status",
                   "default": "unread"},
    }, location=True)
    async def get_recent_messages(self, args):
        status = args.get("status") if args.get("status") in ("all", "unread") else "unread"
        params = {
            "locationId": args["locationId"],
            "limit": args.get("limit") or 10,
            "status": status,
            "sortBy": "last_message_date",
            "sort": "desc",
        }
        data = unwrap(await self.client.get("/conversations/search", params, version=V))
        conversations = [_summary(c) for c in data.get("conversations", [])]
        return {
            "success": True,
            "conversations": conversations,
            "message": f"Retrieved {len(conversations)} recent conversations",
        }

    @tool("delete_conversation", "Delete a conversation permanently", {
        "conversationId": _id("The unique ID of the conversation to delete"),
    }, required=["conversationId"])
    async def delete_conversation(self, args):
        unwrap(await self.client.delete(f"/conversations/{args['conversationId']}", version=V))
        return {"success": True, "message": "Conversation deleted successfully"}

    # ── messages ─────────────────────────────────────────────
    @tool("get_email_message", "Get detailed email message information by email message ID", {
        "emailMessageId": _id("The unique ID of the email message to retrieve"),
    }, required=["emailMessageId"])
    async def get_email_message(self, args):
        data = unwrap(await self.client.get(f"/conversations/messages/email/{args['emailMessageId']}"))
        return {
            "success": True,
            "emailMessage": data.get("emailMessage", data),
            "message": f"Retrieved email message with ID {args['emailMessageId']}",
        }

    @tool("get_message", "Get detailed message information by message ID", {
        "messageId": _id("The unique ID of the message to retrieve"),
    }, required=["messageId"])
    async def get_message(self, args):
        data = unwrap(await self.client.get(f"/conversations/messages/{args['messageId']}", version=V))
        return {
            "success": True,
            "messageData": data["message"] if isinstance(data.get("message"), dict) else data,
            "message": f"Retrieved message with ID {args['messageId']}",
        }

    @tool("upload_message_attachments", "Upload file attachments for use in messages", {
        "conversationId": _id("The conversation ID to upload attachments for"),
        "attachmentUrls": _strings("Array of file URLs to upload as attachments"),
    }, required=["conversationId", "attachmentUrls"], location=True)
    async def upload_message_attachments(self, args):
        body = pick(args, "conversationId", "locationId", "attachmentUrls")
        data = unwrap(await self.client.post("/conversations/messages/upload", body, version=V))
        return {
            "success": True,
            "uploadedFiles": data.get("uploadedFiles"),
            "message": f"Attachments uploaded successfully to conversation {args['conversationId']}",
        }

    @tool("update_message_status", "Update the delivery status of a message", {
        "messageId": _id("The unique ID of the message to update"),
        "status": {"type": "string", "enum": ["delivered", "failed", "pending", "read"],
                   "description": "New status for the message"},
        "error": {"type": "object", "description": "Error details if status is failed", "properties": {
            "code": {"type": "string"},
            "type": {"type": "string"},
            "message": {"type": "string"},
        }},
        "emailMessageId": _id("Email message ID if updating email status"),
        "recipients": _strings("Email delivery status for additional recipients"),
    }, required=["messageId", "status"])
    async def update_message_status(self, args):
        body = pick(args, "status", "error", "emailMessageId", "recipients")
        unwrap(await self.client.put(f"/conversations/messages/{args['messageId']}/status", body, version=V))
        return {"success": True, "message": f"Message status updated to {args['status']} successfully"}

    # ── manual message creation ──────────────────────────────
    @tool("add_inbound_message", "Manually add an inbound message to a conversation", {
        "type": {"type": "string", "enum": INBOUND_TYPES, "description": "Type of inbound message to add"},
        "conversationId": _id("The conversation to add the message to"),
        "conversationProviderId": _id("Conversation provider ID for the message"),
        "message": _id("Message content (for text-based messages)"),
        "attachments": _strings("Array of attachment URLs"),
        "html": _id("HTML content for email messages"),
        "subject": _id("Subject line for email messages"),
        "emailFrom": _id("From email address"),
        "emailTo": _id("To email address"),
        "emailCc": _strings("CC email addresses"),
        "emailBcc": _strings("BCC email addresses"),
        "emailMessageId": _id("Email message ID for threading"),
        "altId": _id("External provider message ID"),
        "date": _id("Date of the message (ISO format)"),
        "call": {"type": "object", "description": "Call details for call-type messages", "properties": {
            "to": _id("Called number"),
            "from": _id("Caller number"),
            "status": {"type": "string", "enum": CALL_STATUSES, "description": "Call status"},
        }},
    }, required=["type", "conversationId", "conversationProviderId"])
    async def add_inbound_message(self, args):
        body = pick(args, "type", "conversationId", "conversationProviderId", "message", "attachments",
                    "html", "subject", "emailFrom", "emailTo", "emailCc", "emailBcc", "emailMessageId",
                    "altId", "date", "call")
        data = unwrap(await self.client.post("/conversations/messages/inbound", body, version=V))
        return {
            "success": True,
            "messageId": data.get("messageId"),
            "conversationId": data.get("conversationId"),
            "message": f"Inbound message added successfully to conversation {args['conversationId']}",
        }

    @tool("add_outbound_call", "Manually add an outbound call record to a conversation", {
        "conversationId": _id("The conversation to add the call to"),
        "conversationProviderId": _id("Conversation provider ID for the call"),
        "to": _id("Called phone number"),
        "from": _id("Caller phone number"),
        "status": {"type": "string", "enum": CALL_STATUSES, "description": "Call completion status"},
        "attachments": _strings("Array of attachment URLs"),
        "altId": _id("External provider call ID"),
        "date": _id("Date of the call (ISO format)"),
    }, required=["conversationId", "conversationProviderId", "to", "from", "status"])
    async def add_outbound_call(self, args):
        body = {
            "type": "Call",
            **pick(args, "conversationId", "conversationProviderId", "attachments", "altId", "date"),
            "call": pick(args, "to", "from", "status"),
        }
        data = unwrap(await self.client.post("/conversations/messages/outbound", body, version=V))
        return {
            "success": True,
            "messageId": data.get("messageId"),
            "conversationId": data.get("conversationId"),
            "message": f"Outbound call added successfully to conversation {args['conversationId']}",
        }

    # ── recordings & transcriptions ──────────────────────────
    @tool("get_message_recording", "Get call recording audio for a message", {
        "messageId": _id("The unique ID of the call message to get recording for"),
    }, required=["messageId"], location=True)
    async def get_message_recording(self, args):
        path = f"/conversations/messages/{args['messageId']}/locations/{args['locationId']}/recording"
        envelope = await self.client.get(path, version=V, response_type="bytes")
        audio = unwrap(envelope)
        return {
            "success": True,
            "recording": base64.b64encode(audio).decode("ascii"),
            "contentType": envelope.get("contentType") or DEFAULT_RECORDING_TYPE,
            "message": f"Retrieved call recording for message {args['messageId']}",
        }

    @tool("get_message_transcription", "Get call transcription text for a message", {
        "messageId": _id("The unique ID of the call message to get transcription for"),
    }, required=["messageId"], location=True)
    async def get_message_transcription(self, args):
        path = f"/conversations/locations/{args['locationId']}/messages/{args['messageId']}/transcription"
        data = unwrap(await self.client.get(path, version=V))
        return {
            "success": True,
            "transcriptions": data if isinstance(data, list) else data.get("transcriptions", []),
            "message": f"Retrieved call transcription for message {args['messageId']}",
        }

    @tool("download_transcription", "Download call transcription as a text file", {
        "messageId": _id("The unique ID of the call message to download transcription for"),
    }, required=["messageId"], location=True)
    async def download_transcription(self, args):
        path = f"/conversations/locations/{args['locationId']}/messages/{args['messageId']}/transcription/download"
        text = unwrap(await self.client.get(path, version=V, response_type="text"))
        return {
            "success": True,
            "transcription": text,
            "message": f"Downloaded call transcription for message {args['messageId']}",
        }

    # ── scheduling ───────────────────────────────────────────
    @tool("cancel_scheduled_message", "Cancel a scheduled message before it is sent", {
        "messageId": _id("The unique ID of the scheduled message to cancel"),
    }, required=["messageId"])
    async def cancel_scheduled_message(self, args):
        data = unwrap(await self.client.delete(f"/conversations/messages/{args['messageId']}/schedule", version=V))
        return {
            "success": True,
            "status": data.get("status"),
            "message": data.get("message") or "Scheduled message cancelled successfully",
        }

    @tool("cancel_scheduled_email", "Cancel a scheduled email before it is sent", {
        "emailMessageId": _id("The unique ID of the scheduled email to cancel"),
    }, required=["emailMessageId"])
    async def cancel_scheduled_email(self, args):
        path = f"/conversations/messages/email/{args['emailMessageId']}/schedule"
        data = unwrap(await self.client.delete(path, version=V))
        return {
            "success": True,
            "status": data.get("status"),
            "message": data.get("message") or "Scheduled email cancelled successfully",
        }

    # ── live chat ────────────────────────────────────────────
    @tool("live_chat_typing", "Send typing indicator for live chat conversations", {
        "visitorId": _id("Unique visitor ID for the live chat session"),
        "conversationId": _id("The conversation ID for the live chat"),
        "isTyping": {"type": "boolean", "description": "Whether the agent is currently typing"},
    }, required=["visitorId", "conversationId", "isTyping"], location=True,
          action="send live chat typing indicator")
    async def live_chat_typing(self, args):
        body = pick(args, "locationId", "isTyping", "visitorId", "conversationId")
        data = unwrap(await self.client.post("/conversations/providers/live-chat/typing", body, version=V))
        state = "enabled" if args["isTyping"] else "disabled"
        return {
            "success": bool(data.get("success", True)),
            "message": f"Live chat typing indicator {state} successfully",
        }
