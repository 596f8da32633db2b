# invoices.py  –  invoice templates, schedules, invoices and estimates
#
# Results are the upstream payload unchanged.  Every request carries the
# location as altId with altType=location.

from ..marshal import passthrough, pick, without
from .base import ToolModule, tool

ALT_ID = {"type": "string", "description": "Location ID"}
PAGE = {
    "limit": {"type": "string", "description": "Number of results per page", "default": "10"},
    "offset": {"type": "string", "description": "Offset for pagination", "default": "0"},
}
LIST_FILTERS = ("status", "startAt", "endAt", "search", "paymentMode", "contactId")


def _s(description, **extra):
    return {"type": "string", "description": description, **extra}


def _scoped(args, *drop):
    """Arguments minus path ids, with altType pinned to location."""
    return {**without(args, *drop), "altType": "location"}


def _listing(args):
    return {"altId": args["altId"], "altType": "location",
            **pick(args, *LIST_FILTERS, defaults={"limit": "10", "offset": "0"})}


def _delivery(id_key, id_description):
    return {
        id_key: _s(id_description),
        "altId": ALT_ID,
        "emailTo": _s("Email address to send to"),
        "subject": _s("Email subject"),
        "message": _s("Email message"),
    }


class InvoiceTools(ToolModule):
    domain = "invoices"

    # ── templates ────────────────────────────────────────────
    @tool("create_invoice_template", "Create a new invoice template", {
        "altId": ALT_ID,
        "altType": {"type": "string", "enum": ["location"], "default": "location"},
        "name": _s("Template name"),
        "title": _s("Invoice title"),
        "currency": _s("Currency code"),
        "issueDate": _s("Issue date"),
        "dueDate": _s("Due date"),
    }, required=["name"], location="altId")
    async def create_invoice_template(self, args):
        return passthrough(await self.client.post("/invoices/template", _scoped(args)))

    @tool("list_invoice_templates", "List all invoice templates", {
        "altId": ALT_ID,
        **PAGE,
        "status": _s("Filter by status"),
        "search": _s("Search term"),
        "paymentMode": _s("Payment mode", enum=["default", "live", "test"]),
    }, required=["limit", "offset"], location="altId")
    async def list_invoice_templates(self, args):
        return passthrough(await self.client.get("/invoices/template", _listing(args)))

    @tool("get_invoice_template", "Get invoice template by ID", {
        "templateId": _s("Template ID"),
        "altId": ALT_ID,
    }, required=["templateId"], location="altId")
    async def get_invoice_template(self, args):
        path = f"/invoices/template/{args['templateId']}"
        return passthrough(await self.client.get(path, _scoped(args, "templateId")))

    @tool("update_invoice_template", "Update an existing invoice template", {
        "templateId": _s("Template ID"),
        "altId": ALT_ID,
        "name": _s("Template name"),
        "title": _s("Invoice title"),
        "currency": _s("Currency code"),
    }, required=["templateId"], location="altId")
    async def update_invoice_template(self, args):
        path = f"/invoices/template/{args['templateId']}"
        return passthrough(await self.client.put(path, _scoped(args, "templateId")))

    @tool("delete_invoice_template", "Delete an invoice template", {
        "templateId": _s("Template ID"),
        "altId": ALT_ID,
    }, required=["templateId"], location="altId")
    async def delete_invoice_template(self, args):
        path = f"/invoices/template/{args['templateId']}"
        return passthrough(await self.client.delete(path, params=_scoped(args, "templateId")))

    # ── schedules ────────────────────────────────────────────
    @tool("create_invoice_schedule", "Create a new invoice schedule", {
        "altId": ALT_ID,
        "name": _s("Schedule name"),
        "templateId": _s("Template ID"),
        "contactId": _s("Contact ID"),
        "frequency": _s("Schedule frequency"),
    }, required=["name", "templateId", "contactId"], location="altId")
    async def create_invoice_schedule(self, args):
        return passthrough(await self.client.post("/invoices/schedule", _scoped(args)))

    @tool("list_invoice_schedules", "List all invoice schedules", {
        "altId": ALT_ID,
        **PAGE,
        "status": _s("Filter by status"),
        "search": _s("Search term"),
    }, required=["limit", "offset"], location="altId")
    async def list_invoice_schedules(self, args):
        return passthrough(await self.client.get("/invoices/schedule", _listing(args)))

    @tool("get_invoice_schedule", "Get invoice schedule by ID", {
        "scheduleId": _s("Schedule ID"),
        "altId": ALT_ID,
    }, required=["scheduleId"], location="altId")
    async def get_invoice_schedule(self, args):
        path = f"/invoices/schedule/{args['scheduleId']}"
        return passthrough(await self.client.get(path, _scoped(args, "scheduleId")))

    # ── invoices ─────────────────────────────────────────────
    @tool("create_invoice", "Create a new invoice", {
        "altId": ALT_ID,
        "contactId": _s("Contact ID"),
        "title": _s("Invoice title"),
        "currency": _s("Currency code"),
        "issueDate": _s("Issue date"),
        "dueDate": _s("Due date"),
        "items": {"type": "array", "description": "Invoice items"},
    }, required=["contactId", "title"], location="altId")
    async def create_invoice(self, args):
        return passthrough(await self.client.post("/invoices/", _scoped(args)))

    @tool("list_invoices", "List all invoices", {
        "altId": ALT_ID,
        **PAGE,
        "status": _s("Filter by status"),
        "contactId": _s("Filter by contact ID"),
        "search": _s("Search term"),
    }, required=["limit", "offset"], location="altId")
    async def list_invoices(self, args):
        return passthrough(await self.client.get("/invoices/", _listing(args)))

    @tool("get_invoice", "Get invoice by ID", {
        "invoiceId": _s("Invoice ID"),
        "altId": ALT_ID,
    }, required=["invoiceId"], location="altId")
    async def get_invoice(self, args):
        return passthrough(await self.client.get(f"/invoices/{args['invoiceId']}", _scoped(args, "invoiceId")))

    @tool("send_invoice", "Send an invoice to customer", _delivery("invoiceId", "Invoice ID"),
          required=["invoiceId"], location="altId")
    async def send_invoice(self, args):
        path = f"/invoices/{args['invoiceId']}/send"
        return passthrough(await self.client.post(path, _scoped(args, "invoiceId")))

    # ── estimates ────────────────────────────────────────────
    @tool("create_estimate", "Create a new estimate", {
        "altId": ALT_ID,
        "contactId": _s("Contact ID"),
        "title": _s("Estimate title"),
        "currency": _s("Currency code"),
        "issueDate": _s("Issue date"),
        "validUntil": _s("Valid until date"),
    }, required=["contactId", "title"], location="altId")
    async def create_estimate(self, args):
        return passthrough(await self.client.post("/invoices/estimate", _scoped(args)))

    @tool("list_estimates", "List all estimates", {
        "altId": ALT_ID,
        **PAGE,
        "status": _s("Filter by status", enum=["all", "draft", "sent", "accepted", "declined", "invoiced", "viewed"]),
        "contactId": _s("Filter by contact ID"),
        "search": _s("Search term"),
    }, required=["limit", "offset"], location="altId")
    async def list_estimates(self, args):
        return passthrough(await self.client.get("/invoices/estimate/list", _listing(args)))

    @tool("send_estimate", "Send an estimate to customer", _delivery("estimateId", "Estimate ID"),
          required=["estimateId"], location="altId")
    async def send_estimate(self, args):
        path = f"/invoices/estimate/{args['estimateId']}/send"
        return passthrough(await self.client.post(path, _scoped(args, "estimateId")))

    @tool("create_invoice_from_estimate", "Create an invoice from an estimate", {
        "estimateId": _s("Estimate ID"),
        "altId": ALT_ID,
        "issueDate": _s("Invoice issue date"),
        "dueDate": _s("Invoice due date"),
    }, required=["estimateId"], location="altId")
    async def create_invoice_from_estimate(self, args):
        path = f"/invoices/estimate/{args['estimateId']}/invoice"
        return passthrough(await self.client.post(path, _scoped(args, "estimateId")))

    # ── numbering ────────────────────────────────────────────
    @tool("generate_invoice_number", "Generate a unique invoice number", {"altId": ALT_ID}, location="altId")
    async def generate_invoice_number(self, args):
        return passthrough(await self.client.get("/invoices/generate-invoice-number", _scoped(args)))

    @tool("generate_estimate_number", "Generate a unique estimate number", {"altId": ALT_ID}, location="altId")
    async def generate_estimate_number(self, args):
        return passthrough(await self.client.get("/invoices/estimate/number/generate", _scoped(args)))
